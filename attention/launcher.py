"""Starting the application to watch"""

import subprocess
from typing import List, Optional

from .errors import LaunchFailure


def build_argv(app_name: str, app_args: Optional[List[str]] = None) -> List[str]:
    """Trailing arguments are joined with spaces and passed as a single argument"""
    argv = [app_name]
    if app_args:
        argv.append(' '.join(app_args))
    return argv


def launch_app(app_name: str, app_args: Optional[List[str]] = None) -> int:
    """
    Launch the application detached from our output

    Returns:
        Process id of the launched application
    """
    argv = build_argv(app_name, app_args)

    try:
        process = subprocess.Popen(
            argv,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL
        )
    except OSError as e:
        raise LaunchFailure(f"Couldn't launch {app_name}: {e}") from e

    return process.pid
