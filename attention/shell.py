"""Running the external desktop tools the probe and actuator rely on"""

import subprocess
from typing import Callable, List, Type

from .errors import AttentionError


# (argv, purpose, error_cls) -> stdout
CommandRunner = Callable[[List[str], str, Type[AttentionError]], str]


def run_command(argv: List[str], purpose: str, error_cls: Type[AttentionError]) -> str:
    """
    Run a command and return its standard output

    Args:
        argv: Command and arguments
        purpose: What the command is for, used in diagnostics
        error_cls: Error raised when the command cannot run or fails

    Returns:
        Decoded stdout of the command
    """
    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            errors='replace'
        )
    except OSError as e:
        raise error_cls(f"Failed to run {argv[0]} trying to {purpose}: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise error_cls(f"Command {argv[0]} returned error trying to {purpose}: {stderr}")

    return result.stdout
