"""Configuration for attention, read from environment variables"""

import os
from typing import Optional

from .errors import UsageError


class Config:
    """Polling cadences and limits, overridable through the environment"""

    def __init__(self, environ: Optional[dict] = None):
        env = os.environ if environ is None else environ

        # Fast polling while waiting for the window to show up
        self.discovery_interval = self._parse_seconds(
            'ATTENTION_DISCOVERY_INTERVAL', env.get('ATTENTION_DISCOVERY_INTERVAL', '0.2')
        )

        # Slow polling once the window is being monitored
        self.poll_interval = self._parse_seconds(
            'ATTENTION_POLL_INTERVAL', env.get('ATTENTION_POLL_INTERVAL', '1.0')
        )

        # None means wait for the window forever
        timeout = env.get('ATTENTION_WINDOW_TIMEOUT', '').strip()
        self.window_timeout = self._parse_seconds('ATTENTION_WINDOW_TIMEOUT', timeout) if timeout else None

    def _parse_seconds(self, name: str, value: str) -> float:
        """Parse a non-negative number of seconds"""
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            raise UsageError(f"Invalid value for {name}: {value!r}. Expected a number of seconds")

        if seconds < 0:
            raise UsageError(f"Invalid value for {name}: {value!r}. Must not be negative")

        return seconds

    def describe(self) -> str:
        timeout = f"{self.window_timeout:g}s" if self.window_timeout is not None else "none"
        return (
            f"discovery every {self.discovery_interval:g}s, "
            f"polling every {self.poll_interval:g}s, "
            f"window timeout {timeout}"
        )

