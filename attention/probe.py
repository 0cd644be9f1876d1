"""Environment probe: windows, window properties and audio streams"""

import re
import time
from typing import Callable, List, Optional

from .errors import ProbeFailure
from .models import AudioStream, WindowInfo
from .shell import CommandRunner, run_command


FULLSCREEN_PROPERTY = '_net_wm_state(atom) = '
FULLSCREEN_MARKER = '_net_wm_state_fullscreen'

# Sink input properties that identify the application owning a stream
AUDIO_IDENTITY_KEYS = (
    'application.name',
    'application.process.binary',
    'application.id',
    'media.name',
    'node.name',
)

_SINK_INPUT_HEADER = re.compile(r'^\s*sink input #(\d+)', re.IGNORECASE)
_PROPERTY_LINE = re.compile(r'^\s*([\w.\-]+)\s*=\s*"(.*)"\s*$')


def parse_window_list(output: str) -> List[WindowInfo]:
    """
    Parse `wmctrl -lpx` output

    Each line looks like: <id> <desktop> <pid> <wm_class> <host> <title...>
    Lines that don't fit are skipped.
    """
    windows = []

    for line in output.splitlines():
        parts = line.split(None, 5)
        if len(parts) < 5:
            continue

        window_id, _desktop, pid, wm_class = parts[:4]
        title = parts[5] if len(parts) > 5 else ''

        try:
            pid = int(pid)
        except ValueError:
            continue

        windows.append(WindowInfo(
            window_id=window_id,
            pid=pid,
            identity=f"{wm_class} {title}".strip()
        ))

    return windows


def parse_sink_inputs(output: str) -> List[AudioStream]:
    """Parse `pactl list sink-inputs` output into one AudioStream per sink input"""
    streams = []
    current: Optional[AudioStream] = None

    for line in output.splitlines():
        header = _SINK_INPUT_HEADER.match(line)
        if header:
            current = AudioStream(index=header.group(1))
            streams.append(current)
            continue

        if current is None:
            continue

        stripped = line.strip()
        lowered = stripped.lower()

        if lowered.startswith('corked:'):
            current.is_corked = lowered.split(':', 1)[1].strip() == 'yes'
            continue

        prop = _PROPERTY_LINE.match(stripped)
        if prop:
            current.properties[prop.group(1).lower()] = prop.group(2)

    for stream in streams:
        stream.is_live = stream.properties.get('stream.is-live', '').lower() == 'true'
        stream.identity = ' '.join(
            stream.properties[key] for key in AUDIO_IDENTITY_KEYS if key in stream.properties
        )

    return streams


class EnvironmentProbe:
    """Read-only queries against the running desktop"""

    def __init__(self, runner: CommandRunner = run_command,
                 sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.monotonic):
        self.runner = runner
        self.sleep = sleep
        self.clock = clock

    def list_windows(self) -> List[WindowInfo]:
        """Enumerate currently managed windows"""
        output = self.runner(['wmctrl', '-lpx'], 'list windows', ProbeFailure)
        return parse_window_list(output)

    def window_exists(self, app_identifier: str, pid: int) -> bool:
        return any(w.matches(app_identifier, pid) for w in self.list_windows())

    def find_window_id(self, app_identifier: str, pid: int, interval: float,
                       timeout: Optional[float] = None) -> str:
        """
        Wait until a window of the launched process shows up

        Args:
            app_identifier: Text matched against the window class and title
            pid: Process id of the launched application
            interval: Seconds between checks
            timeout: Give up after this many seconds (None waits forever)

        Returns:
            Identifier of the first matching window
        """
        deadline = None if timeout is None else self.clock() + timeout

        while True:
            for window in self.list_windows():
                if window.matches(app_identifier, pid):
                    return window.window_id

            if deadline is not None and self.clock() >= deadline:
                raise ProbeFailure(
                    f"No window for {app_identifier} (pid {pid}) appeared within {timeout:g} seconds"
                )

            self.sleep(interval)

    def is_fullscreen(self, window_id: str) -> bool:
        output = self.runner(
            ['xprop', '-id', window_id], 'check if the window is fullscreen', ProbeFailure
        ).lower()

        for line in output.splitlines():
            if line.startswith(FULLSCREEN_PROPERTY) and FULLSCREEN_MARKER in line:
                return True

        return False

    def list_audio_streams(self) -> List[AudioStream]:
        output = self.runner(
            ['pactl', 'list', 'sink-inputs'], 'check if the app is playing audio', ProbeFailure
        )
        return parse_sink_inputs(output)

    def is_playing_audio(self, app_identifier: str) -> bool:
        """True if a live, uncorked stream belongs to the application"""
        return any(
            s.matches(app_identifier) and s.is_audible() for s in self.list_audio_streams()
        )
