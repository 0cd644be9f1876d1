"""Shared fakes for the attention tests"""

import pytest

from attention.actuator import PowerActuator
from attention.config import Config


class FakeRunner:
    """Records commands and answers them from a script"""

    def __init__(self, outputs=None, failures=None):
        self.calls = []
        self.outputs = outputs or {}
        self.failures = failures or {}

    def __call__(self, argv, purpose, error_cls):
        self.calls.append(list(argv))
        key = argv[0]
        if key in self.failures:
            raise error_cls(self.failures[key])

        output = self.outputs.get(key, '')
        if isinstance(output, list):
            return output.pop(0) if output else ''
        return output

    def commands(self, name):
        return [c for c in self.calls if c[0] == name]


class ScriptedProbe:
    """Probe returning pre-recorded samples, one per call"""

    def __init__(self, fullscreen=None, audio=None, windows_open=None, window_id='0x01'):
        self.fullscreen = list(fullscreen or [])
        self.audio = list(audio or [])
        self.windows_open = list(windows_open or [])
        self.window_id = window_id
        self.calls = []

    def is_fullscreen(self, window_id):
        self.calls.append('is_fullscreen')
        return self.fullscreen.pop(0)

    def is_playing_audio(self, app_identifier):
        self.calls.append('is_playing_audio')
        return self.audio.pop(0)

    def window_exists(self, app_identifier, pid):
        self.calls.append('window_exists')
        return self.windows_open.pop(0)

    def find_window_id(self, app_identifier, pid, interval, timeout=None):
        self.calls.append('find_window_id')
        return self.window_id


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def actuator(runner):
    return PowerActuator(runner=runner)


@pytest.fixture
def fast_config():
    return Config(environ={'ATTENTION_DISCOVERY_INTERVAL': '0', 'ATTENTION_POLL_INTERVAL': '0'})
