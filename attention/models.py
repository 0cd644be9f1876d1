"""Data models for tracking state, windows and audio streams"""

from dataclasses import dataclass, field
from enum import Enum


class ScreenBlankingState(Enum):
    """Whether display power management is active (On) or suppressed (Off)"""
    ON = 'on'
    OFF = 'off'


class FullscreenState(Enum):
    NOT_FULLSCREEN = 'not_fullscreen'
    FULLSCREEN = 'fullscreen'


class TrackAudioState(Enum):
    ON = 'on'
    OFF = 'off'


class TrackingMode(Enum):
    """Which condition keeps the screen awake"""
    AUDIO = 'audio'
    FULLSCREEN = 'fullscreen'

    @classmethod
    def from_flag(cls, flag: str) -> 'TrackingMode':
        """Map a command-line flag such as '--track-audio' to a mode"""
        flags = {
            '--track-audio': cls.AUDIO,
            '--track-fullscreen': cls.FULLSCREEN,
        }
        try:
            return flags[flag]
        except KeyError:
            raise ValueError(f"Unknown flag {flag}")


class LoopPhase(Enum):
    LAUNCHING = 'launching'
    WAITING_FOR_WINDOW = 'waiting_for_window'
    MONITORING = 'monitoring'
    SHUTTING_DOWN = 'shutting_down'


@dataclass
class State:
    """Last observed values, mutated once per tick by the tracker"""
    screen_blanking: ScreenBlankingState = ScreenBlankingState.ON
    fullscreen: FullscreenState = FullscreenState.NOT_FULLSCREEN
    audio: TrackAudioState = TrackAudioState.OFF

    @property
    def is_blanking_suppressed(self) -> bool:
        return self.screen_blanking == ScreenBlankingState.OFF


def _matches(identity: str, app_identifier: str) -> bool:
    return app_identifier.lower() in identity.lower()


@dataclass
class WindowInfo:
    """One entry of the window list"""
    window_id: str
    pid: int
    identity: str  # WM class and title

    def matches(self, app_identifier: str, pid: int) -> bool:
        """Same process and a case-insensitive substring match on the identity"""
        return self.pid == pid and _matches(self.identity, app_identifier)


@dataclass
class AudioStream:
    """One sink input reported by the audio server"""
    index: str
    identity: str = ''
    is_live: bool = False
    is_corked: bool = False
    properties: dict = field(default_factory=dict)

    def matches(self, app_identifier: str) -> bool:
        return _matches(self.identity, app_identifier)

    def is_audible(self) -> bool:
        """Live and not paused"""
        return self.is_live and not self.is_corked
