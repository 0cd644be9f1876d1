"""Edge detection for the fullscreen and audio tracking modes"""

from .models import FullscreenState, State, TrackAudioState
from . import ui


class Tracker:
    """
    Maps repeated probe samples to power management transitions

    Each evaluate_* call acts only when the freshly observed value differs
    from the one stored in the state, so repeated samples cause no
    notifications or platform calls.
    """

    def __init__(self, probe, actuator):
        self.probe = probe
        self.actuator = actuator

    def evaluate_fullscreen_tracking(self, app_identifier: str, window_id: str, state: State):
        """One fullscreen-mode tick"""
        if self.probe.is_fullscreen(window_id):
            if state.fullscreen == FullscreenState.NOT_FULLSCREEN:
                ui.print_info(f"{app_identifier} is now fullscreen..")
                state.fullscreen = FullscreenState.FULLSCREEN
                self.actuator.suppress_blanking(app_identifier, state)
        elif state.fullscreen == FullscreenState.FULLSCREEN:
            ui.print_info(f"{app_identifier} is no longer fullscreen..")
            state.fullscreen = FullscreenState.NOT_FULLSCREEN
            self.actuator.restore_blanking(state)

    def evaluate_audio_tracking(self, app_identifier: str, state: State):
        """One audio-mode tick"""
        if self.probe.is_playing_audio(app_identifier):
            if state.audio == TrackAudioState.OFF:
                ui.print_info(f"{app_identifier} is now playing audio..")
                state.audio = TrackAudioState.ON
                self.actuator.suppress_blanking(app_identifier, state)
        elif state.audio == TrackAudioState.ON:
            ui.print_info(f"{app_identifier} is no longer playing audio..")
            state.audio = TrackAudioState.OFF
            self.actuator.restore_blanking(state)
