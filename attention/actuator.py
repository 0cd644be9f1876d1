"""Turning display power management off and on, with desktop notifications"""

from .errors import ActuationFailure
from .models import ScreenBlankingState, State
from .shell import CommandRunner, run_command
from . import ui


INHIBITED_MESSAGE = "⚠️ Power Management is inhibited by {app}"
RESTORED_MESSAGE = "⚠️ Power Management is back to normal"


class PowerActuator:
    """Edge-triggered power management changes; no-op when already in the target state"""

    def __init__(self, runner: CommandRunner = run_command):
        self.runner = runner

    def notify(self, message: str, purpose: str):
        self.runner(['notify-send', message], purpose, ActuationFailure)

    def set_power_management(self, enabled: bool):
        """Toggle DPMS signaling"""
        flag = '+dpms' if enabled else '-dpms'
        purpose = 'power up' if enabled else 'power down'
        self.runner(['xset', flag], purpose, ActuationFailure)

    def suppress_blanking(self, app_identifier: str, state: State):
        """Disable screen blanking if it is currently enabled"""
        if state.screen_blanking != ScreenBlankingState.ON:
            return

        ui.print_status("Turning off screen blanking..")
        self.notify(
            INHIBITED_MESSAGE.format(app=app_identifier),
            'send a power management disabling notification'
        )
        self.set_power_management(False)
        state.screen_blanking = ScreenBlankingState.OFF

    def restore_blanking(self, state: State):
        """Re-enable screen blanking if it is currently suppressed"""
        if state.screen_blanking != ScreenBlankingState.OFF:
            return

        ui.print_status("Turning on screen blanking..")
        self.notify(RESTORED_MESSAGE, 'send a power management enabling notification')
        self.set_power_management(True)
        state.screen_blanking = ScreenBlankingState.ON
