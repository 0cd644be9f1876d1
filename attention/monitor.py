"""Poll loop driving launch, window discovery and monitoring"""

import time
from typing import Callable, List, Optional

from .actuator import PowerActuator
from .config import Config
from .errors import ActuationFailure, AttentionError
from .launcher import launch_app
from .models import LoopPhase, State, TrackingMode
from .probe import EnvironmentProbe
from .tracker import Tracker
from . import ui


class Monitor:
    """Runs one application from launch until its window closes"""

    def __init__(
        self,
        app_identifier: str,
        mode: TrackingMode,
        app_args: Optional[List[str]] = None,
        probe: Optional[EnvironmentProbe] = None,
        actuator: Optional[PowerActuator] = None,
        launcher: Callable[[str, Optional[List[str]]], int] = launch_app,
        config: Optional[Config] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.app_identifier = app_identifier
        self.mode = mode
        self.app_args = app_args or []
        self.probe = probe or EnvironmentProbe()
        self.actuator = actuator or PowerActuator()
        self.tracker = Tracker(self.probe, self.actuator)
        self.launcher = launcher
        self.config = config or Config()
        self.sleep = sleep

        self.state = State()
        self.phase = LoopPhase.LAUNCHING
        self.pid: Optional[int] = None
        self.window_id: Optional[str] = None

    def run(self) -> State:
        """Launch, wait for the window, then monitor until it closes"""
        ui.print_info(f"Using {self.config.describe()}")
        self.launch()
        self.wait_for_window()

        self.phase = LoopPhase.MONITORING
        try:
            while self.tick():
                self.sleep(self.config.poll_interval)
        except ActuationFailure:
            raise
        except BaseException:
            self._restore_after_failure()
            raise

        return self.state

    def launch(self) -> int:
        self.phase = LoopPhase.LAUNCHING
        self.pid = self.launcher(self.app_identifier, self.app_args)
        ui.print_success(f"Launched {self.app_identifier} (pid {self.pid})")
        return self.pid

    def wait_for_window(self) -> str:
        self.phase = LoopPhase.WAITING_FOR_WINDOW
        self.window_id = self.probe.find_window_id(
            self.app_identifier,
            self.pid,
            interval=self.config.discovery_interval,
            timeout=self.config.window_timeout
        )
        ui.print_info(f"Found {self.app_identifier}'s window {self.window_id}, tracking {self.mode.value}")
        return self.window_id

    def tick(self) -> bool:
        """
        One monitoring iteration

        Returns:
            False once the window has closed and power management is restored
        """
        if self.is_window_closed():
            self.shutdown()
            return False

        if self.mode == TrackingMode.AUDIO:
            self.tracker.evaluate_audio_tracking(self.app_identifier, self.state)
        else:
            self.tracker.evaluate_fullscreen_tracking(self.app_identifier, self.window_id, self.state)

        return True

    def is_window_closed(self) -> bool:
        return not self.probe.window_exists(self.app_identifier, self.pid)

    def shutdown(self):
        """Forced restore regardless of the tracked state, then stop"""
        ui.print_info(f"{self.app_identifier}'s window is closed..")
        self.actuator.restore_blanking(self.state)
        self.phase = LoopPhase.SHUTTING_DOWN
        ui.print_status("Shutting down..")

    def _restore_after_failure(self):
        if not self.state.is_blanking_suppressed:
            return

        try:
            self.actuator.restore_blanking(self.state)
        except AttentionError as e:
            ui.print_warning(f"Could not restore power management: {e}")
