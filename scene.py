# scene.py
"""
Start/stop/step control for a snowfall scene.

SnowScene ties a SnowField to a display surface and a scheduler. It owns
the periodic timer handle: start creates it, stop cancels it, and a
second stop does nothing.
"""
import logging
from typing import Any, Dict, Optional

from background import BackgroundArt, WINTER_VILLAGE
from constants import FRAME_INTERVAL_MS
from simulation import FieldStatus, SnowField

# --- Data Contracts ---
#
# class SnowScene:
#   - __init__(self, field: SnowField, surface, scheduler, params: Dict[str, Any],
#              background: Optional[BackgroundArt] = None, log_throttle: int = 100):
#     - Inputs:
#       - params: The "scene" section of config.json.
#         - "frame_interval_ms": int
#         - "show_background": bool
#     - Side Effects: None until start() is called.
#
#   - start(self, manual: bool = False) -> None:
#     - Side Effects: Clears the surface, resets the field, draws the
#       background and, unless manual, schedules step() periodically.
#     - Raises: ValueError if the background does not fit the surface.
#
#   - stop(self) -> None:
#     - Side Effects: Cancels the timer if it is armed. Idempotent.
#
#   - step(self) -> FieldStatus:
#     - Side Effects: One simulation frame plus a status line update.


class SnowScene:
    """
    The control surface of a running snowfall.
    """
    def __init__(
        self,
        field: SnowField,
        surface,
        scheduler,
        params: Optional[Dict[str, Any]] = None,
        background: Optional[BackgroundArt] = WINTER_VILLAGE,
        log_throttle: int = 100,
    ):
        params = params if params is not None else {}
        self.field = field
        self.surface = surface
        self.scheduler = scheduler
        self.interval_ms = int(params.get('frame_interval_ms', FRAME_INTERVAL_MS))
        self.show_background = bool(params.get('show_background', True))
        self.background = background
        self.log_throttle = log_throttle
        self._timer: Optional[Any] = None

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self, manual: bool = False) -> None:
        """
        Resets everything and begins a new snowfall.

        Args:
            manual (bool): If True, no timer is armed and frames only
                advance through step().
        """
        self.stop()
        self.surface.clear()
        # Overlays were wiped with the surface; forget the stale handles.
        for flake in self.field.flakes:
            flake.handle = None
        self.field.reset()

        if self.show_background and self.background is not None:
            rows, _ = self.surface.dimensions()
            self.surface.draw_background(self.background, self.background.start_row(rows))

        self._publish(self.field.status())

        if not manual:
            self._timer = self.scheduler.schedule(self.interval_ms, self.step)
            logging.info(f"Snowfall started, one frame every {self.interval_ms} ms.")
        else:
            logging.info("Snowfall started in manual mode.")

    def stop(self) -> None:
        """Cancels the frame timer. Does nothing if it is not running."""
        if self._timer is None:
            return
        timer, self._timer = self._timer, None
        self.scheduler.cancel(timer)
        logging.info("Snowfall timer stopped.")

    def step(self) -> FieldStatus:
        """Advances one frame, with or without the timer."""
        status = self.field.step(self.surface)
        self._publish(status)

        # Hot loops must throttle logs
        if status.frame % self.log_throttle == 0:
            logging.info(f"Frame {status.frame} | {status.format()}")
        return status

    def _publish(self, status: FieldStatus) -> None:
        self.surface.set_status(status.format())
