"""AutoPlayDriver - synthetic clicks on the cursor at a fixed interval."""
from __future__ import annotations

import logging
from typing import Callable

from tick_points.scheduler import Periodic, Scheduler
from tick_points.state import SessionState
from tick_points.types import ClickResult

logger = logging.getLogger(__name__)

ClickFn = Callable[[int, int], ClickResult]


class AutoPlayDriver:
    """Clicks ``next_expected`` every ``interval`` ticks while enabled.

    It always targets the cursor, so it can only speed up correct progress.
    Re-enabling resumes from the current cursor.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        state: SessionState,
        click: ClickFn,
        interval: int = 10,
    ) -> None:
        self._scheduler = scheduler
        self._state = state
        self._click = click
        self._interval = interval
        self._handle: Periodic | None = None
        self._generation = 0

    @property
    def active(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        self.stop()
        self._generation = self._state.generation
        self._handle = self._scheduler.call_every(
            self._interval, self._fire, name="autoplay"
        )
        logger.debug("auto-play started in generation %d", self._generation)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("auto-play stopped")

    def _fire(self) -> None:
        state = self._state
        if (
            not state.is_current(self._generation)
            or not state.auto_play_enabled
            or not state.running
            or state.exhausted
        ):
            self.stop()
            return
        self._click(state.next_expected, self._generation)
        if state.exhausted:
            self.stop()
