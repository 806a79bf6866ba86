"""Clock - elapsed-time accumulator for the running session."""
from __future__ import annotations

from tick_points.scheduler import Periodic, Scheduler
from tick_points.state import SessionState


class Clock:
    def __init__(
        self,
        scheduler: Scheduler,
        state: SessionState,
        increment: int = 10,
        interval: int = 1,
    ) -> None:
        if increment <= 0:
            raise ValueError("increment must be positive")
        self._scheduler = scheduler
        self._state = state
        self._increment = increment
        self._interval = interval
        self._handle: Periodic | None = None
        self._generation = 0

    @property
    def increment(self) -> int:
        return self._increment

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Start ticking for the current generation, replacing any old interval."""
        self.freeze()
        self._generation = self._state.generation
        self._handle = self._scheduler.call_every(
            self._interval, self.tick, name="clock"
        )

    def tick(self) -> None:
        if not self._state.is_current(self._generation) or not self._state.running:
            self.freeze()
            return
        self._state.elapsed += self._increment

    def freeze(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
