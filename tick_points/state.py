"""SessionState - status machine, generation counter and cursor."""
from __future__ import annotations

import logging

from tick_points.types import InvalidTransitionError, SessionError, Status

logger = logging.getLogger(__name__)

# Allowed status edges within one generation. Leaving a terminal status
# takes a new generation (begin()).
TRANSITIONS: dict[Status, frozenset[Status]] = {
    Status.READY: frozenset({Status.RUNNING}),
    Status.RUNNING: frozenset({Status.WON, Status.LOST}),
    Status.WON: frozenset(),
    Status.LOST: frozenset(),
}


class SessionState:
    """Single source of truth for one play-through at a time.

    ``generation`` identifies the live play-through. Scheduled work captures
    it and compares with :meth:`is_current` before touching shared state.
    """

    def __init__(self) -> None:
        self.status = Status.READY
        self.amount = 0
        self.next_expected = 1
        self.generation = 0
        self.elapsed = 0
        self.auto_play_enabled = False

    @property
    def game_over(self) -> bool:
        """Raised once the player misses; read by in-flight decay steps."""
        return self.status is Status.LOST

    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    @property
    def exhausted(self) -> bool:
        """True once every number of the session has been accepted."""
        return self.next_expected > self.amount

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def begin(self, amount: int) -> int:
        """Open a new generation in Ready and return its number."""
        self.generation += 1
        self.status = Status.READY
        self.amount = amount
        self.next_expected = 1
        self.elapsed = 0
        self.auto_play_enabled = False
        return self.generation

    def transition(self, target: Status) -> None:
        if target not in TRANSITIONS[self.status]:
            raise InvalidTransitionError(self.status, target)
        logger.debug(
            "generation %d: %s -> %s", self.generation, self.status.name, target.name
        )
        self.status = target

    def advance_cursor(self) -> int:
        if self.next_expected > self.amount:
            raise SessionError(f"cursor is already past amount {self.amount}")
        self.next_expected += 1
        return self.next_expected
