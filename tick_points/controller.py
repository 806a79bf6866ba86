"""SessionController - composition root and public API of a session."""
from __future__ import annotations

import logging
import os
import random

from tick_points.autoplay import AutoPlayDriver
from tick_points.clock import Clock
from tick_points.config import PointsConfig
from tick_points.field import PointField
from tick_points.scheduler import Scheduler, Timer
from tick_points.state import SessionState
from tick_points.types import (
    ClickResult,
    InvalidAmountError,
    NoActiveSessionError,
    SessionSnapshot,
    Status,
)
from tick_points.validator import ClickValidator

logger = logging.getLogger(__name__)


class SessionController:
    """Runs one play-through at a time on top of a fixed-tick scheduler.

    ``start`` opens a new generation. Work scheduled by an older generation
    (decay steps, the win delay, clock and auto-play intervals) checks its
    generation when it fires and does nothing if it is no longer current.

    Status-gated calls never raise: ``click`` outside a running session
    returns ``ClickResult.IGNORED`` and ``toggle_auto_play`` returns the
    unchanged flag. Malformed arguments raise.
    """

    def __init__(
        self,
        config: PointsConfig | None = None,
        seed: int | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.config = config if config is not None else PointsConfig()
        if scheduler is None:
            scheduler = Scheduler(self.config.tick_ms)
        elif scheduler.tick_ms != self.config.tick_ms:
            raise ValueError(
                f"scheduler ticks every {scheduler.tick_ms}ms, "
                f"config expects {self.config.tick_ms}ms"
            )
        self.scheduler = scheduler

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self.state = SessionState()
        self.field = PointField(self.scheduler, self.state, self.config, self._rng)
        self.validator = ClickValidator(self.state, self.field)
        self.clock = Clock(
            self.scheduler,
            self.state,
            increment=self.config.clock_increment,
        )
        self.autoplay = AutoPlayDriver(
            self.scheduler,
            self.state,
            self.click,
            interval=self.config.autoplay_ticks,
        )
        self._last_amount: int | None = None
        self._win_timer: Timer | None = None

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def generation(self) -> int:
        return self.state.generation

    # -- Public operations --

    def start(self, amount: int) -> int:
        """Start (or restart) a session with ``amount`` points.

        Returns the new generation.
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
            raise InvalidAmountError(amount)
        self._halt()
        generation = self.state.begin(amount)
        self.field.clear()
        self.field.spawn(amount, self.config.bounds)
        self.state.transition(Status.RUNNING)
        self.clock.start()
        self._last_amount = amount
        logger.info("generation %d: started with %d points", generation, amount)
        return generation

    def reset(self) -> int:
        """Start again with the last amount."""
        if self._last_amount is None:
            raise NoActiveSessionError()
        return self.start(self._last_amount)

    def clear(self) -> None:
        """Abandon the session and go back to Ready with an empty field."""
        self._halt()
        generation = self.state.begin(0)
        self.field.clear()
        logger.info("generation %d: cleared", generation)

    def click(self, number: int, generation: int | None = None) -> ClickResult:
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(
                f"point number must be an int, got {type(number).__name__}"
            )
        if generation is None:
            generation = self.state.generation
        result = self.validator.validate(number, generation)
        if result is ClickResult.CLEARED:
            self._schedule_win()
        elif result is ClickResult.MISSED:
            self._halt()
        return result

    def toggle_auto_play(self) -> bool:
        state = self.state
        if not state.running:
            return state.auto_play_enabled
        state.auto_play_enabled = not state.auto_play_enabled
        if state.auto_play_enabled:
            self.autoplay.start()
        else:
            self.autoplay.stop()
        return state.auto_play_enabled

    def tick(self) -> None:
        """Advance the clock by one step by hand."""
        if self.state.running:
            self.clock.tick()

    def snapshot(self) -> SessionSnapshot:
        state = self.state
        return SessionSnapshot(
            status=state.status,
            elapsed=state.elapsed,
            next_expected=state.next_expected,
            auto_play_enabled=state.auto_play_enabled,
            points=self.field.points(),
            amount=state.amount,
            generation=state.generation,
        )

    # -- Pacing --

    def step(self) -> int:
        return self.scheduler.step()

    def run(self, n: int) -> None:
        self.scheduler.run(n)

    def advance(self, ms: int) -> None:
        self.scheduler.advance(ms)

    # -- Internal --

    def _halt(self) -> None:
        self.clock.freeze()
        self.autoplay.stop()
        if self._win_timer is not None:
            self._win_timer.cancel()
            self._win_timer = None

    def _schedule_win(self) -> None:
        generation = self.state.generation
        self._win_timer = self.scheduler.call_later(
            self.config.grace_ticks,
            lambda: self._commit_win(generation),
            name="win",
        )

    def _commit_win(self, generation: int) -> None:
        self._win_timer = None
        state = self.state
        if not state.is_current(generation) or not state.running:
            logger.debug("discarding win of generation %d", generation)
            return
        state.transition(Status.WON)
        self._halt()
        logger.info(
            "generation %d: all cleared in %.1fs",
            generation, state.elapsed / 100,
        )
