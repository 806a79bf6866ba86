"""ClickValidator - accepts only the next expected number."""
from __future__ import annotations

import logging

from tick_points.field import PointField
from tick_points.state import SessionState
from tick_points.types import ClickResult, Status

logger = logging.getLogger(__name__)


class ClickValidator:
    """Decides each click against the session state and applies the result.

    A click is accepted only when it names the cursor value and that point is
    still on the field. Anything else while running, including a point that
    was already cleared or a number outside ``1..amount``, ends the session.
    """

    def __init__(self, state: SessionState, field: PointField) -> None:
        self.state = state
        self.field = field

    def validate(self, number: int, generation: int) -> ClickResult:
        state = self.state
        if not state.is_current(generation) or not state.running:
            return ClickResult.IGNORED

        if number == state.next_expected and number <= state.amount:
            state.advance_cursor()
            self.field.begin_decay(number, state.generation)
            logger.debug("generation %d: accepted %d", state.generation, number)
            if state.exhausted:
                return ClickResult.CLEARED
            return ClickResult.ACCEPTED

        state.transition(Status.LOST)
        logger.info(
            "generation %d: clicked %d while expecting %d",
            state.generation, number, state.next_expected,
        )
        return ClickResult.MISSED
