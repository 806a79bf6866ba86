"""PointField - the active points of a session and their timed decay."""
from __future__ import annotations

import dataclasses
import logging
import random
from typing import Iterator

from tick_points.config import PointsConfig
from tick_points.scheduler import Periodic, Scheduler
from tick_points.state import SessionState
from tick_points.types import Bounds, Location, Point

logger = logging.getLogger(__name__)


class DecayTask:
    """Steps one clicked point towards removal.

    Bound to the generation it was started in; once that generation is no
    longer live the task stops without touching the field.
    """

    def __init__(self, field: PointField, number: int, generation: int) -> None:
        self.field = field
        self.number = number
        self.generation = generation
        self.steps_done = 0
        self.handle: Periodic | None = None

    def step(self) -> None:
        field = self.field
        state = field.state
        if not state.is_current(self.generation):
            logger.debug(
                "dropping decay of %d from stale generation %d",
                self.number, self.generation,
            )
            self.stop()
            return
        if state.game_over or not field.has(self.number):
            self.stop()
            return

        point = field.get(self.number)
        field.replace(
            dataclasses.replace(
                point,
                remaining_decay=point.remaining_decay - field.config.decay_step,
                opacity=max(point.opacity - field.config.opacity_step, 0),
            )
        )
        self.steps_done += 1
        if self.steps_done >= field.config.decay_steps:
            self.stop()
            field.remove(self.number)
            logger.debug("point %d decayed", self.number)

    def stop(self) -> None:
        if self.handle is not None:
            self.handle.cancel()
        self.field._forget(self)


class PointField:
    def __init__(
        self,
        scheduler: Scheduler,
        state: SessionState,
        config: PointsConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.state = state
        self.config = config if config is not None else PointsConfig()
        self.rng = rng if rng is not None else random.Random()
        self._points: dict[int, Point] = {}
        self._tasks: dict[int, DecayTask] = {}

    @property
    def generation(self) -> int:
        return self.state.generation

    def spawn(self, amount: int, bounds: Bounds | None = None) -> list[Point]:
        """Place points numbered ``amount`` down to 1 at random locations.

        Locations may overlap.
        """
        if bounds is None:
            bounds = self.config.bounds
        diameter = self.config.point_diameter
        spawned: list[Point] = []
        for number in range(amount, 0, -1):
            if number in self._points:
                raise KeyError(f"Point {number} already exists")
            location = Location(
                x=self.rng.randint(1, bounds.width - diameter),
                y=self.rng.randint(1, bounds.height - diameter),
            )
            point = Point(
                number=number,
                location=location,
                remaining_decay=self.config.decay_budget,
                opacity=self.config.opacity_start,
            )
            self._points[number] = point
            spawned.append(point)
        return spawned

    def begin_decay(self, number: int, generation: int) -> DecayTask:
        point = self.get(number)
        self.replace(dataclasses.replace(point, clicked=True))
        task = DecayTask(self, number, generation)
        task.handle = self.scheduler.call_every(
            self.config.decay_ticks, task.step, name=f"decay:{number}"
        )
        self._tasks[number] = task
        return task

    def get(self, number: int) -> Point:
        try:
            return self._points[number]
        except KeyError:
            raise KeyError(f"No point numbered {number}") from None

    def has(self, number: int) -> bool:
        return number in self._points

    def replace(self, point: Point) -> None:
        if point.number not in self._points:
            raise KeyError(f"No point numbered {point.number}")
        self._points[point.number] = point

    def remove(self, number: int) -> None:
        self._points.pop(number, None)

    def clear(self) -> None:
        self._points.clear()
        self._tasks.clear()

    def _forget(self, task: DecayTask) -> None:
        if self._tasks.get(task.number) is task:
            del self._tasks[task.number]

    def decaying(self) -> list[int]:
        """Numbers with a decay task still in flight."""
        return list(self._tasks)

    def points(self) -> tuple[Point, ...]:
        return tuple(self._points.values())

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points())

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, number: object) -> bool:
        return number in self._points
