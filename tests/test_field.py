"""Tests for PointField spawning and decay."""
import random

import pytest

from tick_points.config import PointsConfig
from tick_points.field import PointField
from tick_points.scheduler import Scheduler
from tick_points.state import SessionState
from tick_points.types import Bounds, Point, Status


def make_field(amount=3, seed=7):
    scheduler = Scheduler()
    state = SessionState()
    state.begin(amount)
    state.transition(Status.RUNNING)
    field = PointField(scheduler, state, PointsConfig(), random.Random(seed))
    field.spawn(amount)
    return scheduler, state, field


class TestSpawn:

    def test_spawns_one_point_per_number(self):
        _, _, field = make_field(5)
        assert len(field) == 5
        assert sorted(p.number for p in field) == [1, 2, 3, 4, 5]

    def test_spawn_order_is_descending(self):
        scheduler = Scheduler()
        field = PointField(scheduler, SessionState())
        spawned = field.spawn(4)
        assert [p.number for p in spawned] == [4, 3, 2, 1]

    def test_fresh_points(self):
        _, _, field = make_field(3)
        for point in field:
            assert not point.clicked
            assert point.remaining_decay == 200
            assert point.opacity == 100

    def test_locations_inside_bounds(self):
        scheduler = Scheduler()
        field = PointField(scheduler, SessionState(), rng=random.Random(1))
        bounds = Bounds(100, 80)
        for point in field.spawn(200, bounds):
            assert 1 <= point.location.x <= 100 - 52
            assert 1 <= point.location.y <= 80 - 52

    def test_seeded_placement_is_reproducible(self):
        _, _, a = make_field(10, seed=42)
        _, _, b = make_field(10, seed=42)
        assert a.points() == b.points()

    def test_duplicate_number_rejected(self):
        _, _, field = make_field(3)
        with pytest.raises(KeyError):
            field.spawn(1)

    def test_clear_empties_field(self):
        _, _, field = make_field(3)
        field.clear()
        assert len(field) == 0
        assert field.points() == ()


class TestCollection:

    def test_get_missing_raises(self):
        _, _, field = make_field(2)
        with pytest.raises(KeyError, match="No point numbered 9"):
            field.get(9)

    def test_remove(self):
        _, _, field = make_field(3)
        field.remove(2)
        assert 2 not in field
        assert not field.has(2)
        assert len(field) == 2

    def test_remove_missing_is_noop(self):
        _, _, field = make_field(3)
        field.remove(9)
        assert len(field) == 3

    def test_replace_unknown_raises(self):
        _, _, field = make_field(1)
        point = field.get(1)
        field.remove(1)
        with pytest.raises(KeyError):
            field.replace(point)

    def test_points_are_immutable(self):
        _, _, field = make_field(1)
        with pytest.raises(AttributeError):
            field.get(1).clicked = True  # type: ignore[misc]


class TestDecay:

    def test_begin_marks_clicked(self):
        _, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        assert field.get(1).clicked
        assert field.decaying() == [1]

    def test_each_step_decrements(self):
        scheduler, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        scheduler.step()
        point = field.get(1)
        assert point.remaining_decay == 190
        assert point.opacity == 95

        scheduler.run(9)
        point = field.get(1)
        assert point.remaining_decay == 100
        assert point.opacity == 50
        assert point.seconds_left == pytest.approx(1.0)

    def test_removed_after_twenty_steps(self):
        scheduler, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        scheduler.run(19)
        assert field.get(1).remaining_decay == 10

        scheduler.step()
        assert 1 not in field
        assert field.decaying() == []
        assert scheduler.pending() == 0

    def test_unclicked_points_untouched(self):
        scheduler, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        scheduler.run(20)
        assert field.get(2) == Point(
            number=2,
            location=field.get(2).location,
        )

    def test_interleaved_decays_are_independent(self):
        scheduler, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        scheduler.run(5)
        field.begin_decay(2, state.generation)
        scheduler.run(15)
        assert 1 not in field
        assert field.get(2).remaining_decay == 50
        scheduler.run(5)
        assert 2 not in field

    def test_game_over_stops_decay(self):
        scheduler, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        scheduler.run(4)
        state.transition(Status.LOST)
        scheduler.run(30)
        point = field.get(1)
        assert point.remaining_decay == 160
        assert point.opacity == 80
        assert field.decaying() == []

    def test_stale_generation_never_mutates(self):
        scheduler, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        scheduler.run(3)

        state.begin(3)
        state.transition(Status.RUNNING)
        field.clear()
        field.spawn(3)
        fresh = field.get(1)

        scheduler.run(30)
        assert field.get(1) == fresh
        assert scheduler.pending() == 0

    def test_stale_task_does_not_touch_new_task(self):
        scheduler, state, field = make_field(3)
        field.begin_decay(1, state.generation)
        scheduler.run(5)

        state.begin(3)
        state.transition(Status.RUNNING)
        field.clear()
        field.spawn(3)
        field.begin_decay(1, state.generation)

        scheduler.run(15)
        assert field.get(1).remaining_decay == 50
        assert field.decaying() == [1]
        scheduler.run(5)
        assert 1 not in field
