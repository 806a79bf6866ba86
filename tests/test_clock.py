"""Tests for the session Clock."""
import pytest

from tick_points.clock import Clock
from tick_points.scheduler import Scheduler
from tick_points.state import SessionState
from tick_points.types import Status


def running_state():
    state = SessionState()
    state.begin(3)
    state.transition(Status.RUNNING)
    return state


def test_accumulates_while_running():
    scheduler = Scheduler()
    state = running_state()
    clock = Clock(scheduler, state)
    clock.start()
    scheduler.run(10)
    assert state.elapsed == 100
    assert clock.running


def test_manual_tick():
    state = running_state()
    clock = Clock(Scheduler(), state, increment=7)
    clock.start()
    clock.tick()
    assert state.elapsed == 7


def test_freezes_when_status_leaves_running():
    scheduler = Scheduler()
    state = running_state()
    clock = Clock(scheduler, state)
    clock.start()
    scheduler.run(3)
    state.transition(Status.LOST)
    scheduler.run(10)
    assert state.elapsed == 30
    assert not clock.running


def test_freeze_stops_interval():
    scheduler = Scheduler()
    state = running_state()
    clock = Clock(scheduler, state)
    clock.start()
    clock.freeze()
    scheduler.run(10)
    assert state.elapsed == 0
    assert scheduler.pending() == 0


def test_restart_keeps_single_interval():
    scheduler = Scheduler()
    state = running_state()
    clock = Clock(scheduler, state)
    clock.start()
    scheduler.run(5)

    state.begin(3)
    state.transition(Status.RUNNING)
    clock.start()
    scheduler.run(5)
    assert state.elapsed == 50
    assert scheduler.pending() == 1


def test_stale_generation_freezes():
    scheduler = Scheduler()
    state = running_state()
    clock = Clock(scheduler, state)
    clock.start()
    state.begin(3)
    state.transition(Status.RUNNING)
    scheduler.run(5)
    assert state.elapsed == 0
    assert not clock.running


def test_invalid_increment():
    with pytest.raises(ValueError):
        Clock(Scheduler(), SessionState(), increment=0)
