"""Shared value types and errors for the points session."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Status(str, Enum):
    READY = "READY"
    RUNNING = "RUNNING"
    WON = "ALL_CLEARED"
    LOST = "GAME_OVER"

    @property
    def label(self) -> str:
        """Banner text shown above the playfield."""
        if self is Status.WON:
            return "ALL CLEARED"
        if self is Status.LOST:
            return "GAME OVER"
        return "LET'S PLAY"

    @property
    def terminal(self) -> bool:
        return self in (Status.WON, Status.LOST)


class ClickResult(str, Enum):
    """Outcome of a single click as seen by the caller."""

    IGNORED = "ignored"
    ACCEPTED = "accepted"
    CLEARED = "cleared"
    MISSED = "missed"


@dataclass(frozen=True, slots=True)
class Location:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Bounds:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Point:
    """One numbered target. Immutable; updates replace the whole value."""

    number: int
    location: Location
    clicked: bool = False
    remaining_decay: int = 200
    opacity: int = 100

    @property
    def seconds_left(self) -> float:
        return self.remaining_decay / 100


PointSnapshot = Point


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    status: Status
    elapsed: int
    next_expected: int
    auto_play_enabled: bool
    points: tuple[Point, ...]
    amount: int
    generation: int

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed / 100

    def as_dict(self) -> dict[str, Any]:
        """JSON-compatible view of the snapshot."""
        data = dataclasses.asdict(self)
        data["status"] = self.status.value
        return data


class SessionError(Exception):
    """Base class for contract violations against the session API."""


class InvalidAmountError(SessionError, ValueError):
    """Raised when start() is given something other than a positive int."""

    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__(f"invalid amount: {amount!r}")


class NoActiveSessionError(SessionError, RuntimeError):
    """Raised when an operation needs a previous start()."""

    def __init__(self, message: str = "no active session") -> None:
        super().__init__(message)


class InvalidTransitionError(SessionError):
    """Raised on a status change the session state machine does not allow."""

    def __init__(self, source: Status, target: Status) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Cannot go from {source.name} to {target.name}")
