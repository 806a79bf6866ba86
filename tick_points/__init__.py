"""tick-points - A sequential point-clicking session on a fixed-tick scheduler."""

import logging

from tick_points.autoplay import AutoPlayDriver
from tick_points.clock import Clock
from tick_points.config import PointsConfig
from tick_points.controller import SessionController
from tick_points.field import PointField
from tick_points.scheduler import Periodic, Scheduler, Timer
from tick_points.state import SessionState
from tick_points.types import (
    Bounds,
    ClickResult,
    InvalidAmountError,
    InvalidTransitionError,
    Location,
    NoActiveSessionError,
    Point,
    PointSnapshot,
    SessionError,
    SessionSnapshot,
    Status,
)
from tick_points.validator import ClickValidator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SessionController",
    "SessionState",
    "PointField",
    "ClickValidator",
    "AutoPlayDriver",
    "Clock",
    "Scheduler",
    "Timer",
    "Periodic",
    "PointsConfig",
    "Status",
    "ClickResult",
    "Point",
    "PointSnapshot",
    "Location",
    "Bounds",
    "SessionSnapshot",
    "SessionError",
    "InvalidAmountError",
    "NoActiveSessionError",
    "InvalidTransitionError",
]
