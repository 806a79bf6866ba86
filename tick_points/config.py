"""Session configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_points.types import Bounds


@dataclass(frozen=True)
class PointsConfig:
    """Immutable timing and geometry settings for a session.

    Every ``*_ms`` value must be a whole number of ticks.

    Attributes:
        tick_ms: Length of one scheduler tick in milliseconds.
        clock_increment: Units added to ``elapsed`` per clock tick.
        decay_budget: Starting ``remaining_decay`` of a point.
        decay_step: Units removed from ``remaining_decay`` per decay step.
        opacity_start: Starting opacity of a point.
        opacity_step: Opacity removed per decay step.
        decay_interval_ms: Delay between two decay steps.
        grace_ms: Delay between the final correct click and the win.
        autoplay_interval_ms: Delay between two synthetic clicks.
        bounds: Playfield size in pixels.
        point_diameter: Size of a point in pixels.
    """

    tick_ms: int = 100
    clock_increment: int = 10
    decay_budget: int = 200
    decay_step: int = 10
    opacity_start: int = 100
    opacity_step: int = 5
    decay_interval_ms: int = 100
    grace_ms: int = 2000
    autoplay_interval_ms: int = 1000
    bounds: Bounds = field(default_factory=lambda: Bounds(702, 452))
    point_diameter: int = 52

    def __post_init__(self) -> None:
        for name in (
            "tick_ms", "clock_increment", "decay_budget", "decay_step",
            "opacity_start", "opacity_step", "decay_interval_ms",
            "grace_ms", "autoplay_interval_ms", "point_diameter",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("decay_interval_ms", "grace_ms", "autoplay_interval_ms"):
            if getattr(self, name) % self.tick_ms:
                raise ValueError(
                    f"{name}={getattr(self, name)} is not a multiple of "
                    f"tick_ms={self.tick_ms}"
                )
        if self.decay_budget % self.decay_step:
            raise ValueError("decay_budget must be a multiple of decay_step")
        if (
            self.bounds.width - self.point_diameter < 1
            or self.bounds.height - self.point_diameter < 1
        ):
            raise ValueError("bounds are too small to hold a single point")

    def ticks(self, ms: int) -> int:
        """Convert a millisecond delay to whole ticks."""
        if ms % self.tick_ms:
            raise ValueError(f"{ms}ms is not a multiple of tick_ms={self.tick_ms}")
        return ms // self.tick_ms

    @property
    def decay_steps(self) -> int:
        return self.decay_budget // self.decay_step

    @property
    def decay_ticks(self) -> int:
        return self.ticks(self.decay_interval_ms)

    @property
    def grace_ticks(self) -> int:
        return self.ticks(self.grace_ms)

    @property
    def autoplay_ticks(self) -> int:
        return self.ticks(self.autoplay_interval_ms)
