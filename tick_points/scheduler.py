"""Scheduler - fixed-timestep delayed callbacks that can be abandoned."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

Callback = Callable[[], None]


@dataclass(eq=False)
class Timer:
    """One-shot countdown. Fires when remaining reaches 0, then retires."""

    name: str
    remaining: int
    callback: Callback
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not self.cancelled and self.remaining > 0


@dataclass(eq=False)
class Periodic:
    """Recurring timer. Fires every `interval` ticks until cancelled."""

    name: str
    interval: int
    callback: Callback
    elapsed: int = 0
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not self.cancelled


Handle = Timer | Periodic


class Scheduler:
    def __init__(self, tick_ms: int = 100) -> None:
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self._tick_ms = tick_ms
        self._tick_number = 0
        self._handles: list[Handle] = []

    @property
    def tick_ms(self) -> int:
        return self._tick_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def call_later(self, ticks: int, callback: Callback, name: str = "") -> Timer:
        if ticks < 1:
            raise ValueError("delay must be at least one tick")
        timer = Timer(name=name, remaining=ticks, callback=callback)
        self._handles.append(timer)
        return timer

    def call_every(
        self, interval: int, callback: Callback, name: str = ""
    ) -> Periodic:
        if interval < 1:
            raise ValueError("interval must be at least one tick")
        periodic = Periodic(name=name, interval=interval, callback=callback)
        self._handles.append(periodic)
        return periodic

    def pending(self) -> int:
        """Number of handles that can still fire."""
        return sum(1 for h in self._handles if h.active)

    def step(self) -> int:
        self._tick_number += 1
        # Handles scheduled by a callback first fire on a later tick.
        for handle in list(self._handles):
            if handle.cancelled:
                continue
            if isinstance(handle, Timer):
                handle.remaining -= 1
                if handle.remaining <= 0:
                    handle.callback()
            else:
                handle.elapsed += 1
                if handle.elapsed >= handle.interval:
                    handle.elapsed = 0
                    handle.callback()
        self._handles = [h for h in self._handles if h.active]
        return self._tick_number

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

    def advance(self, ms: int) -> None:
        """Run as many whole ticks as fit in `ms` milliseconds."""
        self.run(ms // self._tick_ms)

    def run_forever(self, stop_when: Callable[[], bool]) -> None:
        """Step in real time until `stop_when()` returns True."""
        dt = self._tick_ms / 1000
        while not stop_when():
            start = time.monotonic()
            self.step()
            sleep_time = dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)
