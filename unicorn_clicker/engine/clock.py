"""Clocks — the time source behind the timer scheduler."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class MonotonicClock:
    """Wall clock for real hosts (immune to system time changes)."""

    def now(self) -> float:
        return time.monotonic()


class VirtualClock:
    """Manually advanced clock, so timer behaviour can be tested without waiting."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError(f"cannot move a clock backwards ({seconds})")
        self._now += seconds
        return self._now

    def set(self, t: float) -> None:
        if t < self._now:
            raise ValueError(f"cannot move a clock backwards ({self._now} -> {t})")
        self._now = t
