"""Timer scheduler — deferred callbacks with explicit cancellation.

Nothing here runs on its own thread. The host loop calls ``tick()`` and
every timer whose deadline has passed fires on the caller's context, in
deadline order (timers armed for the same instant fire in arming order).
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable

from unicorn_clicker.engine.clock import Clock, MonotonicClock

logger = logging.getLogger(__name__)


class TimerHandle:
    """Cancellation token for one armed callback."""

    __slots__ = ("deadline", "label", "_callback", "_cancelled", "_fired")

    def __init__(self, deadline: float, callback: Callable[[], None], label: str = "") -> None:
        self.deadline = deadline
        self.label = label
        self._callback = callback
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._fired)

    def cancel(self) -> bool:
        """Stop the callback from ever running. Returns False if too late."""
        if not self.pending:
            return False
        self._cancelled = True
        return True

    def _run(self) -> None:
        self._fired = True
        self._callback()


class TimerScheduler:
    """Min-heap of pending timers driven by an injectable clock."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock if clock is not None else MonotonicClock()
        self._heap: list[tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self.clock.now()

    def call_later(self, delay: float, callback: Callable[[], None], label: str = "") -> TimerHandle:
        """Arm ``callback`` to run once ``delay`` seconds from now."""
        deadline = self.now() + max(delay, 0.0)
        handle = TimerHandle(deadline, callback, label)
        heapq.heappush(self._heap, (deadline, next(self._seq), handle))
        logger.debug("Armed %s for t=%.3f", label or "timer", deadline)
        return handle

    def tick(self) -> int:
        """Fire every due timer. Returns how many callbacks actually ran."""
        now = self.now()
        ran = 0
        while self._heap and self._heap[0][0] <= now:
            _, _, handle = heapq.heappop(self._heap)
            if handle.cancelled:
                logger.debug("Dropped cancelled %s", handle.label or "timer")
                continue
            handle._run()
            ran += 1
        return ran

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, h in self._heap if h.pending)

    def next_deadline(self) -> float | None:
        deadlines = [d for d, _, h in self._heap if h.pending]
        return min(deadlines) if deadlines else None
