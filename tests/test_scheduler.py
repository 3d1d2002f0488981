"""Tests for the timer scheduler and virtual clock."""

import pytest

from unicorn_clicker.engine.clock import VirtualClock
from unicorn_clicker.engine.scheduler import TimerScheduler


def _scheduler() -> tuple[TimerScheduler, VirtualClock]:
    clock = VirtualClock()
    return TimerScheduler(clock), clock


def test_timer_fires_only_once_due():
    timers, clock = _scheduler()
    fired = []
    timers.call_later(1.0, lambda: fired.append("a"))

    clock.set(0.99)
    assert timers.tick() == 0
    assert fired == []

    clock.set(1.0)
    assert timers.tick() == 1
    assert fired == ["a"]

    clock.advance(5.0)
    assert timers.tick() == 0
    assert fired == ["a"]


def test_timers_fire_in_deadline_order():
    timers, clock = _scheduler()
    fired = []
    timers.call_later(3.0, lambda: fired.append("late"))
    timers.call_later(1.0, lambda: fired.append("early"))
    timers.call_later(2.0, lambda: fired.append("mid"))

    clock.advance(10.0)
    timers.tick()
    assert fired == ["early", "mid", "late"]


def test_same_deadline_fires_in_arming_order():
    timers, clock = _scheduler()
    fired = []
    for name in "abc":
        timers.call_later(1.0, lambda n=name: fired.append(n))
    clock.advance(1.0)
    timers.tick()
    assert fired == ["a", "b", "c"]


def test_cancelled_timer_never_fires():
    timers, clock = _scheduler()
    fired = []
    handle = timers.call_later(1.0, lambda: fired.append("x"))
    assert handle.cancel()
    assert handle.cancelled
    assert not handle.pending

    clock.advance(2.0)
    assert timers.tick() == 0
    assert fired == []


def test_cancel_after_fire_is_noop():
    timers, clock = _scheduler()
    handle = timers.call_later(0.5, lambda: None)
    clock.advance(0.5)
    timers.tick()
    assert handle.fired
    assert not handle.cancel()


def test_pending_count_and_next_deadline():
    timers, clock = _scheduler()
    assert timers.next_deadline() is None
    a = timers.call_later(2.0, lambda: None)
    timers.call_later(4.0, lambda: None)
    assert timers.pending_count == 2
    assert timers.next_deadline() == 2.0

    a.cancel()
    assert timers.pending_count == 1
    assert timers.next_deadline() == 4.0


def test_callback_may_arm_another_timer():
    timers, clock = _scheduler()
    fired = []

    def first() -> None:
        fired.append("first")
        timers.call_later(1.0, lambda: fired.append("second"))

    timers.call_later(1.0, first)
    clock.advance(1.0)
    timers.tick()
    assert fired == ["first"]
    clock.advance(1.0)
    timers.tick()
    assert fired == ["first", "second"]


def test_virtual_clock_cannot_go_backwards():
    clock = VirtualClock(5.0)
    with pytest.raises(ValueError):
        clock.advance(-1.0)
    with pytest.raises(ValueError):
        clock.set(4.0)
    clock.set(6.0)
    assert clock.now() == 6.0
