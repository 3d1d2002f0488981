"""Tests for the ephemeral effects — banner, rain and bounce expiry."""

import pytest

from unicorn_clicker.data.balance import BALANCE
from unicorn_clicker.engine.clock import VirtualClock
from unicorn_clicker.engine.effects import EffectKind, EffectsScheduler
from unicorn_clicker.engine.scheduler import TimerScheduler


def _effects() -> tuple[EffectsScheduler, VirtualClock]:
    clock = VirtualClock()
    return EffectsScheduler(TimerScheduler(clock)), clock


def _at(effects: EffectsScheduler, clock: VirtualClock, t: float) -> None:
    """Move the clock to absolute time t and fire whatever came due."""
    clock.set(t)
    effects.timers.tick()


# ── Banner ───────────────────────────────────────────────────────────────────

def test_banner_clears_after_duration():
    effects, clock = _effects()
    effects.show_banner("Hello")
    assert effects.banner_text == "Hello"

    _at(effects, clock, 1.99)
    assert effects.banner_text == "Hello"
    _at(effects, clock, 2.0)
    assert effects.banner_text is None


def test_banner_default_duration():
    effects, _ = _effects()
    signal = effects.show_banner("Hi")
    assert signal.expires_after == BALANCE.banner.duration_s == 2.0


def test_replacing_banner_restarts_duration():
    """A then B half a second later: B shows until 2.5, not 2.0."""
    effects, clock = _effects()
    effects.show_banner("A", 2.0)
    _at(effects, clock, 0.5)
    effects.show_banner("B", 2.0)
    assert effects.banner_text == "B"

    _at(effects, clock, 2.0)  # A's timer would have fired here
    assert effects.banner_text == "B"

    _at(effects, clock, 2.49)
    assert effects.banner_text == "B"
    _at(effects, clock, 2.5)
    assert effects.banner_text is None


def test_banner_slot_is_reusable():
    effects, clock = _effects()
    effects.show_banner("One", 1.0)
    _at(effects, clock, 1.0)
    assert effects.banner_text is None
    effects.show_banner("Two", 1.0)
    assert effects.banner_text == "Two"
    _at(effects, clock, 2.0)
    assert effects.banner_text is None


def test_stale_expiry_is_noop():
    """An expiry for a superseded signal leaves the current one alone."""
    effects, clock = _effects()
    old = effects.show_banner("Old", 1.0)
    new = effects.show_banner("New", 5.0)
    assert not effects.is_current(old)
    assert effects.is_current(new)

    effects._expire(old)
    assert effects.banner_text == "New"


# ── Rain ─────────────────────────────────────────────────────────────────────

def test_rain_lifetime_formula():
    effects, _ = _effects()
    signal = effects.trigger_rain("☁️", drop_count=50, delay_step=0.1, fall_duration=6.0, fade_duration=1.5)
    assert signal.expires_after == pytest.approx(0.1 * 49 + 6.0 + 1.5 + 0.5)


def test_rain_clears_after_lifetime():
    effects, clock = _effects()
    signal = effects.trigger_rain("🌈", drop_count=3, delay_step=1.0, fall_duration=2.0, fade_duration=1.0)
    assert effects.rain_active
    assert effects.rain.payload == "🌈"

    assert signal.expires_after == 5.5
    _at(effects, clock, 5.49)
    assert effects.rain_active
    _at(effects, clock, 5.5)
    assert not effects.rain_active
    assert effects.rain is None


def test_rain_bursts_get_distinct_ids():
    effects, _ = _effects()
    first = effects.trigger_rain("☁️")
    second = effects.trigger_rain("☁️")
    assert first.burst_id != second.burst_id
    assert effects.rain is second
    assert effects.bursts_started == 2


def test_first_burst_timer_never_clears_second():
    effects, clock = _effects()
    first = effects.trigger_rain("☁️", drop_count=1, delay_step=0.0, fall_duration=1.0, fade_duration=0.0)
    _at(effects, clock, 1.0)
    second = effects.trigger_rain("🌈", drop_count=1, delay_step=0.0, fall_duration=1.0, fade_duration=0.0)

    # First burst would have expired at 1.5
    _at(effects, clock, 1.5)
    assert effects.rain is second

    _at(effects, clock, 2.49)
    assert effects.rain is second
    _at(effects, clock, 2.5)
    assert not effects.rain_active
    assert first.burst_id != second.burst_id


def test_rain_preemption_cancels_pending_timer():
    effects, _ = _effects()
    effects.trigger_rain("☁️")
    effects.trigger_rain("🌈")
    assert effects.timers.pending_count == 1


# ── Bounce & independence ────────────────────────────────────────────────────

def test_bounce_clears_itself():
    effects, clock = _effects()
    effects.bounce()
    assert effects.bouncing
    _at(effects, clock, BALANCE.bounce.duration_s)
    assert not effects.bouncing


def test_kinds_expire_independently():
    effects, clock = _effects()
    effects.show_banner("Hi", 1.0)
    effects.trigger_rain("✨", drop_count=1, delay_step=0.0, fall_duration=3.0, fade_duration=0.0)

    _at(effects, clock, 1.0)
    assert effects.banner_text is None
    assert effects.rain_active

    effects.show_banner("Again", 1.0)
    assert effects.rain.payload == "✨"


def test_signal_kinds():
    effects, _ = _effects()
    assert effects.show_banner("x").kind is EffectKind.BANNER
    assert effects.trigger_rain("x").kind is EffectKind.RAIN
    assert effects.bounce().kind is EffectKind.BOUNCE
