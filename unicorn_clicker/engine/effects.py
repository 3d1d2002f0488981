"""Ephemeral effects — banner, rain burst and bounce signals that expire on their own.

At most one signal of each kind is current. A new request of the same kind
replaces the current one and cancels its pending auto-clear. Every auto-clear
timer is bound to the exact signal instance it was armed for and only clears
that instance, so a timer that outlives its signal can never wipe a newer one.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum, auto

from unicorn_clicker.data.balance import BALANCE
from unicorn_clicker.engine.scheduler import TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)


class EffectKind(Enum):
    """The three independent signal slots."""

    BANNER = auto()
    RAIN = auto()
    BOUNCE = auto()


@dataclass(eq=False)
class EffectSignal:
    """One activation of an effect. Compared by identity, never by value."""

    kind: EffectKind
    payload: str
    activated_at: float
    expires_after: float

    @property
    def expires_at(self) -> float:
        return self.activated_at + self.expires_after


@dataclass(eq=False)
class RainSignal(EffectSignal):
    """A burst of falling ``payload`` symbols with its animation parameters."""

    burst_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    drop_count: int = BALANCE.rain.drop_count
    delay_step: float = BALANCE.rain.delay_step_s
    fall_duration: float = BALANCE.rain.fall_duration_s
    fade_duration: float = BALANCE.rain.fade_duration_s


class EffectsScheduler:
    """Activates signals and arms their auto-expiry on a TimerScheduler."""

    def __init__(self, timers: TimerScheduler | None = None) -> None:
        self.timers: TimerScheduler = timers if timers is not None else TimerScheduler()
        self._current: dict[EffectKind, EffectSignal] = {}
        self._expiry: dict[EffectKind, TimerHandle] = {}
        self.bursts_started: int = 0

    # ── Observable state ──────────────────────────────────────

    @property
    def banner(self) -> EffectSignal | None:
        return self._current.get(EffectKind.BANNER)

    @property
    def banner_text(self) -> str | None:
        signal = self.banner
        return signal.payload if signal is not None else None

    @property
    def rain(self) -> RainSignal | None:
        signal = self._current.get(EffectKind.RAIN)
        assert signal is None or isinstance(signal, RainSignal)
        return signal

    @property
    def rain_active(self) -> bool:
        return EffectKind.RAIN in self._current

    @property
    def bouncing(self) -> bool:
        return EffectKind.BOUNCE in self._current

    def is_current(self, signal: EffectSignal) -> bool:
        return self._current.get(signal.kind) is signal

    # ── Triggers ──────────────────────────────────────────────

    def show_banner(self, text: str, duration: float = BALANCE.banner.duration_s) -> EffectSignal:
        """Show ``text`` for ``duration``; replaces any banner already up."""
        signal = EffectSignal(
            kind=EffectKind.BANNER,
            payload=text,
            activated_at=self.timers.now(),
            expires_after=duration,
        )
        self._activate(signal)
        return signal

    def trigger_rain(
        self,
        symbol: str,
        drop_count: int = BALANCE.rain.drop_count,
        delay_step: float = BALANCE.rain.delay_step_s,
        fall_duration: float = BALANCE.rain.fall_duration_s,
        fade_duration: float = BALANCE.rain.fade_duration_s,
    ) -> RainSignal:
        """Start a new burst of ``symbol``; the previous burst stops being current.

        Drops of a replaced burst keep falling in the renderer: only the
        burst-level active flag and its auto-clear move to the new burst.
        """
        lifetime = BALANCE.rain.lifetime_s(drop_count, delay_step, fall_duration, fade_duration)
        signal = RainSignal(
            kind=EffectKind.RAIN,
            payload=symbol,
            activated_at=self.timers.now(),
            expires_after=lifetime,
            drop_count=drop_count,
            delay_step=delay_step,
            fall_duration=fall_duration,
            fade_duration=fade_duration,
        )
        self.bursts_started += 1
        self._activate(signal)
        return signal

    def bounce(self, duration: float = BALANCE.bounce.duration_s) -> EffectSignal:
        """Hop the tap target; a tap during a hop restarts it."""
        signal = EffectSignal(
            kind=EffectKind.BOUNCE,
            payload="",
            activated_at=self.timers.now(),
            expires_after=duration,
        )
        self._activate(signal)
        return signal

    # ── Internals ─────────────────────────────────────────────

    def _activate(self, signal: EffectSignal) -> None:
        previous = self._expiry.pop(signal.kind, None)
        if previous is not None and previous.cancel():
            logger.debug("Preempted %s", signal.kind.name.lower())
        self._current[signal.kind] = signal
        self._expiry[signal.kind] = self.timers.call_later(
            signal.expires_after,
            lambda: self._expire(signal),
            label=f"{signal.kind.name.lower()}-expiry",
        )
        if signal.kind is not EffectKind.BOUNCE:
            logger.debug("Activated %s %r for %.2fs", signal.kind.name.lower(), signal.payload, signal.expires_after)

    def _expire(self, signal: EffectSignal) -> None:
        if not self.is_current(signal):
            logger.debug("Stale %s expiry ignored", signal.kind.name.lower())
            return
        del self._current[signal.kind]
        self._expiry.pop(signal.kind, None)
