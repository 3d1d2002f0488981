"""Rain bursts — per-drop fall, spin and fade curves.

Once a burst's drops are planned they animate independently of the effects
scheduler: replacing the burst does not stop drops that are already falling.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from unicorn_clicker.data.balance import BALANCE
from unicorn_clicker.engine.effects import RainSignal


@dataclass(frozen=True)
class RainDrop:
    """One falling symbol. ``column`` is a fraction of the field width."""

    index: int
    column: float
    delay: float


@dataclass(frozen=True)
class DropFrame:
    """Where a drop is at a given moment."""

    progress: float   # 0.0 = above the top edge, 1.0 = below the bottom edge
    angle: float      # degrees
    opacity: float    # 1.0 = opaque

    @property
    def visible(self) -> bool:
        return self.opacity > 0.0 and 0.0 < self.progress < 1.0


@dataclass(frozen=True)
class BurstPlan:
    """Every drop of one burst, anchored at the time the burst started."""

    burst_id: str
    symbol: str
    started_at: float
    drops: tuple[RainDrop, ...]
    fall_duration: float
    fade_duration: float

    def frames(self, now: float) -> list[tuple[RainDrop, DropFrame]]:
        elapsed = now - self.started_at
        return [
            (drop, drop_frame(drop, elapsed, self.fall_duration, self.fade_duration))
            for drop in self.drops
        ]

    def finished(self, now: float) -> bool:
        elapsed = now - self.started_at
        return all(
            drop_finished(drop, elapsed, self.fall_duration, self.fade_duration)
            for drop in self.drops
        )


def ease_in_out(t: float) -> float:
    t = min(max(t, 0.0), 1.0)
    return 0.5 - 0.5 * math.cos(math.pi * t)


def ease_out(t: float) -> float:
    t = min(max(t, 0.0), 1.0)
    return 1.0 - (1.0 - t) ** 2


def plan_drops(
    drop_count: int,
    delay_step: float,
    rng: random.Random | None = None,
) -> tuple[RainDrop, ...]:
    """Scatter ``drop_count`` drops across the width, staggered by ``delay_step``."""
    rng = rng or random.Random()
    return tuple(
        RainDrop(index=i, column=rng.random(), delay=i * delay_step)
        for i in range(drop_count)
    )


def plan_burst(signal: RainSignal, rng: random.Random | None = None) -> BurstPlan:
    """Build the drop plan for a rain signal, anchored at its activation time."""
    return BurstPlan(
        burst_id=signal.burst_id,
        symbol=signal.payload,
        started_at=signal.activated_at,
        drops=plan_drops(signal.drop_count, signal.delay_step, rng),
        fall_duration=signal.fall_duration,
        fade_duration=signal.fade_duration,
    )


def fade_start(drop: RainDrop, fall_duration: float) -> float:
    """Seconds after burst start when ``drop`` begins to fade."""
    return drop.delay + max(0.0, fall_duration - BALANCE.rain.fade_lead_s)


def drop_frame(drop: RainDrop, elapsed: float, fall_duration: float, fade_duration: float) -> DropFrame:
    """Sample the drop's animation ``elapsed`` seconds after the burst began."""
    local = elapsed - drop.delay
    if local <= 0:
        return DropFrame(progress=0.0, angle=0.0, opacity=1.0)

    fall_t = local / fall_duration if fall_duration > 0 else 1.0
    progress = ease_in_out(fall_t)
    angle = BALANCE.rain.spin_degrees * min(fall_t, 1.0)

    fade_local = elapsed - fade_start(drop, fall_duration)
    if fade_local <= 0:
        opacity = 1.0
    elif fade_duration <= 0:
        opacity = 0.0
    else:
        opacity = 1.0 - ease_out(fade_local / fade_duration)

    return DropFrame(progress=progress, angle=angle, opacity=opacity)


def drop_finished(drop: RainDrop, elapsed: float, fall_duration: float, fade_duration: float) -> bool:
    fall_end = drop.delay + fall_duration
    fade_end = fade_start(drop, fall_duration) + fade_duration
    return elapsed >= max(fall_end, fade_end)
