"""Balance constants — every timing knob for the ephemeral effects.

Durations are in seconds of whatever clock drives the timer scheduler.
Rain lifetime follows: delay_step * (drop_count - 1) + fall + fade + settle_margin
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BannerBalance:
    """Tuning for the centred banner message."""

    # How long a banner stays up before clearing itself
    duration_s: float = 2.0
    # Fade in / fade out used by renderers that animate the banner
    fade_in_s: float = 0.25
    fade_out_s: float = 0.25


@dataclass(frozen=True)
class RainBalance:
    """Tuning for the falling-symbol burst."""

    drop_count: int = 50
    # Each drop starts this much later than the previous one
    delay_step_s: float = 0.1
    fall_duration_s: float = 6.0
    fade_duration_s: float = 1.5
    # Extra time the burst stays "active" after the last drop has faded
    settle_margin_s: float = 0.5
    # Fade starts this long before the fall ends
    fade_lead_s: float = 1.0
    # Full rotation a drop completes over its fall (two spins)
    spin_degrees: float = 720.0

    def __post_init__(self) -> None:
        if self.drop_count < 1:
            raise ValueError(f"drop_count must be >= 1, got {self.drop_count}")

    def lifetime_s(
        self,
        drop_count: int | None = None,
        delay_step: float | None = None,
        fall_duration: float | None = None,
        fade_duration: float | None = None,
    ) -> float:
        """Total visible time of one burst, overriding any of the defaults."""
        n = self.drop_count if drop_count is None else drop_count
        step = self.delay_step_s if delay_step is None else delay_step
        fall = self.fall_duration_s if fall_duration is None else fall_duration
        fade = self.fade_duration_s if fade_duration is None else fade_duration
        return step * max(n - 1, 0) + fall + fade + self.settle_margin_s


@dataclass(frozen=True)
class BounceBalance:
    """Tuning for the unicorn hop on every tap."""

    duration_s: float = 0.2
    # Rows the mascot rises at the top of the hop
    lift_rows: int = 1


@dataclass(frozen=True)
class GameBalance:
    """Top-level container for all balance constants."""

    banner: BannerBalance = field(default_factory=BannerBalance)
    rain: RainBalance = field(default_factory=RainBalance)
    bounce: BounceBalance = field(default_factory=BounceBalance)

    # Host loop ticks per second (fires due timers, re-renders)
    tick_rate_hz: float = 30.0


# Singleton — import this everywhere
BALANCE = GameBalance()
