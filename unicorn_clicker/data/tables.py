"""Threshold tables — the collectible awards and the level ladder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Award:
    """A collectible symbol unlocked when the tap count hits ``threshold``."""

    id: str
    threshold: int
    symbol: str


@dataclass(frozen=True)
class Level:
    """A milestone tier. ``goal`` is the cumulative tap count, not an increment."""

    id: str
    name: str
    goal: int
    badge: str


# 10 collectible awards, in display order
ALL_AWARDS: tuple[Award, ...] = (
    Award(id="sparkles", threshold=3, symbol="✨"),
    Award(id="glowing_star", threshold=6, symbol="🌟"),
    Award(id="rainbow", threshold=10, symbol="🌈"),
    Award(id="butterfly", threshold=15, symbol="🦋"),
    Award(id="cupcake", threshold=20, symbol="🧁"),
    Award(id="strawberry", threshold=25, symbol="🍓"),
    Award(id="gem", threshold=30, symbol="💎"),
    Award(id="magic_wand", threshold=40, symbol="🪄"),
    Award(id="ribbon", threshold=50, symbol="🎀"),
    Award(id="crown", threshold=60, symbol="👑"),
)

ALL_LEVELS: tuple[Level, ...] = (
    Level(id="cloudy", name="Cloudy", goal=15, badge="☁️"),
    Level(id="rainbow_rider", name="Rainbow Rider", goal=20, badge="🌈"),
    Level(id="queen", name="Queen", goal=30, badge="👑"),
)


def validate_tables(awards: tuple[Award, ...], levels: tuple[Level, ...]) -> None:
    """Raise ValueError if either table breaks its invariants."""
    if not awards:
        raise ValueError("award table is empty")
    if not levels:
        raise ValueError("level table is empty")

    award_ids = [a.id for a in awards]
    if len(set(award_ids)) != len(award_ids):
        raise ValueError(f"duplicate award ids: {award_ids}")
    thresholds = [a.threshold for a in awards]
    if any(t <= 0 for t in thresholds):
        raise ValueError(f"award thresholds must be positive: {thresholds}")
    if len(set(thresholds)) != len(thresholds):
        raise ValueError(f"award thresholds must be distinct: {thresholds}")

    level_ids = [lv.id for lv in levels]
    if len(set(level_ids)) != len(level_ids):
        raise ValueError(f"duplicate level ids: {level_ids}")
    goals = [lv.goal for lv in levels]
    if any(g <= 0 for g in goals):
        raise ValueError(f"level goals must be positive: {goals}")
    for prev, curr in zip(goals, goals[1:]):
        if curr <= prev:
            raise ValueError(f"level goals must be strictly increasing: {goals}")


validate_tables(ALL_AWARDS, ALL_LEVELS)
