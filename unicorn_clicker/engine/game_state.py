"""Game state — single source of truth for the current session."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from unicorn_clicker.data.tables import Award, Level


@dataclass
class SessionStats:
    """Tracked metrics since the process started (never reset by a replay)."""

    total_taps: int = 0
    resets: int = 0
    completions: int = 0
    session_start_time: float = field(default_factory=time.time)

    @property
    def session_duration_s(self) -> float:
        return time.time() - self.session_start_time


@dataclass
class GameState:
    """Complete mutable state for one play-through (zeroed on reset)."""

    # ── Counter ──────────────────────────────────────────
    tap_count: int = 0

    # ── Awards: kept in award-table order, not unlock order ──
    unlocked_awards: list[Award] = field(default_factory=list)
    all_awards_collected: bool = False

    # ── Levels ───────────────────────────────────────────
    current_level_index: int = 0

    # ── Stats ────────────────────────────────────────────
    stats: SessionStats = field(default_factory=SessionStats)

    def is_unlocked(self, award: Award) -> bool:
        return any(a.id == award.id for a in self.unlocked_awards)

    @property
    def unlocked_symbols(self) -> list[str]:
        return [a.symbol for a in self.unlocked_awards]


# ── Events emitted by the progression engine ─────────────────


@dataclass(frozen=True)
class LevelEntered:
    """The player is now on ``level``. ``initial`` is set for the reset entry."""

    level: Level
    index: int
    initial: bool = False


@dataclass(frozen=True)
class GameCompleted:
    """Every award in the table has been collected."""

    award_count: int


ProgressEvent = LevelEntered | GameCompleted
