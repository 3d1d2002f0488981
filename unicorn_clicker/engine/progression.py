"""Progression — tap counting, award unlocks, level-ups and completion."""

from __future__ import annotations

import logging

from unicorn_clicker.data.tables import ALL_AWARDS, ALL_LEVELS, Award, Level, validate_tables
from unicorn_clicker.engine.game_state import (
    GameCompleted,
    GameState,
    LevelEntered,
    ProgressEvent,
)

logger = logging.getLogger(__name__)


class ProgressionEngine:
    """Owns the GameState and applies the per-tap transition rules.

    All mutation goes through ``reset()`` and ``register_tap()``; renderers
    read ``state`` and the query properties but never write to them.
    """

    def __init__(
        self,
        awards: tuple[Award, ...] = ALL_AWARDS,
        levels: tuple[Level, ...] = ALL_LEVELS,
        state: GameState | None = None,
    ) -> None:
        validate_tables(awards, levels)
        self._awards = tuple(awards)
        self._levels = tuple(levels)
        # Fixed display position of every award (by id)
        self._award_order: dict[str, int] = {a.id: i for i, a in enumerate(self._awards)}
        self.state: GameState = state if state is not None else GameState()

    # ── Tables ────────────────────────────────────────────────

    @property
    def awards(self) -> tuple[Award, ...]:
        return self._awards

    @property
    def levels(self) -> tuple[Level, ...]:
        return self._levels

    @property
    def total_award_count(self) -> int:
        return len(self._awards)

    # ── Queries ───────────────────────────────────────────────

    @property
    def current_level(self) -> Level:
        """Current level, clamped to the last one in the table."""
        return self._levels[min(self.state.current_level_index, len(self._levels) - 1)]

    @property
    def next_level_goal(self) -> int | None:
        i = self.state.current_level_index + 1
        return self._levels[i].goal if i < len(self._levels) else None

    def next_award(self) -> Award | None:
        """Award with the smallest threshold above the tap count, if any."""
        upcoming = [a for a in self._awards if a.threshold > self.state.tap_count]
        if not upcoming:
            return None
        return min(upcoming, key=lambda a: a.threshold)

    # ── Transitions ───────────────────────────────────────────

    def reset(self) -> list[ProgressEvent]:
        """Zero the play-through and re-enter the first level."""
        s = self.state
        s.tap_count = 0
        s.unlocked_awards.clear()
        s.current_level_index = 0
        s.all_awards_collected = False
        first = self._levels[0]
        logger.info("Reset — starting level %s %s", first.name, first.badge)
        return [LevelEntered(level=first, index=0, initial=True)]

    def register_tap(self) -> list[ProgressEvent]:
        """Count one tap and return the events it produced, in order."""
        s = self.state
        s.tap_count += 1
        s.stats.total_taps += 1

        self._unlock_awards()

        # Completion takes priority: a level-up on the same tap is suppressed
        completed = self._check_completion()
        if completed is not None:
            return [completed]

        entered = self._check_level_up()
        if entered is not None:
            return [entered]
        return []

    def _unlock_awards(self) -> None:
        s = self.state
        # Exact match only: a count that skips a threshold never unlocks it
        newly = [
            a for a in self._awards
            if a.threshold == s.tap_count and not s.is_unlocked(a)
        ]
        if not newly:
            return
        s.unlocked_awards.extend(newly)
        s.unlocked_awards.sort(key=lambda a: self._award_order.get(a.id, len(self._award_order)))
        for a in newly:
            logger.info("Award unlocked at %d taps: %s", s.tap_count, a.symbol)

    def _check_completion(self) -> GameCompleted | None:
        s = self.state
        if s.all_awards_collected or len(s.unlocked_awards) < self.total_award_count:
            return None
        s.all_awards_collected = True
        s.stats.completions += 1
        logger.info("All %d awards collected at %d taps", self.total_award_count, s.tap_count)
        return GameCompleted(award_count=self.total_award_count)

    def _check_level_up(self) -> LevelEntered | None:
        s = self.state
        goal = self.next_level_goal
        if goal is None or s.tap_count < goal:
            return None
        s.current_level_index += 1
        level = self.current_level
        logger.info("Level up at %d taps: %s %s", s.tap_count, level.name, level.badge)
        return LevelEntered(level=level, index=s.current_level_index)
