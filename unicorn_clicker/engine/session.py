"""Game session — wires the progression engine to the effects scheduler.

Hosts (the Textual app, the Flask server) hold one session, forward taps and
resets into it, call ``tick()`` from their loop, and render ``snapshot()``.
"""

from __future__ import annotations

import logging

from unicorn_clicker.data.tables import ALL_AWARDS, ALL_LEVELS, Award, Level
from unicorn_clicker.engine.clock import Clock
from unicorn_clicker.engine.effects import EffectsScheduler
from unicorn_clicker.engine.game_state import GameCompleted, GameState, LevelEntered, ProgressEvent
from unicorn_clicker.engine.progression import ProgressionEngine
from unicorn_clicker.engine.scheduler import TimerScheduler

logger = logging.getLogger(__name__)

MASCOT = "🦄"
START_BANNER = "Starting Level: {name} {badge}"
LEVEL_UP_BANNER = "Level Up: {name} {badge}"
COMPLETED_BANNER = f"Completed all levels! {MASCOT}"
ALL_COLLECTED_HINT = "All {count} emojis collected! 🎉"
NEXT_AWARD_HINT = "Next: {symbol} at {threshold} clicks"


def banner_for(event: ProgressEvent) -> tuple[str, str]:
    """Banner text and rain symbol announcing ``event``."""
    if isinstance(event, GameCompleted):
        return COMPLETED_BANNER, MASCOT
    template = START_BANNER if event.initial else LEVEL_UP_BANNER
    return template.format(name=event.level.name, badge=event.level.badge), event.level.badge


class GameSession:
    """One player's game: progression state plus its ephemeral effects."""

    def __init__(
        self,
        clock: Clock | None = None,
        awards: tuple[Award, ...] = ALL_AWARDS,
        levels: tuple[Level, ...] = ALL_LEVELS,
    ) -> None:
        self.timers = TimerScheduler(clock)
        self.engine = ProgressionEngine(awards, levels)
        self.effects = EffectsScheduler(self.timers)

    @property
    def state(self) -> GameState:
        return self.engine.state

    # ── Inbound ───────────────────────────────────────────────

    def start(self) -> None:
        """Announce the first level (the intro banner and rain)."""
        first = self.engine.levels[0]
        self._announce([LevelEntered(level=first, index=0, initial=True)])

    def handle_tap(self) -> list[ProgressEvent]:
        self.effects.bounce()
        events = self.engine.register_tap()
        self._announce(events)
        return events

    def reset(self) -> list[ProgressEvent]:
        events = self.engine.reset()
        self.state.stats.resets += 1
        self._announce(events)
        return events

    def tick(self) -> int:
        """Fire due effect timers. Call this from the host loop."""
        return self.timers.tick()

    def _announce(self, events: list[ProgressEvent]) -> None:
        for event in events:
            text, symbol = banner_for(event)
            logger.debug("Announcing %s", text)
            self.effects.show_banner(text)
            self.effects.trigger_rain(symbol)

    # ── Outbound ──────────────────────────────────────────────

    def progress_hint(self) -> str:
        """The "Next: …" line under the tap target."""
        upcoming = self.engine.next_award()
        if upcoming is None:
            return ALL_COLLECTED_HINT.format(count=self.engine.total_award_count)
        return NEXT_AWARD_HINT.format(symbol=upcoming.symbol, threshold=upcoming.threshold)

    def snapshot(self) -> dict:
        """Plain-data view of everything a renderer needs."""
        s = self.state
        level = self.engine.current_level
        upcoming = self.engine.next_award()
        rain = self.effects.rain
        return {
            "tap_count": s.tap_count,
            "unlocked_awards": s.unlocked_symbols,
            "total_awards": self.engine.total_award_count,
            "level_index": s.current_level_index,
            "current_level": {"name": level.name, "badge": level.badge},
            "next_level_goal": self.engine.next_level_goal,
            "next_award": (
                {"symbol": upcoming.symbol, "threshold": upcoming.threshold}
                if upcoming is not None else None
            ),
            "hint": self.progress_hint(),
            "all_awards_collected": s.all_awards_collected,
            "banner": self.effects.banner_text,
            "rain": (
                {
                    "symbol": rain.payload,
                    "burst_id": rain.burst_id,
                    "drop_count": rain.drop_count,
                    "delay_step": rain.delay_step,
                    "fall_duration": rain.fall_duration,
                    "fade_duration": rain.fade_duration,
                }
                if rain is not None else None
            ),
            "bouncing": self.effects.bouncing,
            "stats": {
                "total_taps": s.stats.total_taps,
                "resets": s.stats.resets,
                "completions": s.stats.completions,
                "session_duration": s.stats.session_duration_s,
            },
        }
