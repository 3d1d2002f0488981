"""Unicorn Clicker — Main Textual Application.

Wires the game session into a playable TUI: taps come in from the keyboard
or a mouse click on the unicorn, a fixed-rate timer fires due effect timers
and pushes the session snapshot into every widget.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Footer, Static

from unicorn_clicker.data.balance import BALANCE
from unicorn_clicker.engine.clock import Clock
from unicorn_clicker.engine.game_state import GameCompleted
from unicorn_clicker.engine.session import GameSession

from unicorn_clicker.ui.award_grid import AwardGrid
from unicorn_clicker.ui.banner import Banner
from unicorn_clicker.ui.hud import HUD
from unicorn_clicker.ui.rain_field import RainField
from unicorn_clicker.ui.tap_target import TapTarget

logger = logging.getLogger(__name__)

CSS_PATH = Path(__file__).parent / "ui" / "styles.tcss"


class UnicornClickerApp(App):
    """The Unicorn Clicker TUI application."""

    TITLE = "Unicorn Clicker"
    CSS_PATH = CSS_PATH

    BINDINGS = [
        Binding("space", "tap", "Tap", show=True, priority=True),
        Binding("enter", "tap", "Tap", show=False),
        Binding("r", "reset", "Reset", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, clock: Clock | None = None) -> None:
        super().__init__()
        self._session: GameSession = GameSession(clock)
        self._tick_timer: Timer | None = None

    @property
    def session(self) -> GameSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield RainField(id="sky")
        yield Banner(id="banner")
        with Vertical(id="play-area"):
            yield HUD(id="hud")
            yield TapTarget(id="unicorn")
            yield AwardGrid(id="award-grid")
            yield Static("R: reset  ·  Space: tap", id="reset-hint")
        yield Footer()

    def on_mount(self) -> None:
        """Start the host loop and play the intro."""
        interval = 1.0 / BALANCE.tick_rate_hz
        self._tick_timer = self.set_interval(interval, self._game_tick)
        self._session.start()
        self._sync_ui()

    def _game_tick(self) -> None:
        """Fire due effect timers, then redraw."""
        self._session.tick()
        self._sync_ui()

    def _sync_ui(self) -> None:
        """Push session state to all widgets."""
        self.query_one("#hud", HUD).update_from_session(self._session)
        self.query_one("#award-grid", AwardGrid).update_from_session(self._session)
        self.query_one("#banner", Banner).update_from_session(self._session)
        self.query_one("#sky", RainField).update_from_session(self._session)
        self.query_one("#unicorn", TapTarget).bouncing = self._session.effects.bouncing

    # ── Actions ──────────────────────────────────────

    def action_tap(self) -> None:
        """Count one tap."""
        before = len(self._session.state.unlocked_awards)
        events = self._session.handle_tap()

        unlocked = self._session.state.unlocked_awards
        if len(unlocked) > before:
            newest = [a for a in unlocked if a.threshold == self._session.state.tap_count]
            for award in newest:
                self.notify(f"{award.symbol} unlocked!", severity="information", timeout=2)
        if any(isinstance(e, GameCompleted) for e in events):
            self.notify("Every award collected! 🎉", severity="warning", timeout=4)

        self._sync_ui()

    def on_tap_target_tapped(self, message: TapTarget.Tapped) -> None:
        self.action_tap()

    def action_reset(self) -> None:
        """Zero the counter and start over at the first level."""
        self._session.reset()
        self._sync_ui()
