"""HUD widget — title badge, level, click counter and next-award hint."""

from __future__ import annotations

from rich.align import Align
from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from unicorn_clicker.engine.session import GameSession


class HUD(Widget):
    """Heads-up display showing the current level and counter."""

    DEFAULT_CSS = """
    HUD {
        width: 100%;
        height: 5;
        content-align: center middle;
    }
    """

    badge: reactive[str] = reactive("")
    level_name: reactive[str] = reactive("")
    taps: reactive[int] = reactive(0)
    next_level_goal: reactive[int] = reactive(0)
    hint: reactive[str] = reactive("")
    completed: reactive[bool] = reactive(False)

    def render(self) -> Align:
        text = Text(justify="center")
        text.append(f"Unicorn Clicker {self.badge}\n", style="bold white")

        text.append("Level: ", style="dim")
        text.append(self.level_name, style="bold magenta")
        text.append("   Clicks: ", style="dim")
        text.append(f"{self.taps}", style="bold cyan")
        if self.next_level_goal:
            text.append(f" / {self.next_level_goal}", style="dim")
        text.append("\n\n")

        hint_style = "bold yellow" if self.completed else "white"
        text.append(self.hint, style=hint_style)
        return Align.center(text, vertical="middle")

    def update_from_session(self, session: GameSession) -> None:
        """Sync HUD with the session state."""
        level = session.engine.current_level
        self.badge = level.badge
        self.level_name = level.name
        self.taps = session.state.tap_count
        self.next_level_goal = session.engine.next_level_goal or 0
        self.hint = session.progress_hint()
        self.completed = session.state.all_awards_collected
