"""Banner overlay — the short-lived level and completion announcements."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from unicorn_clicker.engine.session import GameSession


class Banner(Widget):
    """Single-line banner, hidden whenever no banner signal is current."""

    DEFAULT_CSS = """
    Banner {
        width: 100%;
        height: 3;
        content-align: center middle;
        text-align: center;
        background: purple;
        color: white;
        display: none;
    }
    """

    banner_text: reactive[str] = reactive("")

    def render(self) -> Text:
        return Text(self.banner_text, style="bold")

    def update_from_session(self, session: GameSession) -> None:
        text = session.effects.banner_text
        self.banner_text = text or ""
        self.styles.display = "block" if text else "none"
