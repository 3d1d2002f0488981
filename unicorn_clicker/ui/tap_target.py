"""Tap target — the unicorn the player clicks, with its hop on every tap."""

from __future__ import annotations

from rich.align import Align
from rich.text import Text
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from unicorn_clicker.data.balance import BALANCE
from unicorn_clicker.engine.session import MASCOT


class TapTarget(Widget):
    """Clickable mascot. Lifts while the bounce signal is active."""

    DEFAULT_CSS = """
    TapTarget {
        width: 100%;
        height: 5;
        content-align: center middle;
    }
    TapTarget:hover {
        background: $boost;
    }
    """

    class Tapped(Message):
        """Posted when the mascot is clicked."""

    bouncing: reactive[bool] = reactive(False)

    def render(self) -> Align:
        lift = BALANCE.bounce.lift_rows if self.bouncing else 0
        text = Text(justify="center")
        text.append("\n" * (BALANCE.bounce.lift_rows - lift))
        text.append(MASCOT, style="bold")
        text.append("\n" * (lift + 1))
        text.append("tap me", style="dim italic")
        return Align.center(text, vertical="middle")

    def on_click(self) -> None:
        self.post_message(self.Tapped())
