"""Award grid — the collected symbols, in table order."""

from __future__ import annotations

from rich.align import Align
from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from unicorn_clicker.engine.session import GameSession

# Symbols per grid row
GRID_COLUMNS = 5


class AwardGrid(Widget):
    """Shows every unlocked award; locked slots are drawn as dots."""

    DEFAULT_CSS = """
    AwardGrid {
        width: 100%;
        height: auto;
        min-height: 4;
        padding: 0 1;
    }
    """

    symbols: reactive[tuple[str, ...]] = reactive(tuple)
    total: reactive[int] = reactive(0)

    def render(self) -> Align:
        text = Text(justify="center")
        text.append(f"Collection ({len(self.symbols)}/{self.total})\n", style="bold magenta")

        slots = list(self.symbols) + ["·"] * max(self.total - len(self.symbols), 0)
        for row_start in range(0, len(slots), GRID_COLUMNS):
            row = slots[row_start:row_start + GRID_COLUMNS]
            for i, slot in enumerate(row):
                if i:
                    text.append("  ")
                # Dots are one cell wide, emoji two
                text.append(slot if slot != "·" else " ·", style="dim" if slot == "·" else "")
            text.append("\n")
        return Align.center(text)

    def update_from_session(self, session: GameSession) -> None:
        self.symbols = tuple(session.state.unlocked_symbols)
        self.total = session.engine.total_award_count
