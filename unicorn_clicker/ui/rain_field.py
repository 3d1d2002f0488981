"""Rain field — the sky band where burst symbols fall, spin and fade.

Every burst that has started keeps animating here until its last drop has
faded, even after a newer burst has replaced it as the current one.
"""

from __future__ import annotations

import random

from rich.text import Text
from textual.widget import Widget

from unicorn_clicker.engine.rain import BurstPlan, plan_burst
from unicorn_clicker.engine.session import GameSession

# Terminal cells taken by one emoji
SLOT_WIDTH = 2


class RainField(Widget):
    """Renders the drops of all live bursts into a character grid."""

    DEFAULT_CSS = """
    RainField {
        width: 100%;
        height: 10;
    }
    """

    def __init__(self, rng: random.Random | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._rng = rng or random.Random()
        self._plans: list[BurstPlan] = []
        self._now: float = 0.0

    @property
    def live_bursts(self) -> int:
        return len(self._plans)

    def update_from_session(self, session: GameSession) -> None:
        """Pick up a new burst, drop finished ones, and redraw."""
        self._now = session.timers.now()
        rain = session.effects.rain
        if rain is not None and all(p.burst_id != rain.burst_id for p in self._plans):
            self._plans.append(plan_burst(rain, self._rng))
        self._plans = [p for p in self._plans if not p.finished(self._now)]
        self.refresh()

    def render(self) -> Text:
        width = max(self.size.width // SLOT_WIDTH, 1)
        height = max(self.size.height, 1)
        grid: list[list[tuple[str, str] | None]] = [[None] * width for _ in range(height)]

        for plan in self._plans:
            for drop, frame in plan.frames(self._now):
                if not frame.visible:
                    continue
                row = min(int(frame.progress * height), height - 1)
                col = min(int(drop.column * width), width - 1)
                # Faded drops render dim; a half-turn flips to bold for the spin
                style = "dim" if frame.opacity < 0.5 else ("bold" if int(frame.angle // 180) % 2 else "")
                grid[row][col] = (plan.symbol, style)

        text = Text(no_wrap=True, overflow="crop")
        for r, row in enumerate(grid):
            for cell in row:
                if cell is None:
                    text.append(" " * SLOT_WIDTH)
                else:
                    text.append(cell[0], style=cell[1])
            if r < height - 1:
                text.append("\n")
        return text
