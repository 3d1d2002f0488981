"""Unicorn Clicker Web — Flask server that wraps the game session.

Serves a single-page UI and exposes a JSON API for taps and resets.
Effect timers are driven lazily: each API request fires every timer that
came due since the previous request before returning the current state.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from flask import Flask, jsonify, render_template

from unicorn_clicker.engine.clock import Clock
from unicorn_clicker.engine.game_state import GameCompleted, LevelEntered
from unicorn_clicker.engine.session import GameSession

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Flask app
# ---------------------------------------------------------------------------

_DIR = Path(__file__).parent
app = Flask(
    __name__,
    template_folder=str(_DIR / "templates"),
)

# Disable static file caching during development
app.config["SEND_FILE_MAX_AGE_DEFAULT"] = 0
app.config["TEMPLATES_AUTO_RELOAD"] = True

# ---------------------------------------------------------------------------
# In-memory game session (single-player, never persisted)
# ---------------------------------------------------------------------------

_lock = threading.Lock()
_session: GameSession | None = None
_clock: Clock | None = None


def _ensure_game() -> None:
    """Create the session and play the intro if not yet started."""
    global _session
    if _session is not None:
        return
    _session = GameSession(_clock)
    _session.start()
    logger.info("New game session started")


def reset_session(clock: Clock | None = None) -> None:
    """Drop the current session; the next request starts a fresh one."""
    global _session, _clock
    with _lock:
        _session = None
        _clock = clock


def _event_json(event: LevelEntered | GameCompleted) -> dict:
    if isinstance(event, GameCompleted):
        return {"type": "game_completed", "award_count": event.award_count}
    return {
        "type": "level_entered",
        "index": event.index,
        "name": event.level.name,
        "badge": event.level.badge,
        "initial": event.initial,
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.route("/")
def index():
    return render_template("game.html")


@app.route("/api/state")
def api_state():
    with _lock:
        _ensure_game()
        assert _session is not None
        _session.tick()
        return jsonify(_session.snapshot())


@app.route("/api/action/tap", methods=["POST"])
def action_tap():
    with _lock:
        _ensure_game()
        assert _session is not None
        _session.tick()
        events = _session.handle_tap()
        data = _session.snapshot()
        data["events"] = [_event_json(e) for e in events]
        return jsonify(data)


@app.route("/api/action/reset", methods=["POST"])
def action_reset():
    with _lock:
        _ensure_game()
        assert _session is not None
        _session.tick()
        events = _session.reset()
        data = _session.snapshot()
        data["events"] = [_event_json(e) for e in events]
        return jsonify(data)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def run_server(host: str = "127.0.0.1", port: int = 5000, debug: bool = False) -> None:
    """Start the Flask development server."""
    app.run(host=host, port=port, debug=debug, use_reloader=False)
