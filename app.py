from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

import tictactoe_core
from game import Cell, GameState, Settings, configure_logging

logger = logging.getLogger(__name__)

# Serve static assets from tictactoe_core/static (explicit absolute path)
STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(tictactoe_core.__file__)), "static")
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

# One play session per process; replaced by /api/new.
# Every read or change of GAME holds GAME_LOCK.
GAME = GameState()
GAME_LOCK = threading.Lock()


def render(game: GameState) -> Dict[str, Any]:
    """Projects the game into the tree the browser view draws from."""
    board = game.current_snapshot()
    winner = game.winner()
    line = game.winning_line()
    return {
        "squares": [cell.value or None for cell in board],
        "status": game.current_status(),
        "stepNumber": game.step_number,
        "nextPlayer": game.next_player().value,
        "winner": winner.value if winner is not Cell.EMPTY else None,
        "winningLine": list(line) if line else None,
        "moves": [{"step": step, "desc": desc} for step, desc in enumerate(game.move_descriptions())],
    }


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _int_field(body: Dict[str, Any], name: str) -> Tuple[Optional[int], Optional[str]]:
    value = body.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None, f"{name} must be an integer"
    return value, None


def _bad_request(error: str) -> Any:
    logger.info("rejected request: %s", error)
    return jsonify({"ok": False, "error": error}), 400


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (used by main.js) ----------

@app.get("/api/state")
def api_state() -> Any:
    with GAME_LOCK:
        state = render(GAME)
    return jsonify({"ok": True, "state": state})


@app.post("/api/new")
def api_new() -> Any:
    global GAME
    with GAME_LOCK:
        GAME = GameState()
        state = render(GAME)
    logger.info("new game started")
    return jsonify({"ok": True, "state": state})


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    index, err = _int_field(body, "index")
    if err:
        return _bad_request(err)
    with GAME_LOCK:
        try:
            accepted = GAME.apply_move(index)
        except ValueError as e:
            return _bad_request(str(e))
        state = render(GAME)
    return jsonify({"ok": True, "accepted": accepted, "state": state})


@app.post("/api/jump")
def api_jump() -> Any:
    body = _json_body()
    step, err = _int_field(body, "step")
    if err:
        return _bad_request(err)
    with GAME_LOCK:
        try:
            GAME.jump_to(step)
        except ValueError as e:
            return _bad_request(str(e))
        state = render(GAME)
    return jsonify({"ok": True, "state": state})


if __name__ == "__main__":
    settings = Settings.from_env()
    configure_logging(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
