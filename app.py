from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    Checkers,
    CheckersError,
    Coord,
    IllegalMoveError,
    Move,
    capture_sequences,
)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


PROMOTE_MID_SEQUENCE = _env_flag("CHECKERS_PROMOTE_MID_SEQUENCE", True)
LOG_LEVEL = os.getenv("CHECKERS_LOG_LEVEL", "INFO").upper()

_log = logging.getLogger(__name__)

app = Flask(__name__)


class BadPayload(ValueError):
    pass


# ---------- JSON <-> engine ----------

def _coord_to_json(c: Optional[Coord]) -> Optional[List[int]]:
    if c is None:
        return None
    return [int(c[0]), int(c[1])]


def _json_to_coord(obj: Any, what: str) -> Coord:
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        raise BadPayload(f"{what} must be [row, col]")
    try:
        return (int(obj[0]), int(obj[1]))
    except (TypeError, ValueError):
        raise BadPayload(f"{what} must be [row, col]")


def move_to_json(m: Move) -> Dict[str, Any]:
    return {
        "src": _coord_to_json(m.src),
        "dst": _coord_to_json(m.dst),
        "capture": _coord_to_json(m.capture),
        "text": m.to_text(),
    }


def json_to_move(obj: Any) -> Move:
    if not isinstance(obj, dict):
        raise BadPayload("move must be an object")
    capture = obj.get("capture")
    return Move(
        src=_json_to_coord(obj.get("src"), "move.src"),
        dst=_json_to_coord(obj.get("dst"), "move.dst"),
        capture=None if capture is None else _json_to_coord(capture, "move.capture"),
    )


def state_to_json(g: Checkers) -> Dict[str, Any]:
    return {
        "rows": g.board.rows(),
        "turn": g.get_turn(),
        "jumper": _coord_to_json(g.jumper),
        "winner": g.winner(),
    }


def json_to_state(obj: Any) -> Checkers:
    if not isinstance(obj, dict):
        raise BadPayload("state required")
    rows = obj.get("rows")
    if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        raise BadPayload("state.rows must be a list of strings")
    jumper_in = obj.get("jumper")
    jumper = None if jumper_in is None else _json_to_coord(jumper_in, "state.jumper")
    try:
        return Checkers.from_rows(
            rows,
            str(obj.get("turn", "b")),
            jumper,
            promote_mid_sequence=PROMOTE_MID_SEQUENCE,
        )
    except ValueError as e:
        raise BadPayload(f"bad state: {e}")


def _moves_json(moves: List[Move]) -> List[Dict[str, Any]]:
    return [move_to_json(m) for m in moves]


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


@app.errorhandler(BadPayload)
def _bad_request(e: BadPayload) -> Any:
    _log.warning("Rejected request to %s: %s", request.path, e)
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Core Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    g = Checkers.new(promote_mid_sequence=PROMOTE_MID_SEQUENCE)
    return jsonify({
        "ok": True,
        "state": state_to_json(g),
        "legalMoves": _moves_json(g.all_legal_moves()),
    })


@app.post("/api/new_from")
def api_new_from() -> Any:
    body = _body()
    g = json_to_state({"rows": body.get("rows"), "turn": body.get("turn", "b")})
    return jsonify({
        "ok": True,
        "state": state_to_json(g),
        "legalMoves": _moves_json(g.all_legal_moves()),
    })


@app.post("/api/legal")
def api_legal() -> Any:
    body = _body()
    g = json_to_state(body.get("state"))
    square = body.get("square")
    if square is None:
        moves = g.all_legal_moves()
    else:
        moves = g.legal_moves(*_json_to_coord(square, "square"))
    return jsonify({"ok": True, "legalMoves": _moves_json(moves)})


@app.post("/api/at")
def api_at() -> Any:
    body = _body()
    g = json_to_state(body.get("state"))
    r, c = _json_to_coord(body.get("square"), "square")
    return jsonify({"ok": True, "cell": g.at(r, c), "turn": g.get_turn()})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    g = json_to_state(body.get("state"))
    move = json_to_move(body.get("move"))
    try:
        g.apply_move(move)
    except IllegalMoveError as e:
        _log.warning("Illegal move %s from client", move.to_text())
        return jsonify({
            "ok": False,
            "error": "Illegal move",
            "legalMoves": _moves_json(e.legal),
        }), 400
    except CheckersError as e:
        _log.error("Engine rejected %s: %s", move.to_text(), e)
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({
        "ok": True,
        "state": state_to_json(g),
        "legalMoves": _moves_json(g.all_legal_moves()),
    })


@app.post("/api/sequences")
def api_sequences() -> Any:
    body = _body()
    g = json_to_state(body.get("state"))
    r, c = _json_to_coord(body.get("square"), "square")
    chains = capture_sequences(g, r, c)
    return jsonify({"ok": True, "sequences": [_moves_json(seq) for seq in chains]})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
