from __future__ import annotations

import logging
import os
import sys
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    CHEAT,
    Card,
    ConcentrationModel,
    COLS,
    ROWS,
    cheat_view,
    index_of,
    moves_label,
    status_message,
)

log = logging.getLogger(__name__)

_seed_env = os.getenv("CONCENTRATION_SEED", "")
DEFAULT_SEED: Optional[int] = int(_seed_env) if _seed_env.strip() else None
MAX_GAMES = max(1, int(os.getenv("CONCENTRATION_MAX_GAMES", "256")))

app = Flask(__name__)


class _Session:
    """One hosted game plus the last cheat reveal its observer captured."""

    def __init__(self, model: ConcentrationModel) -> None:
        self.model = model
        self.reveal: Optional[Tuple[Card, ...]] = None
        model.subscribe(self._on_change)

    def _on_change(self, model: ConcentrationModel, payload: Any) -> None:
        self.reveal = cheat_view(model.get_cards()) if payload == CHEAT else None


_games: "OrderedDict[str, _Session]" = OrderedDict()
_games_lock = threading.Lock()


def _create_game(seed: Optional[int]) -> Tuple[str, _Session]:
    game_id = uuid.uuid4().hex
    session = _Session(ConcentrationModel(seed=seed))
    with _games_lock:
        while _games and len(_games) >= MAX_GAMES:
            evicted, _ = _games.popitem(last=False)
            log.info("evicted game %s", evicted)
        _games[game_id] = session
    log.info("created game %s (seed=%s)", game_id, seed)
    return game_id, session


def _get_game(game_id: Any) -> Optional[_Session]:
    if not isinstance(game_id, str):
        return None
    with _games_lock:
        return _games.get(game_id)


# ---------- JSON helpers ----------

def _card_to_json(card: Card) -> Dict[str, Any]:
    return {"faceValue": int(card.number), "faceUp": bool(card.face_up), "name": card.name}


def _cards_to_json(cards: Tuple[Card, ...]) -> List[Dict[str, Any]]:
    return [_card_to_json(c) for c in cards]


def state_to_json(model: ConcentrationModel) -> Dict[str, Any]:
    cards = model.get_cards()
    return {
        "cards": _cards_to_json(cards),
        "moveCount": model.get_move_count(),
        "phase": model.phase.value,
        "won": model.is_won(),
        "canUndo": model.can_undo(),
        "message": status_message(cards),
        "movesLabel": moves_label(model.get_move_count()),
    }


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _body_index(body: Dict[str, Any]) -> Optional[int]:
    """Flat index from {index} or {row, col}; None when malformed."""
    if "index" in body:
        idx = body["index"]
        return idx if _is_int(idx) else None
    row, col = body.get("row"), body.get("col")
    if not (_is_int(row) and _is_int(col)):
        return None
    if 0 <= row < ROWS and 0 <= col < COLS:
        return index_of(row, col)
    return -1  # off the grid, ignored like any out-of-range click


def _session_or_404(body: Dict[str, Any]):
    session = _get_game(body.get("id"))
    if session is None:
        return None, (jsonify({"ok": False, "error": "unknown game id"}), 404)
    return session, None


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    seed = body.get("seed", DEFAULT_SEED)
    if seed is not None and not _is_int(seed):
        return jsonify({"ok": False, "error": "seed must be an integer"}), 400
    game_id, session = _create_game(seed)
    return jsonify({"ok": True, "id": game_id, "state": state_to_json(session.model)})


@app.get("/api/state/<game_id>")
def api_state(game_id: str) -> Any:
    session = _get_game(game_id)
    if session is None:
        return jsonify({"ok": False, "error": "unknown game id"}), 404
    return jsonify({"ok": True, "state": state_to_json(session.model)})


@app.post("/api/select")
def api_select() -> Any:
    body = _json_body()
    session, err = _session_or_404(body)
    if err:
        return err
    index = _body_index(body)
    if index is None:
        return jsonify({"ok": False, "error": "index (or row and col) must be integers"}), 400
    changed = session.model.select_card(index)
    return jsonify({"ok": True, "changed": changed, "state": state_to_json(session.model)})


@app.post("/api/undo")
def api_undo() -> Any:
    body = _json_body()
    session, err = _session_or_404(body)
    if err:
        return err
    changed = session.model.undo()
    return jsonify({"ok": True, "changed": changed, "state": state_to_json(session.model)})


@app.post("/api/reset")
def api_reset() -> Any:
    body = _json_body()
    session, err = _session_or_404(body)
    if err:
        return err
    session.model.reset()
    return jsonify({"ok": True, "changed": True, "state": state_to_json(session.model)})


@app.post("/api/cheat")
def api_cheat() -> Any:
    body = _json_body()
    session, err = _session_or_404(body)
    if err:
        return err
    session.model.cheat()
    reveal = session.reveal or cheat_view(session.model.get_cards())
    return jsonify({
        "ok": True,
        "state": state_to_json(session.model),
        "cheat": _cards_to_json(reveal),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
