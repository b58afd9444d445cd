from __future__ import annotations

import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from venice_core import config
from venice_core.codec import (
    board_from_json,
    board_to_json,
    json_to_state,
    state_to_json,
    tile_from_json,
    tile_to_json,
)
from venice_core.logging_utils import get_logger
from game import (
    GameState,
    IllegalAction,
    IllegalPlacement,
    cpu_take_turn,
    declare_impossible,
    finish_turn,
    legal_placements,
    make_rng,
    new_game,
    place_held,
    remaining_inventory,
    rotate_held,
    solve,
)

logger = get_logger("app")

app = Flask(__name__)


def _payload(s: GameState) -> Dict[str, Any]:
    straights, curves = remaining_inventory(s)
    return {
        "ok": True,
        "state": state_to_json(s),
        "legalPlacements": [list(c) for c in legal_placements(s)],
        "remaining": {"straights": straights, "curves": curves},
    }


def _over_budget(straights: int, curves: int) -> bool:
    return straights + curves > config.MAX_SOLVE_TILES


def _parse_seed(body: Dict[str, Any]) -> Optional[int]:
    seed = body.get("seed", None)
    return int(seed) if seed is not None else None


def _load_state() -> Tuple[Optional[GameState], Any]:
    """Parses body["state"]; returns (state, None) or (None, error response)."""
    body = request.get_json(force=True, silent=True) or {}
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, (jsonify({"ok": False, "error": "state required"}), 400)
    try:
        state = json_to_state(s_in)
    except (KeyError, TypeError, ValueError) as e:
        return None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)
    if _over_budget(*remaining_inventory(state)):
        return None, (jsonify({"ok": False, "error": "bad state: too many tiles left"}), 400)
    return state, None


def _rule_error(e: Exception, s: GameState) -> Any:
    return jsonify({
        "ok": False,
        "error": str(e),
        "legalPlacements": [list(c) for c in legal_placements(s)],
    }), 400


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        seed = _parse_seed(body)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad seed: {e}"}), 400
    state = new_game(seed=seed)
    return jsonify(_payload(state))


@app.post("/api/legal")
def api_legal() -> Any:
    state, err = _load_state()
    if err:
        return err
    body = request.get_json(force=True, silent=True) or {}
    tile = None
    if isinstance(body.get("tile"), dict):
        try:
            tile = tile_from_json(body["tile"])
        except (KeyError, TypeError, ValueError) as e:
            return jsonify({"ok": False, "error": f"bad tile: {e}"}), 400
    cells = legal_placements(state, tile)
    return jsonify({"ok": True, "legalPlacements": [list(c) for c in cells]})


@app.post("/api/rotate")
def api_rotate() -> Any:
    state, err = _load_state()
    if err:
        return err
    try:
        rotate_held(state)
    except IllegalAction as e:
        return _rule_error(e, state)
    return jsonify(_payload(state))


@app.post("/api/place")
def api_place() -> Any:
    state, err = _load_state()
    if err:
        return err
    body = request.get_json(force=True, silent=True) or {}
    move = body.get("move")
    if not isinstance(move, (list, tuple)) or len(move) != 2:
        return jsonify({"ok": False, "error": "move must be [x, y]"}), 400
    try:
        place_held(state, int(move[0]), int(move[1]))
    except (IllegalPlacement, IllegalAction) as e:
        return _rule_error(e, state)
    return jsonify(_payload(state))


@app.post("/api/finish")
def api_finish() -> Any:
    state, err = _load_state()
    if err:
        return err
    try:
        finish_turn(state)
    except IllegalAction as e:
        return _rule_error(e, state)
    return jsonify(_payload(state))


@app.post("/api/cpu")
def api_cpu() -> Any:
    state, err = _load_state()
    if err:
        return err
    if state.is_over():
        return jsonify({"ok": False, "error": "The game is over"}), 400
    body = request.get_json(force=True, silent=True) or {}
    try:
        rng = make_rng(_parse_seed(body))
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad seed: {e}"}), 400
    placed = cpu_take_turn(state, rng)
    out = _payload(state)
    out["placed"] = [list(c) for c in placed]
    return jsonify(out)


@app.post("/api/impossible")
def api_impossible() -> Any:
    state, err = _load_state()
    if err:
        return err
    try:
        correct = declare_impossible(state)
    except IllegalAction as e:
        return _rule_error(e, state)
    out = _payload(state)
    out["correct"] = correct
    return jsonify(out)


@app.post("/api/solve")
def api_solve() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = board_from_json(body["board"])
        straights = int(body.get("straights", 0))
        curves = int(body.get("curves", 0))
        if _over_budget(straights, curves):
            raise ValueError(f"at most {config.MAX_SOLVE_TILES} tiles can be searched")
        res = solve(board, straights, curves)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad request: {e}"}), 400
    return jsonify({
        "ok": True,
        "possible": bool(res.possible),
        "nodes": res.nodes,
        "placements": [
            {"x": p.x, "y": p.y, **tile_to_json(p.tile())}
            for p in (res.placements or [])
        ],
        "board": board_to_json(board),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    logger.info("Starting dev server on port %d", port)
    app.run(host="0.0.0.0", port=port, debug=debug)
