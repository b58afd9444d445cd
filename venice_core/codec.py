from __future__ import annotations

from typing import Any, Dict, List, Optional

from .board import Board
from .state import GameState
from .tile import DIRECTIONS, KINDS, Tile, opposite, step


def tile_to_json(t: Tile) -> Dict[str, Any]:
    return {"kind": t.kind, "rotation": int(t.rotation)}


def tile_from_json(obj: Dict[str, Any]) -> Tile:
    kind = str(obj["kind"])
    if kind not in KINDS:
        raise ValueError(f"unknown tile kind: {kind!r}")
    return Tile(kind, int(obj.get("rotation", 0)))


def board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "tiles": [
            {"x": x, "y": y, **tile_to_json(t)}
            for (x, y), t in b.tiles.items()
        ],
        "bounds": {"minX": b.min_x, "maxX": b.max_x, "minY": b.min_y, "maxY": b.max_y},
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Rebuilds a board, rejecting overlapping tiles and mismatched shared edges."""
    board = Board()
    for item in obj.get("tiles", []):
        x, y = int(item["x"]), int(item["y"])
        if board.get_tile(x, y) is not None:
            raise ValueError(f"two tiles at ({x},{y})")
        board.place_tile(x, y, tile_from_json(item))
    for (x, y), t in board.tiles.items():
        mine = t.connections()
        for d in DIRECTIONS:
            n = board.tiles.get(step(x, y, d))
            if n is not None and (d in mine) != (opposite(d) in n.connections()):
                raise ValueError(f"edge mismatch between ({x},{y}) and {step(x, y, d)}")
    bounds = obj.get("bounds") or {}
    # Stored bounds may be wider than the tiles after removals; keep the union.
    board.min_x = min(board.min_x, int(bounds.get("minX", 0)))
    board.max_x = max(board.max_x, int(bounds.get("maxX", 0)))
    board.min_y = min(board.min_y, int(bounds.get("minY", 0)))
    board.max_y = max(board.max_y, int(bounds.get("maxY", 0)))
    return board


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "board": board_to_json(s.board),
        "deck": list(s.deck),
        "held": tile_to_json(s.held) if s.held is not None else None,
        "player": int(s.player),
        "placedThisTurn": [[int(x), int(y)] for (x, y) in s.placed_this_turn],
        "winner": s.winner,
        "result": s.result,
        "openEnds": s.board.has_open_ends(),
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    deck: List[str] = [str(k) for k in obj.get("deck", [])]
    for k in deck:
        if k not in KINDS:
            raise ValueError(f"unknown tile kind in deck: {k!r}")
    held_in = obj.get("held")
    held: Optional[Tile] = tile_from_json(held_in) if held_in else None
    player = int(obj.get("player", 1))
    if player not in (1, 2):
        raise ValueError(f"player must be 1 or 2, got {player}")
    winner = obj.get("winner")
    return GameState(
        board=board_from_json(obj["board"]),
        deck=deck,
        held=held,
        player=player,
        placed_this_turn=[(int(x), int(y)) for x, y in obj.get("placedThisTurn", [])],
        winner=int(winner) if winner is not None else None,
        result=obj.get("result"),
    )
