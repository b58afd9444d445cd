from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, Coord
from .tile import Kind, Tile

# How a finished game ended.
RESULT_LOOP = 'loop'
RESULT_IMPOSSIBLE = 'impossible'
RESULT_WRONG_DECLARATION = 'wrong-declaration'
RESULT_DRAW = 'draw'


@dataclass
class GameState:
    """Mutable state of one game: the board, the draw pile and whose turn it is."""
    board: Board
    deck: List[Kind]
    held: Optional[Tile] = None  # drawn but not yet placed
    player: int = 1  # 1 or 2
    placed_this_turn: List[Coord] = field(default_factory=list)
    winner: Optional[int] = None
    result: Optional[str] = None

    def other_player(self) -> int:
        return 2 if self.player == 1 else 1

    def is_over(self) -> bool:
        return self.result is not None
