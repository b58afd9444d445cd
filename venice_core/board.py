from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .tile import CURVE, DIRECTIONS, DOWN, LEFT, RIGHT, STRAIGHT, UP, Tile, opposite, step

Coord = Tuple[int, int]  # (x, y), y grows downward

_GLYPHS = {
    (STRAIGHT, frozenset((UP, DOWN))): '│',
    (STRAIGHT, frozenset((RIGHT, LEFT))): '─',
    (CURVE, frozenset((RIGHT, DOWN))): '┌',
    (CURVE, frozenset((DOWN, LEFT))): '┐',
    (CURVE, frozenset((LEFT, UP))): '┘',
    (CURVE, frozenset((UP, RIGHT))): '└',
}


@dataclass
class Board:
    """
    Sparse, unbounded grid of placed tiles.

    The min/max fields are a high-water mark of every coordinate ever placed
    (anchored at the origin). Removing a tile never shrinks them, so they are
    only a hint for scanning candidate cells.
    """
    tiles: Dict[Coord, Tile] = field(default_factory=dict)
    min_x: int = 0
    max_x: int = 0
    min_y: int = 0
    max_y: int = 0

    def __len__(self) -> int:
        return len(self.tiles)

    def is_empty(self) -> bool:
        return not self.tiles

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        return self.tiles.get((x, y))

    def place_tile(self, x: int, y: int, tile: Tile) -> None:
        """Inserts without checking; callers validate with is_valid_placement first."""
        self.tiles[(x, y)] = tile
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y)

    def remove_tile(self, x: int, y: int) -> None:
        self.tiles.pop((x, y), None)

    def get_neighbors(self, x: int, y: int) -> List[Tile]:
        """Occupied orthogonal neighbors in Up, Right, Down, Left order."""
        out: List[Tile] = []
        for d in DIRECTIONS:
            t = self.tiles.get(step(x, y, d))
            if t is not None:
                out.append(t)
        return out

    def is_valid_placement(self, x: int, y: int, tile: Tile) -> bool:
        """
        Checks the board rules for putting tile at (x, y):
        1. the cell must be empty;
        2. it must touch an existing tile, unless the board is empty;
        3. every shared edge must match: a connection on one side exactly
           when the neighbor has one on the opposite side.
        """
        if (x, y) in self.tiles:
            return False
        if self.tiles and not self.get_neighbors(x, y):
            return False
        mine = tile.connections()
        for d in DIRECTIONS:
            neighbor = self.tiles.get(step(x, y, d))
            if neighbor is None:
                continue
            if (d in mine) != (opposite(d) in neighbor.connections()):
                return False
        return True

    def open_ends(self) -> Iterator[Tuple[Coord, int]]:
        """Yields (coord, direction) for every connection that points at an empty cell."""
        for (x, y), tile in self.tiles.items():
            for d in sorted(tile.connections()):
                if step(x, y, d) not in self.tiles:
                    yield (x, y), d

    def has_open_ends(self) -> bool:
        # An empty board is not a loop yet.
        if not self.tiles:
            return True
        for _ in self.open_ends():
            return True
        return False

    def open_spots(self) -> List[Coord]:
        """Empty cells that some connection points at, in discovery order."""
        seen: Dict[Coord, None] = {}
        for (x, y), d in self.open_ends():
            seen.setdefault(step(x, y, d), None)
        return list(seen)

    def clone(self) -> 'Board':
        return Board(
            tiles={c: t.copy() for c, t in self.tiles.items()},
            min_x=self.min_x,
            max_x=self.max_x,
            min_y=self.min_y,
            max_y=self.max_y,
        )

    def scan(self, margin: int = 1) -> Iterator[Coord]:
        """Iterates row-major over the bounds expanded by margin cells."""
        for y in range(self.min_y - margin, self.max_y + margin + 1):
            for x in range(self.min_x - margin, self.max_x + margin + 1):
                yield (x, y)

    def pretty(self, margin: int = 0) -> str:
        """Box-drawing dump of the bounded area; empty cells show as '·'."""
        lines: List[str] = []
        for y in range(self.min_y - margin, self.max_y + margin + 1):
            row: List[str] = []
            for x in range(self.min_x - margin, self.max_x + margin + 1):
                t = self.tiles.get((x, y))
                row.append('·' if t is None else _GLYPHS[(t.kind, t.connections())])
            lines.append(''.join(row))
        return '\n'.join(lines)
