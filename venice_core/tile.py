from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

Direction = int  # 0: Up, 1: Right, 2: Down, 3: Left (clockwise)
Kind = str  # 'straight' or 'curve'

UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
DIRECTIONS: Tuple[Direction, ...] = (UP, RIGHT, DOWN, LEFT)

# (dx, dy) per direction; y grows downward.
OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

STRAIGHT: Kind = 'straight'
CURVE: Kind = 'curve'
KINDS: Tuple[Kind, ...] = (STRAIGHT, CURVE)

_CURVE_BASE: Tuple[Direction, ...] = (RIGHT, DOWN)


def opposite(d: Direction) -> Direction:
    return (d + 2) % 4


def step(x: int, y: int, d: Direction) -> Tuple[int, int]:
    """Returns the coordinate one cell away from (x, y) in direction d."""
    dx, dy = OFFSETS[d]
    return x + dx, y + dy


def distinct_rotations(kind: Kind) -> Tuple[int, ...]:
    """Rotations giving pairwise different connection sets for a tile kind."""
    if kind == STRAIGHT:
        return (0, 1)
    return (0, 1, 2, 3)


@dataclass
class Tile:
    """A straight or curved canal segment. Only the rotation ever changes."""
    kind: Kind
    rotation: int = 0  # quarter turns clockwise, 0..3

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f'Unknown tile kind: {self.kind!r}')
        self.rotation %= 4

    def rotate(self) -> None:
        self.rotation = (self.rotation + 1) % 4

    def set_rotation(self, r: int) -> None:
        # Python's % already maps negatives into 0..3.
        self.rotation = r % 4

    def connections(self) -> FrozenSet[Direction]:
        """Directions this tile connects to in its current rotation."""
        if self.kind == STRAIGHT:
            if self.rotation % 2 == 0:
                return frozenset((UP, DOWN))
            return frozenset((RIGHT, LEFT))
        return frozenset((d + self.rotation) % 4 for d in _CURVE_BASE)

    def connects(self, d: Direction) -> bool:
        return d in self.connections()

    def copy(self) -> 'Tile':
        return Tile(self.kind, self.rotation)
