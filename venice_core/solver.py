from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .board import Board, Coord
from .logging_utils import get_logger
from .tile import CURVE, STRAIGHT, Kind, Tile, distinct_rotations

logger = get_logger('solver')

_ORIGIN: Coord = (0, 0)


@dataclass(frozen=True)
class Placement:
    """One tile put down by the search."""
    x: int
    y: int
    kind: Kind
    rotation: int

    def tile(self) -> Tile:
        return Tile(self.kind, self.rotation)


@dataclass
class SolveResult:
    """Verdict of a loop-feasibility search."""
    possible: bool
    placements: Optional[List[Placement]]  # a closing sequence when possible
    nodes: int  # search states visited


def _candidates(straights: int, curves: int) -> Iterator[Tuple[Kind, int]]:
    """Yields (kind, rotation) pairs still in stock, straights first."""
    if straights > 0:
        for r in distinct_rotations(STRAIGHT):
            yield STRAIGHT, r
    if curves > 0:
        for r in distinct_rotations(CURVE):
            yield CURVE, r


@dataclass
class _Frame:
    """One level of the search: the spot being filled and the options left for it."""
    x: int
    y: int
    straights: int
    curves: int
    options: Iterator[Tuple[Kind, int]]
    placed: bool = False


def solve(board: Board, straights: int, curves: int) -> SolveResult:
    """
    Decides whether the open ends of board can all be closed using at most
    `straights` straight tiles and `curves` curved tiles.

    The search expands a single open spot per level: every open end has to be
    filled eventually, so trying each stocked tile and rotation at that one
    cell covers every closing configuration. Each placement consumes a tile,
    which bounds the depth by straights + curves.

    The caller's board is never touched; the search runs on a clone.
    """
    if straights < 0 or curves < 0:
        raise ValueError(f'Tile counts must be non-negative (got {straights}, {curves})')

    work = board.clone()
    path: List[Placement] = []
    stack: List[_Frame] = []
    nodes = 0

    def expand(s: int, c: int) -> Optional[bool]:
        # Settles the current position, or pushes a frame for its first open spot.
        nonlocal nodes
        nodes += 1
        if not work.has_open_ends():
            return True
        if s == 0 and c == 0:
            return False
        # Placement is translation invariant, so an empty board starts at the origin.
        spots = [_ORIGIN] if work.is_empty() else work.open_spots()
        if not spots:
            return False
        x, y = spots[0]
        stack.append(_Frame(x, y, s, c, _candidates(s, c)))
        return None

    # Explicit stack: depth is bounded by the inventory, not by the interpreter.
    found = expand(straights, curves)
    while found is None and stack:
        frame = stack[-1]
        if frame.placed:
            work.remove_tile(frame.x, frame.y)
            path.pop()
            frame.placed = False
        for kind, rotation in frame.options:
            tile = Tile(kind, rotation)
            if work.is_valid_placement(frame.x, frame.y, tile):
                break
        else:
            stack.pop()
            continue
        work.place_tile(frame.x, frame.y, tile)
        path.append(Placement(frame.x, frame.y, kind, rotation))
        frame.placed = True
        if kind == STRAIGHT:
            found = expand(frame.straights - 1, frame.curves)
        else:
            found = expand(frame.straights, frame.curves - 1)
        if found is False:
            found = None
    possible = bool(found)
    logger.debug(
        'solve straights=%d curves=%d tiles=%d -> %s (nodes=%d, placements=%d)',
        straights, curves, len(board), possible, nodes, len(path),
    )
    return SolveResult(possible=possible, placements=list(path) if possible else None, nodes=nodes)


def find_closing_sequence(board: Board, straights: int, curves: int) -> Optional[List[Placement]]:
    """Returns placements that close every open end, in a legal order, or None."""
    return solve(board, straights, curves).placements


def is_possible(board: Board, straights: int, curves: int) -> bool:
    """Can a loop still be completed from board with the given inventory?"""
    return solve(board, straights, curves).possible
