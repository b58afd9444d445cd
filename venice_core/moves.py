from __future__ import annotations

from typing import List, Optional, Tuple

from . import config
from .board import Board, Coord
from .deck import build_deck, count_kinds
from .errors import IllegalAction, IllegalPlacement
from .logging_utils import get_logger
from .solver import is_possible
from .state import (
    RESULT_DRAW,
    RESULT_IMPOSSIBLE,
    RESULT_LOOP,
    RESULT_WRONG_DECLARATION,
    GameState,
)
from .tile import STRAIGHT, Tile, distinct_rotations

logger = get_logger('game')


def new_game(seed: Optional[int] = None, straights: Optional[int] = None, curves: Optional[int] = None) -> GameState:
    """Deals a fresh deck and starts player 1's first turn."""
    state = GameState(board=Board(), deck=build_deck(seed, straights, curves))
    start_turn(state)
    return state


def start_turn(state: GameState) -> None:
    """Resets the per-turn placements and makes sure the mover holds a tile."""
    state.placed_this_turn = []
    if state.held is None:
        if not state.deck:
            state.result = RESULT_DRAW
            state.winner = None
            logger.info('No tiles left and no loop formed: draw')
            return
        state.held = Tile(state.deck.pop())
    logger.info('Player %d turn start (holding %s)', state.player, state.held.kind)


def switch_turn(state: GameState) -> None:
    state.player = state.other_player()
    start_turn(state)


def turn_allows(state: GameState, x: int, y: int) -> bool:
    """
    Turn rules for the next placement: at most MAX_TILES_PER_TURN tiles, each
    one next to the previous one, all on a single row or column.
    """
    placed = state.placed_this_turn
    n = len(placed)
    if n == 0:
        return True
    if n >= config.MAX_TILES_PER_TURN:
        return False
    lx, ly = placed[-1]
    if abs(x - lx) + abs(y - ly) != 1:
        return False
    if n == 1:
        return True
    (fx, fy), (sx, _) = placed[0], placed[1]
    if fx == sx:
        return x == fx
    return y == fy


def legal_placements(state: GameState, tile: Optional[Tile] = None) -> List[Coord]:
    """Cells where tile (the held tile by default) may go this turn, row-major."""
    tile = tile if tile is not None else state.held
    if tile is None or state.is_over():
        return []
    board = state.board
    return [
        (x, y)
        for (x, y) in board.scan(1)
        if board.is_valid_placement(x, y, tile) and turn_allows(state, x, y)
    ]


def has_any_placement(state: GameState) -> bool:
    """True if the held tile fits somewhere in at least one of its rotations."""
    if state.held is None:
        return False
    for r in distinct_rotations(state.held.kind):
        if legal_placements(state, Tile(state.held.kind, r)):
            return True
    return False


def rotate_held(state: GameState) -> None:
    if state.held is None:
        raise IllegalAction('No tile in hand to rotate')
    state.held.rotate()


def place_held(state: GameState, x: int, y: int) -> None:
    """
    Puts the held tile at (x, y). Completing a loop wins at once; otherwise the
    next tile is drawn while the turn still allows placements.
    """
    if state.is_over():
        raise IllegalAction('The game is over')
    tile = state.held
    if tile is None:
        raise IllegalAction('No tile in hand to place')
    if not state.board.is_valid_placement(x, y, tile):
        raise IllegalPlacement(x, y, 'tile does not fit the board')
    if not turn_allows(state, x, y):
        raise IllegalPlacement(x, y, 'breaks the turn line rule')

    state.board.place_tile(x, y, tile)
    state.held = None
    state.placed_this_turn.append((x, y))
    logger.info('Player %d placed %s r%d at (%d,%d)', state.player, tile.kind, tile.rotation, x, y)

    if not state.board.has_open_ends():
        state.winner = state.player
        state.result = RESULT_LOOP
        logger.info('Player %d wins: loop completed', state.player)
        return

    if len(state.placed_this_turn) < config.MAX_TILES_PER_TURN and state.deck:
        state.held = Tile(state.deck.pop())
    else:
        switch_turn(state)


def finish_turn(state: GameState) -> None:
    """Ends the turn. At least one tile must be placed unless the held tile fits nowhere."""
    if state.is_over():
        raise IllegalAction('The game is over')
    if not state.placed_this_turn and has_any_placement(state):
        raise IllegalAction('Place at least one tile before ending the turn')
    switch_turn(state)


def remaining_inventory(state: GameState) -> Tuple[int, int]:
    """(straights, curves) still available: the draw pile plus the held tile."""
    straights, curves = count_kinds(state.deck)
    if state.held is not None:
        if state.held.kind == STRAIGHT:
            straights += 1
        else:
            curves += 1
    return straights, curves


def declare_impossible(state: GameState) -> bool:
    """
    The mover claims no loop can be completed with the remaining tiles.
    A correct claim wins, a wrong one hands the win to the opponent.
    Returns whether the claim was correct.
    """
    if state.is_over():
        raise IllegalAction('The game is over')
    if state.placed_this_turn:
        raise IllegalAction('Impossible can only be declared before placing a tile')
    straights, curves = remaining_inventory(state)
    possible = is_possible(state.board, straights, curves)
    if possible:
        state.winner = state.other_player()
        state.result = RESULT_WRONG_DECLARATION
        logger.info('Player %d declared impossible wrongly; player %d wins', state.player, state.winner)
    else:
        state.winner = state.player
        state.result = RESULT_IMPOSSIBLE
        logger.info('Player %d correctly declared impossible', state.player)
    return not possible
