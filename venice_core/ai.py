from __future__ import annotations

import random
from typing import List, Optional

from . import config
from .board import Coord
from .logging_utils import get_logger
from .moves import finish_turn, legal_placements, place_held, rotate_held, switch_turn
from .state import GameState
from .tile import distinct_rotations

logger = get_logger('cpu')


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(config.CPU_SEED if seed is None else seed)


def cpu_pick_placement(state: GameState, rng: random.Random) -> Optional[Coord]:
    """
    Picks a random legal cell for the held tile. When the current rotation fits
    nowhere the tile is turned until some rotation does.
    """
    if state.held is None:
        return None
    candidates = legal_placements(state)
    turns = len(distinct_rotations(state.held.kind)) - 1
    while not candidates and turns > 0:
        rotate_held(state)
        candidates = legal_placements(state)
        turns -= 1
    if not candidates:
        return None
    return rng.choice(candidates)


def cpu_take_turn(state: GameState, rng: random.Random) -> List[Coord]:
    """Plays one whole turn for the mover: 1 to MAX_TILES_PER_TURN placements, then hands over."""
    me = state.player
    target = rng.randint(1, config.MAX_TILES_PER_TURN)
    placed: List[Coord] = []
    while len(placed) < target and not state.is_over() and state.player == me:
        spot = cpu_pick_placement(state, rng)
        if spot is None:
            break
        place_held(state, *spot)
        placed.append(spot)

    # place_held may already have ended the turn or the game.
    if state.is_over() or state.player != me:
        return placed
    if placed:
        finish_turn(state)
    else:
        logger.info('CPU (player %d) could not place a tile; passing', me)
        switch_turn(state)
    return placed
