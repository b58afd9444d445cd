from __future__ import annotations

# Facade module that re-exports the Venice Connection core.
# app.py and the tests import from here; single-responsibility modules live under venice_core/*.

from venice_core.tile import (  # noqa: F401
    CURVE,
    DIRECTIONS,
    DOWN,
    LEFT,
    RIGHT,
    STRAIGHT,
    UP,
    Direction,
    Kind,
    Tile,
    distinct_rotations,
    opposite,
    step,
)
from venice_core.board import Board, Coord  # noqa: F401
from venice_core.solver import (  # noqa: F401
    Placement,
    SolveResult,
    find_closing_sequence,
    is_possible,
    solve,
)
from venice_core.deck import build_deck, count_kinds  # noqa: F401
from venice_core.state import (  # noqa: F401
    RESULT_DRAW,
    RESULT_IMPOSSIBLE,
    RESULT_LOOP,
    RESULT_WRONG_DECLARATION,
    GameState,
)
from venice_core.moves import (  # noqa: F401
    declare_impossible,
    finish_turn,
    has_any_placement,
    legal_placements,
    new_game,
    place_held,
    remaining_inventory,
    rotate_held,
    start_turn,
    switch_turn,
    turn_allows,
)
from venice_core.ai import cpu_pick_placement, cpu_take_turn, make_rng  # noqa: F401
from venice_core.errors import IllegalAction, IllegalPlacement, VeniceError  # noqa: F401


def main() -> None:
    # CLI driver delegated to venice_core.cli
    from venice_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
