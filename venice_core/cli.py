from __future__ import annotations

import argparse
import json
from typing import Optional

from .ai import cpu_take_turn, make_rng
from .codec import board_from_json
from .errors import VeniceError
from .moves import (
    declare_impossible,
    finish_turn,
    legal_placements,
    new_game,
    place_held,
    remaining_inventory,
    rotate_held,
)
from .solver import solve
from .state import GameState

HELP = "Commands: 'x y' place, r rotate, f finish turn, i declare impossible, q quit"


def _show(state: GameState) -> None:
    print(state.board.pretty(margin=1))
    straights, curves = remaining_inventory(state)
    held = f"{state.held.kind} r{state.held.rotation}" if state.held is not None else "-"
    print(f"Player {state.player} | holding {held} | left: {straights} straight, {curves} curve")


def _solve_file(path: str, straights: int, curves: int) -> None:
    with open(path, "r", encoding="utf-8") as f:
        board = board_from_json(json.load(f))
    print(board.pretty(margin=1))
    res = solve(board, straights, curves)
    if res.possible:
        print(f"\nA loop can still be closed ({res.nodes} states searched).")
        for p in res.placements or []:
            print(f"  {p.kind} r{p.rotation} at ({p.x},{p.y})")
    else:
        print(f"\nNo loop can be closed ({res.nodes} states searched).")


def _human_turn(state: GameState) -> bool:
    """Reads commands until the turn passes or the game ends. Returns False on quit."""
    me = state.player
    while not state.is_over() and state.player == me:
        text = input("> ").strip().lower()
        try:
            if text == "q":
                return False
            if text == "r":
                rotate_held(state)
            elif text == "f":
                finish_turn(state)
            elif text == "i":
                ok = declare_impossible(state)
                print("Correct!" if ok else "Wrong: a loop is still possible.")
            else:
                sep = "," if "," in text else " "
                try:
                    x_s, y_s = [t for t in text.split(sep) if t != ""]
                    x, y = int(x_s), int(y_s)
                except ValueError:
                    print(HELP)
                    continue
                place_held(state, x, y)
        except VeniceError as e:
            print(f"error: {e}")
            if state.held is not None:
                print("Legal cells:", legal_placements(state))
            continue
        if not state.is_over():
            _show(state)
    return True


def _play(seed: Optional[int], hotseat: bool) -> None:
    state = new_game(seed=seed)
    rng = make_rng(seed)
    print(HELP)
    _show(state)
    while not state.is_over():
        if state.player == 2 and not hotseat:
            placed = cpu_take_turn(state, rng)
            print(f"CPU placed at {placed}")
            _show(state)
            continue
        if not _human_turn(state):
            return
    if state.winner is None:
        print("Draw: no tiles left and no loop formed.")
    else:
        print(f"Player {state.winner} wins ({state.result}).")


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Venice Connection rule engine and loop solver")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for the deck and the CPU")
    parser.add_argument("--hotseat", action="store_true", help="Two human players, no CPU")
    parser.add_argument("--solve", metavar="FILE", default=None, help="Board JSON file to check for a closable loop")
    parser.add_argument("--straights", type=int, default=0, help="Straight tiles available (with --solve)")
    parser.add_argument("--curves", type=int, default=0, help="Curved tiles available (with --solve)")
    args = parser.parse_args(argv)

    if args.solve:
        _solve_file(args.solve, args.straights, args.curves)
        return
    _play(args.seed, args.hotseat)
