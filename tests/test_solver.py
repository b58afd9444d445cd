import sys
import unittest

from game import (
    Board,
    CURVE,
    DIRECTIONS,
    STRAIGHT,
    Tile,
    find_closing_sequence,
    is_possible,
    solve,
    step,
)


def _scenario_b():
    # 2x2 loop missing its bottom-left corner
    board = Board()
    board.place_tile(0, 0, Tile(CURVE, 0))
    board.place_tile(1, 0, Tile(CURVE, 1))
    board.place_tile(1, 1, Tile(CURVE, 2))
    return board


def _scenario_c():
    # Two vertical straights with a one-cell gap at (0,1)
    board = Board()
    board.place_tile(0, 0, Tile(STRAIGHT, 0))
    board.place_tile(0, 2, Tile(STRAIGHT, 0))
    return board


def _snapshot(board):
    return (
        {c: (t.kind, t.rotation) for c, t in board.tiles.items()},
        (board.min_x, board.max_x, board.min_y, board.max_y),
    )


def _brute_force(board, straights, curves, memo=None):
    """Tries every legal placement at every cell touching the board, all 4 rotations of both kinds."""
    if memo is None:
        memo = {}
    if not board.has_open_ends():
        return True
    if straights == 0 and curves == 0:
        return False
    key = (frozenset((c, t.kind, t.connections()) for c, t in board.tiles.items()), straights, curves)
    if key in memo:
        return memo[key]
    if board.is_empty():
        cells = [(0, 0)]  # translation invariant
    else:
        cells = sorted({
            step(x, y, d) for (x, y) in board.tiles for d in DIRECTIONS
        } - set(board.tiles))
    found = False
    for (x, y) in cells:
        for kind, count in ((STRAIGHT, straights), (CURVE, curves)):
            if count == 0:
                continue
            for r in range(4):
                t = Tile(kind, r)
                if not board.is_valid_placement(x, y, t):
                    continue
                board.place_tile(x, y, t)
                if kind == STRAIGHT:
                    ok = _brute_force(board, straights - 1, curves, memo)
                else:
                    ok = _brute_force(board, straights, curves - 1, memo)
                board.remove_tile(x, y)
                if ok:
                    found = True
                    break
            if found:
                break
        if found:
            break
    memo[key] = found
    return found


class TestSolverScenarios(unittest.TestCase):
    def test_given_loop_missing_one_corner_when_one_curve_left_then_possible(self):
        board = _scenario_b()
        self.assertTrue(is_possible(board, 0, 1))
        seq = find_closing_sequence(board, 0, 1)
        self.assertEqual(len(seq), 1)
        p = seq[0]
        self.assertEqual((p.x, p.y, p.kind, p.rotation), (0, 1, CURVE, 3))

    def test_given_loop_missing_one_corner_when_only_straights_then_impossible(self):
        self.assertFalse(is_possible(_scenario_b(), 5, 0))
        self.assertFalse(is_possible(_scenario_b(), 0, 0))

    def test_given_vertical_gap_when_only_curves_then_impossible(self):
        self.assertFalse(is_possible(_scenario_c(), 0, 10))

    def test_given_closed_loop_when_no_tiles_left_then_possible_with_empty_sequence(self):
        board = _scenario_b()
        board.place_tile(0, 1, Tile(CURVE, 3))
        res = solve(board, 0, 0)
        self.assertTrue(res.possible)
        self.assertEqual(res.placements, [])
        self.assertEqual(res.nodes, 1)

    def test_given_empty_board_when_four_curves_then_possible(self):
        # Not a dead end: the search seeds the first tile at the origin.
        self.assertTrue(is_possible(Board(), 0, 4))
        self.assertFalse(is_possible(Board(), 0, 3))
        self.assertFalse(is_possible(Board(), 4, 0))
        self.assertFalse(is_possible(Board(), 0, 0))

    def test_given_single_horizontal_straight_when_budget_varies_then_needs_2x3_loop(self):
        board = Board()
        board.place_tile(0, 0, Tile(STRAIGHT, 1))
        self.assertTrue(is_possible(board, 1, 4))
        self.assertFalse(is_possible(board, 0, 4))
        self.assertFalse(is_possible(board, 1, 3))

    def test_given_single_straight_when_budget_exceeds_recursion_limit_then_false(self):
        board = Board()
        board.place_tile(0, 0, Tile(STRAIGHT, 0))
        budget = sys.getrecursionlimit() + 200
        res = solve(board, budget, 0)
        self.assertFalse(res.possible)
        self.assertIsNone(res.placements)
        self.assertGreater(res.nodes, budget)
        self.assertEqual(len(board), 1)

    def test_given_negative_counts_when_solving_then_value_error(self):
        with self.assertRaises(ValueError):
            is_possible(Board(), -1, 2)


class TestSolverProperties(unittest.TestCase):
    def _starting_boards(self):
        single_curve = Board()
        single_curve.place_tile(0, 0, Tile(CURVE, 1))
        single_straight = Board()
        single_straight.place_tile(0, 0, Tile(STRAIGHT, 0))
        u_shape = Board()
        u_shape.place_tile(0, 0, Tile(CURVE, 0))
        u_shape.place_tile(1, 0, Tile(CURVE, 1))
        return {
            "empty": Board(),
            "single_curve": single_curve,
            "single_straight": single_straight,
            "u_shape": u_shape,
            "corner_missing": _scenario_b(),
            "gap": _scenario_c(),
        }

    def test_given_any_call_when_solving_then_caller_board_unchanged(self):
        for name, board in self._starting_boards().items():
            for s, c in [(0, 0), (1, 1), (2, 4), (0, 5)]:
                before = _snapshot(board)
                is_possible(board, s, c)
                self.assertEqual(_snapshot(board), before, f"{name} mutated by ({s},{c})")

    def test_given_possible_verdict_when_replaying_sequence_then_loop_closes_legally(self):
        for name, board in self._starting_boards().items():
            for s in range(0, 4):
                for c in range(0, 6):
                    res = solve(board, s, c)
                    if not res.possible:
                        self.assertIsNone(res.placements)
                        continue
                    with self.subTest(board=name, straights=s, curves=c):
                        replay = board.clone()
                        used_s = used_c = 0
                        for p in res.placements:
                            tile = p.tile()
                            self.assertTrue(replay.is_valid_placement(p.x, p.y, tile))
                            replay.place_tile(p.x, p.y, tile)
                            if p.kind == STRAIGHT:
                                used_s += 1
                            else:
                                used_c += 1
                        self.assertLessEqual(used_s, s)
                        self.assertLessEqual(used_c, c)
                        self.assertFalse(replay.has_open_ends())

    def test_given_small_budgets_when_compared_to_brute_force_then_verdicts_agree(self):
        for name, board in self._starting_boards().items():
            for s in range(0, 5):
                for c in range(0, 5 - s):
                    with self.subTest(board=name, straights=s, curves=c):
                        expected = _brute_force(board.clone(), s, c)
                        self.assertEqual(is_possible(board, s, c), expected)


if __name__ == '__main__':
    unittest.main(verbosity=2)
