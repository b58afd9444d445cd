"""
Venice Connection core Python package.

Rule engine and loop-feasibility oracle for the two-player canal tile game,
split into small single-responsibility modules:
- tile.py: Tile, directions and rotation symmetry
- board.py: sparse Board with edge matching and open-end detection
- solver.py: backtracking search deciding whether a loop can still close
- deck.py, state.py, moves.py: deck, turn state and turn rules
- ai.py: CPU opponent
- codec.py: JSON encoding shared by app.py and the CLI
"""
