"""
Checkers core Python package.

Rules engine for English draughts, kept free of any transport or UI code so
the Flask app and the CLI can share it.
Modules:
- board.py: Board, Cell, Coord, standard layout
- moves.py: Move and single-square move generation
- engine.py: Checkers (turn, jump chains, forced capture, promotion)
- sequences.py / perft.py: full-turn lookahead helpers
"""
