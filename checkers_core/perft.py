from __future__ import annotations

from typing import Dict

from .engine import Checkers
from .sequences import play_sequence, sequence_to_text, turn_sequences


def perft(game: Checkers, depth: int) -> int:
    """Performance test: count complete turns to `depth` from the current position.

    A whole capture chain counts as one turn, matching published draughts perft tables.
    """
    if depth <= 0:
        return 1
    turns = turn_sequences(game)
    if depth == 1:
        return len(turns)
    total = 0
    for seq in turns:
        child = game.copy()
        play_sequence(child, seq)
        total += perft(child, depth - 1)
    return total


def perft_divide(game: Checkers, depth: int) -> Dict[str, int]:
    """Divide perft: nodes per root turn."""
    out: Dict[str, int] = {}
    for seq in turn_sequences(game):
        child = game.copy()
        play_sequence(child, seq)
        out[sequence_to_text(seq)] = perft(child, depth - 1)
    return out
