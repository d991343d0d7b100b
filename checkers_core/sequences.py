from __future__ import annotations

from typing import List

from .engine import Checkers
from .moves import Move


def capture_sequences(game: Checkers, r: int, c: int) -> List[List[Move]]:
    """Enumerates every complete capture chain starting from (r, c).

    Each jump is played on a scratch copy of the game; the chain ends when the
    side to move changes. `game` itself is never mutated.
    """
    chains: List[List[Move]] = []
    path: List[Move] = []

    def dfs(current: Checkers, sr: int, sc: int) -> None:
        for move in current.legal_moves(sr, sc):
            if not move.is_capture:
                continue
            scratch = current.copy()
            scratch.apply_move(move)
            path.append(move)
            if scratch.turn == current.turn:
                dfs(scratch, move.dst[0], move.dst[1])
            else:
                chains.append(list(path))
            path.pop()

    dfs(game, r, c)
    return chains


def turn_sequences(game: Checkers) -> List[List[Move]]:
    """Every complete turn for the side to move: simple steps or full capture chains."""
    out: List[List[Move]] = []
    for r, c in game.board.coords():
        moves = game.legal_moves(r, c)
        if not moves:
            continue
        if moves[0].is_capture:
            out.extend(capture_sequences(game, r, c))
        else:
            out.extend([m] for m in moves)
    return out


def play_sequence(game: Checkers, sequence: List[Move]) -> None:
    for move in sequence:
        game.apply_move(move)


def sequence_to_text(sequence: List[Move]) -> str:
    """'5,0-4,1' for a step, '5,0x3,2x1,4' for a chain."""
    if not sequence:
        return ''
    first = sequence[0]
    if not first.is_capture:
        return first.to_text()
    parts = [f'{first.src[0]},{first.src[1]}']
    parts.extend(f'{m.dst[0]},{m.dst[1]}' for m in sequence)
    return 'x'.join(parts)
