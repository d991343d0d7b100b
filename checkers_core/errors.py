from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .moves import Move


class CheckersError(Exception):
    """Base class for every error raised by the rules engine."""


class OffBoardError(CheckersError, IndexError):
    def __init__(self, r: int, c: int) -> None:
        super().__init__(f'({r}, {c}) is off the board')
        self.r = r
        self.c = c


class IllegalMoveError(CheckersError, ValueError):
    """A move that is not among the legal moves of its source square."""

    def __init__(self, move: 'Move', legal: Sequence['Move'] = ()) -> None:
        super().__init__(f'Illegal move {move.to_text()}')
        self.move = move
        self.legal = list(legal)


class EngineInvariantError(CheckersError, AssertionError):
    """Board contents contradict a move that passed the legality check."""
