from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .board import Board, Coord, Cell, EMPTY, SIZE, crowned, in_bounds, is_king, side_of
from .errors import EngineInvariantError, IllegalMoveError
from .moves import FORWARD, Move, has_any_capture, is_opponent, local_moves, other_side

_log = logging.getLogger(__name__)

SIDES = ('b', 'w')


class Checkers:
    """English draughts on an 8x8 board.

    State is (board, side to move, jumper). Capture chains are played one jump
    at a time: after a capture that leaves the same piece with another capture,
    `jumper` holds its square and only that piece may move until the chain ends.

    With `promote_mid_sequence` (the default) a man reaching the far row is
    crowned before the engine checks whether its chain continues, so it may
    keep jumping as a king. When disabled, continuation is checked while it is
    still a man and the crown is applied once the chain is over.
    """

    def __init__(
        self,
        board: Board,
        turn: str = 'b',
        jumper: Optional[Coord] = None,
        promote_mid_sequence: bool = True,
    ) -> None:
        if turn not in SIDES:
            raise ValueError(f"turn must be 'b' or 'w', got {turn!r}")
        if jumper is not None:
            jumper = (int(jumper[0]), int(jumper[1]))
            if not in_bounds(*jumper) or side_of(board.get(*jumper)) != turn:
                raise ValueError(f'jumper {jumper} does not hold a piece of the side to move')
            if not local_moves(board, turn, jumper[0], jumper[1], jumper=jumper):
                raise ValueError(f'jumper {jumper} has no capture to continue with')
        self.board = board
        self.turn = turn
        self.jumper: Optional[Coord] = jumper
        self.promote_mid_sequence = promote_mid_sequence

    @classmethod
    def new(cls, promote_mid_sequence: bool = True) -> 'Checkers':
        return cls(Board.standard(), 'b', promote_mid_sequence=promote_mid_sequence)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        turn: str = 'b',
        jumper: Optional[Coord] = None,
        promote_mid_sequence: bool = True,
    ) -> 'Checkers':
        return cls(Board.from_rows(rows), turn, jumper, promote_mid_sequence)

    def copy(self) -> 'Checkers':
        return Checkers(self.board.copy(), self.turn, self.jumper, self.promote_mid_sequence)

    # ---- presentation queries ----

    def at(self, r: int, c: int) -> str:
        if not in_bounds(r, c):
            return '?'
        return self.board.get(r, c)

    def get_turn(self) -> str:
        return self.turn

    def to_text(self) -> str:
        return self.board.to_text()

    def __str__(self) -> str:
        return self.board.to_text()

    def piece_count(self, side: str) -> int:
        return self.board.count(side)

    # ---- move enumeration ----

    def legal_moves(self, r: int, c: int) -> List[Move]:
        """Legal atomic moves for the piece on (r, c).

        Empty if the square is off-board, not a piece of the side to move,
        locked out by an open chain, or if the piece cannot capture while
        another piece of the same side can.
        """
        moves = local_moves(self.board, self.turn, r, c, jumper=self.jumper)
        if moves and moves[0].is_capture:
            return moves
        if moves and has_any_capture(self.board, self.turn, skip=(r, c)):
            return []
        return moves

    def all_legal_moves(self) -> List[Move]:
        out: List[Move] = []
        for r, c in self.board.coords():
            out.extend(self.legal_moves(r, c))
        return out

    def has_legal_move(self) -> bool:
        return any(self.legal_moves(r, c) for r, c in self.board.coords())

    def is_over(self) -> bool:
        return not self.has_legal_move()

    def winner(self) -> Optional[str]:
        """The side that won because its opponent cannot move, or None."""
        if self.has_legal_move():
            return None
        return other_side(self.turn)

    # ---- move application ----

    def apply_move(self, move: Move) -> None:
        """Plays one atomic move. Raises IllegalMoveError without touching the state."""
        if not (in_bounds(*move.src) and in_bounds(*move.dst)):
            _log.info('Rejected off-board move %s', move.to_text())
            raise IllegalMoveError(move)
        legal = self.legal_moves(*move.src)
        if move not in legal:
            _log.info('Rejected illegal move %s for %s', move.to_text(), self.turn)
            raise IllegalMoveError(move, legal)
        self._check_invariants(move)

        piece = self.board.get(*move.src)
        self.board.set(*move.src, EMPTY)
        self.board.set(*move.dst, piece)

        promotes = self._reaches_crown_row(piece, move.dst)
        if promotes and self.promote_mid_sequence:
            self.board.set(*move.dst, crowned(piece))

        if move.capture is None:
            self._pass_turn()
        else:
            self.board.set(*move.capture, EMPTY)
            self.jumper = move.dst
            if self.legal_moves(*move.dst):
                _log.debug('Chain continues from %s for %s', move.dst, self.turn)
            else:
                self._pass_turn()

        if promotes and not self.promote_mid_sequence:
            self.board.set(*move.dst, crowned(piece))
        if promotes:
            _log.debug('Crowned %s at %s', piece, move.dst)
        _log.debug('Applied %s; %s to move', move.to_text(), self.turn)

    def _check_invariants(self, move: Move) -> None:
        if self.board.get(*move.dst) != EMPTY:
            raise EngineInvariantError(f'Destination {move.dst} is not empty')
        if move.capture is not None and not is_opponent(self.board, self.turn, *move.capture):
            raise EngineInvariantError(f'Captured square {move.capture} holds no opponent piece')

    def _pass_turn(self) -> None:
        self.jumper = None
        self.turn = other_side(self.turn)

    @staticmethod
    def _reaches_crown_row(piece: Cell, dst: Coord) -> bool:
        if is_king(piece):
            return False
        crown_row = SIZE - 1 if FORWARD[side_of(piece)] > 0 else 0
        return dst[0] == crown_row
