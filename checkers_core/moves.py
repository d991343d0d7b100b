from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board, Coord, EMPTY, in_bounds, is_king, side_of

# Row delta a man advances by.
FORWARD = {'b': -1, 'w': 1}

KING_DIRECTIONS: Tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_MOVE_RE = re.compile(r'^\s*(\d)\s*,\s*(\d)\s*([-x])\s*(\d)\s*,\s*(\d)\s*$')


@dataclass(frozen=True)
class Move:
    """A single atomic relocation; `capture` is the jumped square, if any."""
    src: Coord
    dst: Coord
    capture: Optional[Coord] = None

    @property
    def is_capture(self) -> bool:
        return self.capture is not None

    def to_text(self) -> str:
        sep = 'x' if self.capture is not None else '-'
        return f'{self.src[0]},{self.src[1]}{sep}{self.dst[0]},{self.dst[1]}'


def parse_move(text: str) -> Move:
    """Parses 'r,c-r,c' or 'r,cxr,c'. A two-row hop always captures the midpoint."""
    m = _MOVE_RE.match(text)
    if m is None:
        raise ValueError(f'Could not parse move {text!r}')
    sr, sc, sep, dr, dc = m.groups()
    src = (int(sr), int(sc))
    dst = (int(dr), int(dc))
    capture: Optional[Coord] = None
    if abs(dst[0] - src[0]) == 2 and abs(dst[1] - src[1]) == 2:
        capture = ((src[0] + dst[0]) // 2, (src[1] + dst[1]) // 2)
    elif sep == 'x':
        raise ValueError(f'{text!r} is marked as a capture but is not a jump')
    return Move(src, dst, capture)


def other_side(side: str) -> str:
    return 'w' if side == 'b' else 'b'


def is_empty(board: Board, r: int, c: int) -> bool:
    """Off-board squares are never empty."""
    return in_bounds(r, c) and board.get(r, c) == EMPTY


def is_opponent(board: Board, side: str, r: int, c: int) -> bool:
    if not in_bounds(r, c):
        return False
    owner = side_of(board.get(r, c))
    return owner is not None and owner != side


def directions_for(cell: str) -> Tuple[Coord, ...]:
    if is_king(cell):
        return KING_DIRECTIONS
    fwd = FORWARD[side_of(cell)]
    return ((fwd, -1), (fwd, 1))


def local_moves(
    board: Board,
    side: str,
    r: int,
    c: int,
    jumper: Optional[Coord] = None,
    sequence_open: Optional[bool] = None,
) -> List[Move]:
    """Moves of the piece on (r, c), ignoring captures available to other pieces.

    `jumper` locks moves to that square when set. `sequence_open` suppresses
    simple steps; it defaults to whether a jumper is set.
    """
    if not in_bounds(r, c):
        return []
    piece = board.get(r, c)
    if side_of(piece) != side:
        return []
    if jumper is not None and jumper != (r, c):
        return []
    if sequence_open is None:
        sequence_open = jumper is not None

    dirs = directions_for(piece)
    jumps: List[Move] = []
    for dr, dc in dirs:
        if is_opponent(board, side, r + dr, c + dc) and is_empty(board, r + 2 * dr, c + 2 * dc):
            jumps.append(Move((r, c), (r + 2 * dr, c + 2 * dc), (r + dr, c + dc)))
    if jumps or sequence_open:
        return jumps

    return [
        Move((r, c), (r + dr, c + dc))
        for dr, dc in dirs
        if is_empty(board, r + dr, c + dc)
    ]


def has_any_capture(board: Board, side: str, skip: Optional[Coord] = None) -> bool:
    """True if any piece of `side` other than `skip` can capture right now."""
    for coord in board.coords():
        if coord == skip:
            continue
        moves = local_moves(board, side, coord[0], coord[1])
        if moves and moves[0].is_capture:
            return True
    return False
