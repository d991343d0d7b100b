from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import OffBoardError

Cell = str  # '.', 'b', 'B', 'w', 'W'
Coord = Tuple[int, int]

SIZE = 8

EMPTY: Cell = '.'
BLACK_MAN: Cell = 'b'
BLACK_KING: Cell = 'B'
WHITE_MAN: Cell = 'w'
WHITE_KING: Cell = 'W'

CELLS = (EMPTY, BLACK_MAN, BLACK_KING, WHITE_MAN, WHITE_KING)

STANDARD_ROWS = (
    ".w.w.w.w",
    "w.w.w.w.",
    ".w.w.w.w",
    "........",
    "........",
    "b.b.b.b.",
    ".b.b.b.b",
    "b.b.b.b.",
)


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def side_of(cell: Cell) -> Optional[str]:
    """Returns 'b' or 'w' for a piece, None for an empty cell."""
    if cell == EMPTY:
        return None
    return cell.lower()


def is_king(cell: Cell) -> bool:
    return cell in (BLACK_KING, WHITE_KING)


def crowned(cell: Cell) -> Cell:
    return cell.upper()


class Board:
    """Fixed 8x8 grid of cells, row-major. Holds no rule knowledge."""

    def __init__(self) -> None:
        self._grid: List[List[Cell]] = [[EMPTY] * SIZE for _ in range(SIZE)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """Builds a board from up to 8 strings of up to 8 cells; the rest stays empty."""
        if len(rows) > SIZE:
            raise ValueError(f'Expected at most {SIZE} rows, got {len(rows)}')
        board = cls()
        for r, row in enumerate(rows):
            if len(row) > SIZE:
                raise ValueError(f'Row {r} has {len(row)} cells, expected at most {SIZE}')
            for c, cell in enumerate(row):
                if cell not in CELLS:
                    raise ValueError(f'Unknown cell {cell!r} at ({r}, {c})')
                board._grid[r][c] = cell
        return board

    @classmethod
    def standard(cls) -> 'Board':
        return cls.from_rows(STANDARD_ROWS)

    def get(self, r: int, c: int) -> Cell:
        if not in_bounds(r, c):
            raise OffBoardError(r, c)
        return self._grid[r][c]

    def set(self, r: int, c: int, value: Cell) -> None:
        if not in_bounds(r, c):
            raise OffBoardError(r, c)
        if value not in CELLS:
            raise ValueError(f'Unknown cell {value!r}')
        self._grid[r][c] = value

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(SIZE):
            for c in range(SIZE):
                yield (r, c)

    def rows(self) -> List[str]:
        return [''.join(row) for row in self._grid]

    def to_text(self) -> str:
        return ''.join(row + '\n' for row in self.rows())

    def copy(self) -> 'Board':
        other = Board()
        other._grid = [list(row) for row in self._grid]
        return other

    def count(self, side: str) -> int:
        return sum(1 for row in self._grid for cell in row if side_of(cell) == side)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f'Board({self.rows()!r})'

    def __str__(self) -> str:
        return self.to_text()

    def pretty(self, highlight: Optional[Iterable[Coord]] = None) -> str:
        """Human-readable board with row/column indices; highlighted cells shown as '*'."""
        marks = set(highlight or ())
        lines: List[str] = ['  ' + ' '.join(str(c) for c in range(SIZE))]
        for r in range(SIZE):
            row: List[str] = []
            for c in range(SIZE):
                cell = self._grid[r][c]
                row.append('*' if (r, c) in marks and cell == EMPTY else cell)
            lines.append(f'{r} ' + ' '.join(row))
        return '\n'.join(lines)
