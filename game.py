from __future__ import annotations

# Facade module that re-exports the checkers core.
# The Flask app, tools and tests import from here; single-responsibility
# modules live under checkers_core/*.

try:
    from .checkers_core.board import (  # type: ignore
        Board, Cell, Coord, STANDARD_ROWS, EMPTY, BLACK_MAN, BLACK_KING, WHITE_MAN, WHITE_KING,
    )
    from .checkers_core.moves import Move, parse_move, other_side, local_moves  # type: ignore
    from .checkers_core.engine import Checkers  # type: ignore
    from .checkers_core.errors import (  # type: ignore
        CheckersError, IllegalMoveError, EngineInvariantError, OffBoardError,
    )
    from .checkers_core.sequences import (  # type: ignore
        capture_sequences, turn_sequences, play_sequence, sequence_to_text,
    )
    from .checkers_core.perft import perft, perft_divide  # type: ignore
except ImportError:
    from checkers_core.board import (  # type: ignore
        Board, Cell, Coord, STANDARD_ROWS, EMPTY, BLACK_MAN, BLACK_KING, WHITE_MAN, WHITE_KING,
    )
    from checkers_core.moves import Move, parse_move, other_side, local_moves  # type: ignore
    from checkers_core.engine import Checkers  # type: ignore
    from checkers_core.errors import (  # type: ignore
        CheckersError, IllegalMoveError, EngineInvariantError, OffBoardError,
    )
    from checkers_core.sequences import (  # type: ignore
        capture_sequences, turn_sequences, play_sequence, sequence_to_text,
    )
    from checkers_core.perft import perft, perft_divide  # type: ignore


def new_game(promote_mid_sequence: bool = True) -> Checkers:
    return Checkers.new(promote_mid_sequence=promote_mid_sequence)


def main() -> None:
    # CLI driver delegated to checkers_core.cli
    try:
        from .checkers_core.cli import main as _main  # type: ignore
    except ImportError:
        from checkers_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
