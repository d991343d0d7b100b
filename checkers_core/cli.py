from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .board import STANDARD_ROWS
from .engine import Checkers
from .errors import IllegalMoveError
from .moves import Move, parse_move
from .perft import perft
from .sequences import capture_sequences, sequence_to_text

SIDE_NAMES = {'b': 'Black', 'w': 'White'}


def _parse_rows(text: str) -> List[str]:
    return text.split('/')


def _show(game: Checkers, highlight: Optional[List[Move]] = None) -> None:
    print(game.board.pretty([m.dst for m in highlight or []]))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='English draughts rules engine')
    parser.add_argument('--rows', default=None,
                        help="Custom layout as '/'-separated rows, e.g. '.w../..b.'")
    parser.add_argument('--turn', choices=['b', 'w'], default='b', help='Side to move')
    parser.add_argument('--no-promote-mid-sequence', action='store_true',
                        help='Crown a man only after its jump chain ends')
    parser.add_argument('--play', action='store_true', help='Play a hot-seat game in the terminal')
    parser.add_argument('--perft', type=int, default=None, metavar='DEPTH',
                        help='Count complete turns to DEPTH from the position')
    parser.add_argument('--verbose', action='store_true', help='Log engine decisions')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    rows = _parse_rows(args.rows) if args.rows else list(STANDARD_ROWS)
    try:
        game = Checkers.from_rows(rows, args.turn,
                                  promote_mid_sequence=not args.no_promote_mid_sequence)
    except ValueError as e:
        parser.error(str(e))

    if not args.play:
        print('Board:')
        _show(game)
        print(f'{SIDE_NAMES[game.turn]} to move.')
        moves = game.all_legal_moves()
        print('Legal moves:', ', '.join(m.to_text() for m in moves) or 'none')
        if args.perft is not None:
            print(f'perft({args.perft}) = {perft(game, args.perft)}')
        return

    def prompt_move(g: Checkers) -> Move:
        moves = g.all_legal_moves()
        print('Your legal moves:', ', '.join(m.to_text() for m in moves))
        if g.jumper is None:
            chains = []
            for src in dict.fromkeys(m.src for m in moves if m.is_capture):
                chains.extend(capture_sequences(g, *src))
            if chains:
                print('Capture chains:', ', '.join(sequence_to_text(s) for s in chains))
        while True:
            text = input('Enter your move as r,c-r,c: ').strip()
            try:
                move = parse_move(text)
            except ValueError:
                print('Could not parse. Try again.')
                continue
            if move in moves:
                return move
            print('Illegal move. Try again.')

    print('Initial board:')
    _show(game)
    while True:
        winner = game.winner()
        if winner is not None:
            print(f'{SIDE_NAMES[winner]} wins!')
            break
        if game.jumper is not None:
            print(f'{SIDE_NAMES[game.turn]} must keep jumping from {game.jumper}.')
        else:
            print(f'{SIDE_NAMES[game.turn]} to move.')
        try:
            move = prompt_move(game)
        except EOFError:
            print()
            break
        try:
            game.apply_move(move)
        except IllegalMoveError as e:
            print(f'error: {e}')
            continue
        _show(game)
