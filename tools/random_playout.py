import argparse
import random
import sys

sys.path.append('.')
import game  # type: ignore


def play_one(rng: random.Random, max_plies: int, promote_mid_sequence: bool):
    """Plays random atomic moves, checking engine invariants after each one."""
    g = game.new_game(promote_mid_sequence=promote_mid_sequence)
    for ply in range(max_plies):
        moves = g.all_legal_moves()
        if not moves:
            return g.winner(), ply
        captures = [m for m in moves if m.is_capture]
        if captures and len(captures) != len(moves):
            raise AssertionError(f"ply {ply}: quiet moves offered beside captures")
        before = {s: g.piece_count(s) for s in ('b', 'w')}
        side = g.get_turn()
        move = rng.choice(moves)
        g.apply_move(move)
        after = {s: g.piece_count(s) for s in ('b', 'w')}
        lost = before[game.other_side(side)] - after[game.other_side(side)]
        if lost != (1 if move.is_capture else 0) or before[side] != after[side]:
            raise AssertionError(f"ply {ply}: bad piece counts after {move.to_text()}")
        if not move.is_capture and g.get_turn() == side:
            raise AssertionError(f"ply {ply}: quiet move kept the turn")
        if g.jumper is not None and (g.get_turn() != side or g.jumper != move.dst):
            raise AssertionError(f"ply {ply}: jumper {g.jumper} inconsistent")
    return None, max_plies


def main():
    parser = argparse.ArgumentParser(description='Random playouts that check engine invariants')
    parser.add_argument('--games', type=int, default=200)
    parser.add_argument('--max-plies', type=int, default=400)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--no-promote-mid-sequence', action='store_true')
    args = parser.parse_args()

    rng = random.Random(args.seed)
    results = {'b': 0, 'w': 0, None: 0}
    for _ in range(args.games):
        winner, _plies = play_one(rng, args.max_plies, not args.no_promote_mid_sequence)
        results[winner] += 1
    print(f"games={args.games} black={results['b']} white={results['w']} unfinished={results[None]}")


if __name__ == '__main__':
    main()
