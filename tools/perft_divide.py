import argparse
import sys
import time

sys.path.append('.')
import game  # type: ignore


def main():
    parser = argparse.ArgumentParser(description='Per-move perft breakdown from a position')
    parser.add_argument('depth', type=int)
    parser.add_argument('--rows', default=None, help="'/'-separated rows; defaults to the opening")
    parser.add_argument('--turn', choices=['b', 'w'], default='b')
    args = parser.parse_args()

    rows = args.rows.split('/') if args.rows else list(game.STANDARD_ROWS)
    g = game.Checkers.from_rows(rows, args.turn)
    t0 = time.time()
    div = game.perft_divide(g, args.depth)
    took = int((time.time() - t0) * 1000)
    for text, count in sorted(div.items()):
        print(f"{text}: {count}")
    print(f"total={sum(div.values())} moves={len(div)} ({took}ms)")


if __name__ == '__main__':
    main()
