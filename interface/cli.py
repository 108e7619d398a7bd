"""Engine-vs-engine self-play from the command line."""

import argparse
import sys

from ataxx.config import CONFIG
from ataxx.core.utils import configure_logging
from ataxx.main import Engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Let the Ataxx engine play itself.")
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth, help="search depth in plies")
    parser.add_argument("--seed", type=int, default=CONFIG.search.seed, help="random seed")
    parser.add_argument("--max-moves", type=int, default=200, help="stop after this many plies")
    parser.add_argument("--layout", default=None, help="starting layout string")
    parser.add_argument("--quiet", action="store_true", help="only print the result")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.depth < 1:
        print("depth must be at least 1", file=sys.stderr)
        return 2
    configure_logging(CONFIG.log_level)

    try:
        engine = Engine(depth=args.depth, seed=args.seed, layout=args.layout)
    except ValueError as e:
        print(f"invalid layout: {e}", file=sys.stderr)
        return 2

    plies = 0
    while not engine.is_game_over() and plies < args.max_moves:
        if not args.quiet:
            engine.print_board()
            print("----------------------------")
        engine.play_ai_move()
        print(engine.reports[-1])
        plies += 1

    engine.print_board()
    print(f"Result: {engine.result() or 'unfinished'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
