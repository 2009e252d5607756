# sudoku_cli.py
# Command-line front end: read a puzzle, solve it, print the boxed grid.
# Usage: sudoku-solve [-i puzzle.txt] [-o solution.txt] [--print-partials] [--delay N]

import argparse
import logging
import sys
from typing import List, Optional

from sudoku import SearchConfig, solve
from sudoku_grid import ParseError, parse_grid, print_grid

log = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0 (got {n})")
    return n

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a 9x9 Sudoku by brute-force backtracking.")
    parser.add_argument("-i", "--input", default=None,
                        help="Location of puzzle to read, or stdin by default")
    parser.add_argument("-o", "--output", default=None,
                        help="Output location for solution, or stdout by default")
    parser.add_argument("--print-partials", default=False, action="store_true",
                        help="Print each partial puzzle visited by the search")
    parser.add_argument("--delay", type=_non_negative_int, default=0,
                        help="Seconds to wait before each search step (useful with --print-partials)")
    parser.add_argument("-v", "--verbose", default=False, action="store_true",
                        help="Log search progress")
    return parser


def _read_input(path: Optional[str]) -> Optional[bytes]:
    if path is None:
        log.info("Reading puzzle from stdin")
        try:
            return sys.stdin.buffer.read()
        except OSError as e:
            print(f"Could not read stdin: {e}", file=sys.stderr)
            return None
    log.info("Reading puzzle from %s", path)
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        print(f"Could not read {path}: {e}", file=sys.stderr)
        return None

def _run(contents: bytes, config: SearchConfig) -> int:
    try:
        grid = parse_grid(contents)
    except ParseError as e:
        print(f"Could not parse input: {e}", file=sys.stderr)
        return 1

    solution = solve(grid, config)
    if solution is None:
        print("Could not solve puzzle", file=sys.stderr)
        return 1
    print_grid(solution, config.output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s:%(name)s:%(message)s")

    contents = _read_input(args.input)
    if contents is None:
        return 1

    if args.output is None:
        config = SearchConfig(output=sys.stdout, print_partials=args.print_partials, delay=args.delay)
        return _run(contents, config)

    try:
        out = open(args.output, "w")
    except OSError as e:
        print(f"Could not open output: {e}", file=sys.stderr)
        return 1
    with out:
        config = SearchConfig(output=out, print_partials=args.print_partials, delay=args.delay)
        return _run(contents, config)


if __name__ == "__main__":
    sys.exit(main())
