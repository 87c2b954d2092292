# aoc_solver.py
# Command-line runner for the Advent of Code 2024 solutions.
#
# =============================================================================
#  DISPATCH
# =============================================================================
#
# A day number selects a (parse, calculate) pair from the tables below. The
# input file is read once, fully, before parsing starts; any failure aborts
# that day's run and is reported as a single line on stderr.
#
# Exit codes follow the usual validator pattern: 0 on success, 1 on failure.
# --exit-zero keeps the process at 0 for callers that only read stdout.
#
# =============================================================================

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import day1
import day2
import day3
from parsing import ParseError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
INPUT_DIR_DEFAULT = os.getenv("AOC_INPUT_DIR", "input")
INPUT_PREFIX      = "day"
EXIT_OK           = 0
EXIT_FAILURE      = 1
LOG_FORMAT        = "[%(levelname)s] %(message)s"

# ---------------------------------------------------------------------------
# DAY TABLES
# ---------------------------------------------------------------------------
DAYS: Dict[int, Callable[[str], Tuple[int, int]]] = {
    1: day1.calculate,
    2: day2.calculate,
    3: day3.calculate,
}

PARSERS: Dict[int, Callable[[str], object]] = {
    1: day1.parse,
    2: day2.parse,
    3: day3.parse,
}


class IllegalDayError(ValueError):
    """Raised for a day number with no registered solution."""

    def __init__(self, day: int):
        super().__init__("illegal day")
        self.day = day

# ---------------------------------------------------------------------------
# INPUT LOADING
# ---------------------------------------------------------------------------
def input_path(day: int, input_dir=None) -> Path:
    return Path(input_dir or INPUT_DIR_DEFAULT) / f"{INPUT_PREFIX}{day}"


def read_input(path) -> str:
    """
    Read a whole input file as UTF-8.

    Undecodable bytes are reported as a custom ParseError carrying the byte
    offset of the first bad sequence.
    """
    raw = Path(path).read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError.custom(f"input is not valid UTF-8 ({exc.reason})", exc.start) from None

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def _check_day(day: int) -> None:
    if day not in DAYS:
        raise IllegalDayError(day)


def solve(day: int, input_dir=None, text: Optional[str] = None) -> Tuple[int, int]:
    """
    Run one day and return (part 1, part 2).

    `text` bypasses the file lookup; otherwise the input is read from
    <input_dir>/day<N>. Unknown days fail before any file is opened.
    """
    _check_day(day)
    if text is None:
        path = input_path(day, input_dir)
        logger.debug("day %d: reading %s", day, path)
        text = read_input(path)
    started = time.perf_counter()
    result = DAYS[day](text)
    logger.debug("day %d: solved in %.3f ms", day, (time.perf_counter() - started) * 1000)
    return result


def format_result(day: int, result: Tuple[int, int]) -> str:
    part1, part2 = result
    return f"day {day}\npart 1: {part1}\npart 2: {part2}"

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


def _cli(argv: List[str]) -> int:
    ap = argparse.ArgumentParser(description="Advent of Code 2024 solver")
    ap.add_argument("--day", "-d", type=int, required=True, help="day number to solve")
    ap.add_argument("--input", "-i", help="read this file instead of <input-dir>/day<N>")
    ap.add_argument("--input-dir", default=None,
                    help=f"directory holding day<N> files (default: {INPUT_DIR_DEFAULT})")
    ap.add_argument("--debug", action="store_true", help="dump the parsed input and exit")
    ap.add_argument("--exit-zero", action="store_true", help="exit 0 even when solving fails")
    ap.add_argument("--verbose", "-v", action="store_true", help="log progress to stderr")
    args = ap.parse_args(argv)

    _configure_logging(args.verbose)
    failure = EXIT_OK if args.exit_zero else EXIT_FAILURE

    try:
        _check_day(args.day)
        text = read_input(args.input) if args.input else None
        if args.debug:
            if text is None:
                text = read_input(input_path(args.day, args.input_dir))
            print(PARSERS[args.day](text))
            return EXIT_OK
        result = solve(args.day, args.input_dir, text)
    except (ParseError, IllegalDayError, OSError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return failure

    print(format_result(args.day, result))
    return EXIT_OK


def main() -> int:
    return _cli(sys.argv[1:])

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
