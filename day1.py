# day1.py
# Day 1: two location-id columns, compared by distance and similarity.

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Tuple

from parsing import View, is_ascii_digit, match_newline, match_spaces, parse_unsigned

logger = logging.getLogger(__name__)


@dataclass
class Day1Input:
    left: List[int] = field(default_factory=list)
    right: List[int] = field(default_factory=list)


def parse(text: str) -> Day1Input:
    """
    Parse lines of "<uint> <uint>\\n".

    The loop stops, without error, at the first line that does not start with
    a digit (this includes end of input). A line that starts with a digit must
    be complete; any failure inside it raises ParseError.
    """
    view = View.of(text)
    record = Day1Input()
    while not view.is_empty() and is_ascii_digit(view.peek()):
        num, view = parse_unsigned(view)
        record.left.append(num)
        view = match_spaces(view)
        num, view = parse_unsigned(view)
        record.right.append(num)
        view = match_newline(view)
    logger.debug("day1: parsed %d pairs, stopped at offset %d", len(record.left), view.pos)
    return record


def distance(left: List[int], right: List[int]) -> int:
    # zip truncates to the shorter list
    return sum(abs(l - r) for l, r in zip(sorted(left), sorted(right)))


def similarity(left: List[int], right: List[int]) -> int:
    counts = Counter(right)
    return sum(l * counts[l] for l in left)


def calculate(text: str) -> Tuple[int, int]:
    record = parse(text)
    return distance(record.left, record.right), similarity(record.left, record.right)
