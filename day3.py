# day3.py
# Day 3: recover mul(a,b) instructions from corrupted memory.

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from parsing import ParseError, View, match_literal, parse_unsigned

logger = logging.getLogger(__name__)


@dataclass
class Day3Input:
    multipliers: List[Tuple[int, int]] = field(default_factory=list)


def _match_mul(view: View) -> Optional[Tuple[Tuple[int, int], View]]:
    """
    Try "mul(" <uint> "," <uint> ")" at the start of `view`.

    Returns the operand pair and the view after ")", or None when any step
    fails. Failure here is expected and never escapes.
    """
    hit, view = match_literal(view, "mul(")
    if not hit:
        return None
    try:
        first, view = parse_unsigned(view)
        hit, view = match_literal(view, ",")
        if not hit:
            return None
        second, view = parse_unsigned(view)
    except ParseError:
        return None
    hit, view = match_literal(view, ")")
    if not hit:
        return None
    return (first, second), view


def parse(text: str) -> Day3Input:
    """
    Scan the whole text for mul(a,b) occurrences, leftmost first.

    A successful match resumes the scan right after its ")"; any other
    position advances by exactly one character, so the loop always
    terminates and never raises.
    """
    view = View.of(text)
    record = Day3Input()
    while not view.is_empty():
        found = _match_mul(view) if view.peek() == "m" else None
        if found is None:
            view = view.skip(1)
            continue
        pair, view = found
        record.multipliers.append(pair)
    logger.debug("day3: matched %d mul instructions", len(record.multipliers))
    return record


def calculate(text: str) -> Tuple[int, int]:
    record = parse(text)
    total = sum(a * b for a, b in record.multipliers)
    # part 2 is not solved yet
    return total, 1
