# day2.py
# Day 2: reactor reports, checked for safe monotonic level changes.

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from parsing import View, is_ascii_digit, parse_unsigned

logger = logging.getLogger(__name__)

MIN_STEP = 1
MAX_STEP = 3


@dataclass
class Report:
    levels: List[int] = field(default_factory=list)


@dataclass
class Day2Input:
    reports: List[Report] = field(default_factory=list)


def _parse_report(view: View) -> Tuple[Report, View]:
    num, view = parse_unsigned(view)
    report = Report([num])
    while True:
        # Any non-space character ends the report and is consumed with it,
        # so "1 2,3" yields [1, 2] and the next report starts at "3".
        ch, view = view.advance()
        if ch != " ":
            return report, view
        num, view = parse_unsigned(view)
        report.levels.append(num)


def parse(text: str) -> Day2Input:
    """
    Parse lines of "<uint>( <uint>)*" each followed by one terminator char.

    Running out of input before a report's terminator raises ParseError(Eof).
    """
    view = View.of(text)
    record = Day2Input()
    while not view.is_empty() and is_ascii_digit(view.peek()):
        report, view = _parse_report(view)
        record.reports.append(report)
    logger.debug("day2: parsed %d reports", len(record.reports))
    return record


def level_safety(levels: Sequence[int]) -> bool:
    """
    A report is safe when it moves strictly in one direction with every step
    between MIN_STEP and MAX_STEP. The direction is fixed by the first two
    levels. Empty and single-level reports are safe.
    """
    if len(levels) < 2:
        return True
    sign = 1 if levels[0] < levels[1] else -1
    return all(
        MIN_STEP <= (b - a) * sign <= MAX_STEP
        for a, b in zip(levels, levels[1:])
    )


def dampened_safety(levels: Sequence[int]) -> bool:
    """Safe as-is, or safe once any single level is removed."""
    if level_safety(levels):
        return True
    return any(
        level_safety(list(levels[:i]) + list(levels[i + 1:]))
        for i in range(len(levels))
    )


def calculate(text: str) -> Tuple[int, int]:
    record = parse(text)
    safe = sum(1 for r in record.reports if level_safety(r.levels))
    dampened = sum(1 for r in record.reports if dampened_safety(r.levels))
    return safe, dampened
