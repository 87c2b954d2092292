# parsing.py
# Shared cursor and token parsers for the Advent of Code solver.
#
# =============================================================================
#  PARSER IMPLEMENTATION: CURSOR + TOKEN PRIMITIVES
# =============================================================================
#
# Every day grammar is a thin recursive-descent driver over the primitives in
# this module. The cursor is an immutable (text, pos) pair: a parse step never
# slices or copies the buffer, it returns a new View with a larger pos.
#
# Two failure styles live side by side:
# 1. Token parsers raise ParseError on the first unexpected character. Fixed
#    record grammars (days 1 and 2) let that abort the whole parse.
# 2. match_literal never raises. It reports absence with a boolean so the
#    scan-based grammar (day 3) can try a match and move on.
#
# =============================================================================

from typing import Callable, NamedTuple, Tuple, TypeVar

N = TypeVar("N")

# ---------------------------------------------------------------------------
# ERROR KINDS
# ---------------------------------------------------------------------------
EOF              = "Eof"
EXPECTED_SPACE   = "ExpectedSpace"
EXPECTED_NEWLINE = "ExpectedNewLine"
EXPECTED_INTEGER = "ExpectedInteger"
CUSTOM           = "Custom"

_DIGITS = "0123456789"


class ParseError(SyntaxError):
    """
    Parser failure carrying a cause (`kind`) and the offset it happened at.

    The message ends in "at offset N" when the offset is known.
    """

    def __init__(self, kind: str, offset=None, message: str = None):
        text = message if message is not None else kind
        if offset is not None:
            text = f"{text} at offset {offset}"
        super().__init__(text)
        self.kind = kind
        self.offset = offset

    @classmethod
    def custom(cls, message: str, offset=None) -> "ParseError":
        return cls(CUSTOM, offset, message)


def is_ascii_digit(ch: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as '٣'
    return len(ch) == 1 and ch in _DIGITS

# ---------------------------------------------------------------------------
# CHARACTER CURSOR
# ---------------------------------------------------------------------------
class View(NamedTuple):
    """
    Remaining unconsumed input: the shared buffer plus a start offset.
    """
    text: str
    pos: int = 0

    @classmethod
    def of(cls, text: str) -> "View":
        return cls(text, 0)

    def is_empty(self) -> bool:
        return self.pos >= len(self.text)

    def remaining(self) -> str:
        """Unconsumed text. Copies, so only use it for diagnostics."""
        return self.text[self.pos:]

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def peek(self) -> str:
        if self.pos >= len(self.text):
            raise ParseError(EOF, self.pos)
        return self.text[self.pos]

    def advance(self) -> Tuple[str, "View"]:
        ch = self.peek()
        return ch, View(self.text, self.pos + 1)

    def skip(self, count: int) -> "View":
        return View(self.text, min(self.pos + count, len(self.text)))

# ---------------------------------------------------------------------------
# TOKEN PARSERS
# ---------------------------------------------------------------------------
def match_literal(view: View, literal: str) -> Tuple[bool, View]:
    """Strip `literal` if the view starts with it. Never raises."""
    if view.startswith(literal):
        return True, view.skip(len(literal))
    return False, view


def match_spaces(view: View) -> View:
    """
    Consume a run of one or more ' ' characters.

    Only the space character counts; tabs and other whitespace do not.
    """
    if not view.startswith(" "):
        raise ParseError(EXPECTED_SPACE, view.pos)
    text, end = view.text, view.pos + 1
    while end < len(text) and text[end] == " ":
        end += 1
    return View(text, end)


def match_newline(view: View) -> View:
    """Consume exactly one '\\n'. A '\\r\\n' pair is rejected."""
    hit, rest = match_literal(view, "\n")
    if not hit:
        raise ParseError(EXPECTED_NEWLINE, view.pos)
    return rest


def parse_unsigned(view: View, number: Callable[[int], N] = int) -> Tuple[N, View]:
    """
    Lex a base-10 unsigned integer from a maximal run of ASCII digits.

    `number` converts small ints into the target numeric type; the value is
    accumulated as value * number(10) + number(digit), so any type with
    + and * works (int, Fraction, Decimal, numpy scalars). There is no sign
    and no overflow check: wrapping or raising is up to the type.
    """
    ch, view = view.advance()
    if not is_ascii_digit(ch):
        raise ParseError(EXPECTED_INTEGER, view.pos - 1)
    ten = number(10)
    value = number(ord(ch) - 48)
    text, pos = view.text, view.pos
    while pos < len(text) and text[pos] in _DIGITS:
        value = value * ten + number(ord(text[pos]) - 48)
        pos += 1
    return value, View(text, pos)
