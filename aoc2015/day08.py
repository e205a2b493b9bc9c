"""Day 8: string literals in Santa's list."""

import re
from collections.abc import Iterable, Iterator

_CHARACTER_PATTERN = re.compile(r'\\[\\"]|\\x.{0,2}|.', re.DOTALL)
_PLAIN_ESCAPES = ("\\\\", '\\"')


def _pieces(literal: str) -> Iterator[str]:
    """Yield each in-memory character of a quoted literal as its source text."""
    if not literal:
        raise ValueError("empty string literal")
    end = len(literal) - 1
    position = 1
    while position < end:
        piece = _CHARACTER_PATTERN.match(literal, position).group()
        yield piece
        position += len(piece)


def count_characters(literal: str) -> int:
    """Return how many characters the quoted ``literal`` holds in memory."""
    return sum(1 for _ in _pieces(literal))


def count_encoded_chars(literal: str) -> int:
    """Return the length of ``literal`` once it is encoded as a new literal."""
    special = 0
    for piece in _pieces(literal):
        if piece in _PLAIN_ESCAPES:
            special += 2
        elif piece.startswith("\\x"):
            special += 1
    return len(literal) + special + 4


def part1(lines: Iterable[str]) -> int:
    """Return code characters minus in-memory characters over all lines."""
    lines = list(lines)
    return sum(map(len, lines)) - sum(map(count_characters, lines))


def part2(lines: Iterable[str]) -> int:
    """Return encoded characters minus code characters over all lines."""
    lines = list(lines)
    return sum(map(count_encoded_chars, lines)) - sum(map(len, lines))