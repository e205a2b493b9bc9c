"""Day 2: wrapping paper and ribbon for presents."""

import re
from collections.abc import Callable, Iterable

_DIMENSIONS = re.compile(r"([0-9]+)x([0-9]+)x([0-9]+)")


def paper_for_gift(x: int, y: int, z: int) -> int:
    """Return the wrapping paper needed for a box: its surface plus the smallest side."""
    sides = (x * y, x * z, y * z)
    return 2 * sum(sides) + min(sides)


def ribbon_for_gift(x: int, y: int, z: int) -> int:
    """Return the ribbon needed for a box: smallest perimeter plus its volume for the bow."""
    return 2 * (x + y + z - max(x, y, z)) + x * y * z


def total(lines: Iterable[str], measure: Callable[[int, int, int], int]) -> int:
    """Sum ``measure`` over every ``LxWxH`` line."""
    result = 0
    for line in lines:
        match = _DIMENSIONS.fullmatch(line)
        if match is None:
            raise ValueError(f"Input contains invalid line: {line}")
        x, y, z = (int(group) for group in match.groups())
        result += measure(x, y, z)
    return result


def part1(lines: Iterable[str]) -> int:
    """Return the total square feet of wrapping paper."""
    return total(lines, paper_for_gift)


def part2(lines: Iterable[str]) -> int:
    """Return the total feet of ribbon."""
    return total(lines, ribbon_for_gift)