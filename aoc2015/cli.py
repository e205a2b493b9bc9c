"""Command line entry point: solve both parts of one day for an input file."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from types import ModuleType
from typing import Any

from aoc2015 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
)

# Each day's module and whether it reads only the first line of input.
_DAYS: dict[int, tuple[ModuleType, bool]] = {
    1: (day01, True),
    2: (day02, False),
    3: (day03, True),
    4: (day04, True),
    5: (day05, False),
    6: (day06, False),
    7: (day07, False),
    8: (day08, False),
    9: (day09, False),
    10: (day10, True),
    11: (day11, True),
    12: (day12, True),
    13: (day13, False),
    14: (day14, False),
    15: (day15, False),
    16: (day16, False),
    17: (day17, False),
    18: (day18, False),
}


def solve(day: int, lines: Sequence[str]) -> tuple[Any, Any]:
    """Return the answers to both parts of ``day`` for the given input lines."""
    if day not in _DAYS:
        raise ValueError(f"The day {day} is not solved yet or is invalid.")
    module, first_line_only = _DAYS[day]
    puzzle_input: Any = lines[0] if first_line_only else list(lines)
    parts: tuple[Callable[[Any], Any], ...] = (module.part1, module.part2)
    return tuple(part(puzzle_input) for part in parts)  # type: ignore[return-value]


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``aoc2015 DAY FILE`` and print both answers."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Wrong number of arguments.", file=sys.stderr)
        return 1

    day_text, path = args
    try:
        day = int(day_text)
    except ValueError:
        print(f"The day {day_text} is not solved yet or is invalid.", file=sys.stderr)
        return 1

    try:
        with open(path, encoding="utf-8", newline="") as handle:
            lines = [line.removesuffix("\n") for line in handle]
    except OSError:
        print("Failed to open the file.", file=sys.stderr)
        return 1

    if not lines:
        print("Input is empty.", file=sys.stderr)
        return 1
    if day not in _DAYS:
        print(f"The day {day} is not solved yet or is invalid.", file=sys.stderr)
        return 1

    first, second = solve(day, lines)
    print(f"{day}_1: {first}")
    print(f"{day}_2: {second}")
    return 0


if __name__ == "__main__":
    sys.exit(main())