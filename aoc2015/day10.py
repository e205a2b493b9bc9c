"""Day 10: the look-and-say sequence."""

from itertools import groupby

PART1_ROUNDS = 40
PART2_ROUNDS = 50


def look_and_say(digits: str) -> str:
    """Return the next term: each run of a digit becomes its length followed by the digit."""
    return "".join(f"{sum(1 for _ in run)}{digit}" for digit, run in groupby(digits))


def _length_after(digits: str, rounds: int) -> int:
    for _ in range(rounds):
        digits = look_and_say(digits)
    return len(digits)


def part1(digits: str) -> int:
    """Return the length after 40 rounds."""
    return _length_after(digits, PART1_ROUNDS)


def part2(digits: str) -> int:
    """Return the length after 50 rounds."""
    return _length_after(digits, PART2_ROUNDS)