"""Day 12: summing the numbers in a JSON document."""

import json
from typing import Any

_RED = "red"


def sum_numbers(value: Any, skip_red: bool = False) -> int:
    """Sum every number in a decoded JSON value.

    With ``skip_red`` an object holding the value "red" counts as zero,
    together with everything inside it.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, dict):
        if skip_red and _RED in value.values():
            return 0
        return sum(sum_numbers(item, skip_red) for item in value.values())
    if isinstance(value, list):
        return sum(sum_numbers(item, skip_red) for item in value)
    return 0


def part1(document: str) -> int:
    """Return the sum of all numbers in the document."""
    return sum_numbers(json.loads(document))


def part2(document: str) -> int:
    """Return the sum of all numbers, ignoring objects marked red."""
    return sum_numbers(json.loads(document), skip_red=True)