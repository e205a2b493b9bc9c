"""Day 16: finding the aunt who sent the gift."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable, Mapping, Sequence

Comparison = Callable[[int, int], bool]
Sample = Mapping[str, tuple[int, Comparison]]

_COMPOUND = re.compile(r"([a-z]+): ([0-9]*)")

MFCSAM_READING: dict[str, tuple[int, Comparison]] = {
    "children": (3, operator.eq),
    "cats": (7, operator.eq),
    "samoyeds": (2, operator.eq),
    "pomeranians": (3, operator.eq),
    "akitas": (0, operator.eq),
    "vizslas": (0, operator.eq),
    "goldfish": (5, operator.eq),
    "trees": (3, operator.eq),
    "cars": (2, operator.eq),
    "perfumes": (1, operator.eq),
}

# Cats and trees read above the reading, pomeranians and goldfish below it.
MFCSAM_RANGES: dict[str, tuple[int, Comparison]] = {
    **MFCSAM_READING,
    "cats": (7, operator.lt),
    "pomeranians": (3, operator.gt),
    "goldfish": (5, operator.gt),
    "trees": (3, operator.lt),
}


def parse_sample(line: str) -> dict[str, int]:
    """Parse the compounds remembered about one aunt."""
    return {match[1]: int(match[2]) for match in _COMPOUND.finditer(line)}


def parse_samples(lines: Iterable[str]) -> list[dict[str, int]]:
    """Parse the remembered compounds of every aunt."""
    return [parse_sample(line) for line in lines]


def aunt_index(sample: Sample, aunts: Sequence[Mapping[str, int]]) -> int:
    """Return the index of the first aunt matching ``sample``, or ``len(aunts)`` if none does.

    Each known compound of an aunt must satisfy ``compare(reading, value)``.
    """
    for index, aunt in enumerate(aunts):
        if all(sample[name][1](sample[name][0], value) for name, value in aunt.items()):
            return index
    return len(aunts)


def part1(lines: Iterable[str]) -> int:
    """Return the number of the aunt matching the exact reading."""
    return aunt_index(MFCSAM_READING, parse_samples(lines)) + 1


def part2(lines: Iterable[str]) -> int:
    """Return the number of the aunt matching the reading with ranges."""
    return aunt_index(MFCSAM_RANGES, parse_samples(lines)) + 1