"""Day 9: shortest and longest routes through every location."""

import re
from collections.abc import Iterable, Iterator
from itertools import pairwise, permutations

Distances = dict[tuple[str, str], int]

_ROUTE = re.compile(r"([a-zA-Z]+) to ([a-zA-Z]+) = ([0-9]+)")


def parse_distances(lines: Iterable[str]) -> Distances:
    """Map each ordered pair of places to their distance; the first mention wins."""
    distances: Distances = {}
    for line in lines:
        match = _ROUTE.fullmatch(line)
        if match is None:
            raise ValueError(f"invalid route: {line}")
        here, there, length = match[1], match[2], int(match[3])
        distances.setdefault((here, there), length)
        distances.setdefault((there, here), length)
    return distances


def route_lengths(distances: Distances) -> Iterator[int]:
    """Yield the length of every route visiting each place once; unknown legs count 0."""
    places = sorted({place for pair in distances for place in pair})
    for route in permutations(places):
        yield sum(distances.get(leg, 0) for leg in pairwise(route))


def part1(lines: Iterable[str]) -> int:
    """Return the shortest route length."""
    return min(route_lengths(parse_distances(lines)))


def part2(lines: Iterable[str]) -> int:
    """Return the longest route length."""
    return max(route_lengths(parse_distances(lines)))