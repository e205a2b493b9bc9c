"""Day 13: the optimal seating arrangement around a round table."""

import re
from collections.abc import Iterable
from itertools import chain, pairwise, permutations

HappinessMap = dict[tuple[str, str], int]

ME = "XXX"

_RULE = re.compile(
    r"([a-zA-Z]+) would (gain|lose) ([0-9]+) happiness units by sitting next to ([a-zA-Z]+)\."
)


def create_happiness_map(lines: Iterable[str]) -> HappinessMap:
    """Map (person, neighbour) to the happiness change; the first rule wins."""
    happiness: HappinessMap = {}
    for line in lines:
        match = _RULE.fullmatch(line)
        if match is None:
            raise ValueError(f"invalid rule: {line}")
        sign = 1 if match[2] == "gain" else -1
        happiness.setdefault((match[1], match[4]), sign * int(match[3]))
    return happiness


def _score(seating: tuple[str, ...], happiness: HappinessMap) -> int:
    neighbours = list(pairwise(seating))
    if len(seating) > 2:
        neighbours.append((seating[-1], seating[0]))
    return sum(happiness[(a, b)] + happiness[(b, a)] for a, b in neighbours)


def optimal_happiness(happiness: HappinessMap) -> int:
    """Return the best total happiness change over all seatings, never below zero."""
    people = sorted({person for person, _ in happiness})
    if not people:
        return 0
    host, guests = people[0], people[1:]
    # The table is round, so fixing one seat loses no arrangement.
    scores = (_score((host, *order), happiness) for order in permutations(guests))
    return max(chain((0,), scores))


def part1(lines: Iterable[str]) -> int:
    """Return the optimal happiness for the guests."""
    return optimal_happiness(create_happiness_map(lines))


def part2(lines: Iterable[str]) -> int:
    """Return the optimal happiness once an indifferent extra guest joins."""
    happiness = create_happiness_map(lines)
    for person in {person for person, _ in happiness}:
        happiness.setdefault((person, ME), 0)
        happiness.setdefault((ME, person), 0)
    return optimal_happiness(happiness)