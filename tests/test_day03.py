import pytest

from aoc2015.day03 import part1, part2


@pytest.mark.parametrize(
    ("moves", "houses"),
    [(">", 2), ("^>v<", 4), ("^v^v^v^v^v", 2), ("", 1)],
)
def test_part1(moves, houses):
    assert part1(moves) == houses


@pytest.mark.parametrize(
    ("moves", "houses"),
    [("^v", 3), ("^>v<", 3), ("^v^v^v^v^v", 11), ("", 1)],
)
def test_part2(moves, houses):
    assert part2(moves) == houses


def test_unknown_symbols_stay_in_place():
    assert part1("x^") == 2