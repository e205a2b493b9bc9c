import pytest

from aoc2015.day17 import count_combinations, count_minimal_combinations, part1, part2


@pytest.mark.parametrize("sizes", [[20, 15, 10, 5, 5], [15, 20, 5, 5, 10]])
def test_combinations_to_top_sum(sizes):
    assert count_combinations(sizes, 25) == 4


def test_combinations_with_explicit_limit():
    assert count_combinations([20, 15, 10, 5, 5], 25, 5) == 4


@pytest.mark.parametrize("sizes", [[20, 15, 10, 5, 5], [15, 20, 5, 5, 10]])
def test_minimal_combinations(sizes):
    assert count_minimal_combinations(sizes, 25) == 3


def test_zero_limit_and_empty():
    assert count_combinations([25], 25, 0) == 0
    assert count_combinations([], 25) == 0
    assert count_minimal_combinations([], 25) == 0


def test_parts():
    assert part1(["100", "50", "50"]) == 2
    assert part2(["150", "100", "50"]) == 1


def test_part_rejects_non_numbers():
    with pytest.raises(ValueError):
        part1(["ten"])