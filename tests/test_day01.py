import pytest

from aoc2015.day01 import part1, part2


@pytest.mark.parametrize(
    ("instructions", "floor"),
    [
        ("(())", 0),
        ("()()", 0),
        ("(((", 3),
        ("(()(()(", 3),
        ("))(((((", 3),
        ("())", -1),
        ("))(", -1),
        (")))", -3),
        (")())())", -3),
        ("", 0),
    ],
)
def test_part1_floor(instructions, floor):
    assert part1(instructions) == floor


def test_part2_first_character():
    assert part2(")") == 1


@pytest.mark.parametrize(
    ("instructions", "position"),
    [("())()", 3), ("((())))((", 7)],
)
def test_part2_in_the_middle(instructions, position):
    assert part2(instructions) == position


@pytest.mark.parametrize(
    ("instructions", "position"),
    [("()())", 5), ("())", 3)],
)
def test_part2_last_character(instructions, position):
    assert part2(instructions) == position


def test_part2_never_reaches_basement():
    with pytest.raises(ValueError, match="negative floor"):
        part2("(()")