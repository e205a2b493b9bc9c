import pytest

from aoc2015.day13 import create_happiness_map, optimal_happiness, part1, part2

TRIO = [
    "Ann would gain 10 happiness units by sitting next to Ben.",
    "Ann would lose 4 happiness units by sitting next to Cid.",
    "Ben would gain 7 happiness units by sitting next to Ann.",
    "Ben would gain 2 happiness units by sitting next to Cid.",
    "Cid would lose 3 happiness units by sitting next to Ann.",
    "Cid would gain 5 happiness units by sitting next to Ben.",
]


def test_create_happiness_map():
    happiness = create_happiness_map(TRIO)
    assert happiness[("Ann", "Ben")] == 10
    assert happiness[("Ann", "Cid")] == -4
    assert happiness[("Ben", "Ann")] == 7
    assert happiness[("Cid", "Ann")] == -3
    assert happiness[("Cid", "Ben")] == 5
    assert len(happiness) == 6


def test_three_people_sum_every_link():
    assert optimal_happiness(create_happiness_map(TRIO)) == 17


def test_part1():
    assert part1(TRIO) == 17


def test_extra_guest_breaks_the_worst_link():
    assert part2(TRIO) == 24


def test_two_people_count_their_link_once():
    lines = [
        "Ann would gain 3 happiness units by sitting next to Ben.",
        "Ben would lose 1 happiness units by sitting next to Ann.",
    ]
    assert part1(lines) == 2


def test_invalid_rule_is_rejected():
    with pytest.raises(ValueError):
        create_happiness_map(["Ann likes Ben."])