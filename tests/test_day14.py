import pytest

from aoc2015.day14 import Reindeer, create_reindeers, winning_distance, winning_points

EXAMPLE = [
    "Comet can fly 14 km/s for 10 seconds, but then must rest for 127 seconds.",
    "Dancer can fly 16 km/s for 11 seconds, but then must rest for 162 seconds.",
]


def test_create_reindeers():
    reindeers = create_reindeers(EXAMPLE)
    assert reindeers == [Reindeer("Comet", 14, 10, 127), Reindeer("Dancer", 16, 11, 162)]


def test_reindeers_compare_by_every_field():
    assert Reindeer("Comet", 14, 10, 127) != Reindeer("Comet", 14, 10, 128)


def test_winning_distance():
    assert winning_distance(create_reindeers(EXAMPLE), 1000) == 1120


def test_basic_distances():
    reindeers = [Reindeer("Commet", 1, 1, 1)]
    assert winning_distance(reindeers, 0) == 0
    assert winning_distance(reindeers, 1) == 1
    assert winning_distance(reindeers, 2) == 1
    assert winning_distance([Reindeer("Comet", 1, 2, 1)], 4) == 3


def test_distance_after():
    assert Reindeer("Comet", 14, 10, 127).distance_after(1000) == 1120
    assert Reindeer("Dancer", 16, 11, 162).distance_after(1000) == 1056


def test_winning_points():
    assert winning_points(create_reindeers(EXAMPLE), 1000) == 689


def test_no_reindeers_score_nothing():
    assert winning_points([], 1000) == 0
    assert winning_distance([], 1000) == 0


def test_invalid_line_is_rejected():
    with pytest.raises(ValueError):
        create_reindeers(["Comet flies fast."])