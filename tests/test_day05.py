import pytest

from aoc2015.day05 import (
    contains_double_letter,
    contains_three_vowels,
    count_nice,
    has_letter_sandwich,
    has_repeated_pair,
    is_nice,
    is_nice2,
    lacks_forbidden_strings,
    part1,
    part2,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("aei", True),
        ("aaa", True),
        ("xazegov", True),
        ("aeiouaeiouaeiou", True),
        ("", False),
        ("x", False),
        ("aa", False),
        ("xxaexx", False),
    ],
)
def test_contains_three_vowels(text, expected):
    assert contains_three_vowels(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("xx", True), ("abcdde", True), ("aabbccdd", True), ("", False), ("x", False), ("abcde", False)],
)
def test_contains_double_letter(text, expected):
    assert contains_double_letter(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", True), ("ace", True), ("ab", False), ("cd", False), ("pq", False), ("xy", False), ("xxxxxabxxxx", False)],
)
def test_lacks_forbidden_strings(text, expected):
    assert lacks_forbidden_strings(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("ugknbfddgicrmopn", True),
        ("aaa", True),
        ("jchzalrnumimnmhp", False),
        ("haegwjzuvuyypxyu", False),
        ("dvszwmarrgswjxmb", False),
    ],
)
def test_is_nice(text, expected):
    assert is_nice(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("xyxy", True),
        ("aabcdefgaa", True),
        ("qjhvhtzxzqqjkmpb", True),
        ("uurcxstgmygtbstg", True),
        ("", False),
        ("aaa", False),
        ("abcdefgh", False),
        ("ieodomkazucvgmuy", False),
    ],
)
def test_has_repeated_pair(text, expected):
    assert has_repeated_pair(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("xyx", True), ("abcdefeghi", True), ("aaa", True), ("", False), ("uurcxstgmygtbstg", False)],
)
def test_has_letter_sandwich(text, expected):
    assert has_letter_sandwich(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("qjhvhtzxzqqjkmpb", True), ("xxyxx", True), ("uurcxstgmygtbstg", False), ("ieodomkazucvgmuy", False)],
)
def test_is_nice2(text, expected):
    assert is_nice2(text) is expected


def test_parts_count_nice_lines():
    lines = ["ugknbfddgicrmopn", "aaa", "jchzalrnumimnmhp", "qjhvhtzxzqqjkmpb", "xxyxx"]
    assert part1(lines) == 2
    assert part2(lines) == 2


def test_count_nice_with_predicate():
    assert count_nice(["a", "bb", "ccc"], lambda s: len(s) > 1) == 2