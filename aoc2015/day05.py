"""Day 5: naughty or nice strings."""

from collections.abc import Callable, Iterable

_VOWELS = frozenset("aeiou")
_FORBIDDEN = ("ab", "cd", "pq", "xy")


def count_nice(lines: Iterable[str], predicate: Callable[[str], bool]) -> int:
    """Count the lines for which ``predicate`` holds."""
    return sum(1 for line in lines if predicate(line))


def contains_three_vowels(text: str) -> bool:
    """Tell whether ``text`` has at least three vowels."""
    return sum(1 for char in text if char in _VOWELS) >= 3


def contains_double_letter(text: str) -> bool:
    """Tell whether some letter appears twice in a row."""
    return any(a == b for a, b in zip(text, text[1:]))


def lacks_forbidden_strings(text: str) -> bool:
    """Tell whether ``text`` contains none of ab, cd, pq, xy."""
    return not any(pair in text for pair in _FORBIDDEN)


def is_nice(text: str) -> bool:
    """Apply the first set of rules."""
    return contains_three_vowels(text) and contains_double_letter(text) and lacks_forbidden_strings(text)


def has_repeated_pair(text: str) -> bool:
    """Tell whether a pair of letters appears twice without overlapping."""
    return any(text[i : i + 2] in text[i + 2 :] for i in range(len(text) - 3))


def has_letter_sandwich(text: str) -> bool:
    """Tell whether a letter repeats with exactly one letter between."""
    return any(a == c for a, c in zip(text, text[2:]))


def is_nice2(text: str) -> bool:
    """Apply the second set of rules."""
    return has_repeated_pair(text) and has_letter_sandwich(text)


def part1(lines: Iterable[str]) -> int:
    """Count the nice strings under the first rules."""
    return count_nice(lines, is_nice)


def part2(lines: Iterable[str]) -> int:
    """Count the nice strings under the second rules."""
    return count_nice(lines, is_nice2)