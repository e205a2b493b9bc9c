"""Day 11: Santa's next password."""

import re

_CONFUSING = re.compile(r"[iol]")
_PAIR = re.compile(r"(.)\1")
_BUMP = {"i": "j", "o": "p", "l": "m"}


def has_straight(password: str) -> bool:
    """Tell whether three consecutive characters increase by one each."""
    codes = [ord(char) for char in password]
    return any(b == a + 1 and c == b + 1 for a, b, c in zip(codes, codes[1:], codes[2:]))


def lacks_confusing_letters(password: str) -> bool:
    """Tell whether the password avoids i, o and l."""
    return _CONFUSING.search(password) is None


def has_two_pairs(password: str) -> bool:
    """Tell whether exactly two non-overlapping pairs of equal letters appear."""
    return len(_PAIR.findall(password)) == 2


def next_password(password: str) -> str:
    """Increment the password like a base-26 number, 'z' wrapping to 'a'."""
    head = password.rstrip("z")
    wrapped = "a" * (len(password) - len(head))
    if not head:
        return wrapped
    return head[:-1] + chr(ord(head[-1]) + 1) + wrapped


def _is_valid(password: str) -> bool:
    return has_straight(password) and lacks_confusing_letters(password) and has_two_pairs(password)


def _skip_confusing(password: str) -> str:
    """Jump past every password that keeps the first confusing letter in place."""
    match = _CONFUSING.search(password)
    if match is None:
        return password
    start = match.start()
    return password[:start] + _BUMP[match.group()] + "a" * (len(password) - start - 1)


def next_valid_password(password: str) -> str:
    """Return the next password after ``password`` that meets every rule."""
    candidate = next_password(password)
    while True:
        candidate = _skip_confusing(candidate)
        if _is_valid(candidate):
            return candidate
        candidate = next_password(candidate)


def part1(password: str) -> str:
    """Return Santa's next password."""
    return next_valid_password(password)


def part2(password: str) -> str:
    """Return the password after the next one."""
    return next_valid_password(next_valid_password(password))