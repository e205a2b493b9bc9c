"""Day 4: mining AdventCoins with MD5."""

import hashlib

PART1_ZEROES = 5
PART2_ZEROES = 6
_LIMIT = 2**32 - 1


def find_suffix(key: str, leading_zeroes: int) -> int:
    """Return the lowest number whose MD5 with ``key`` starts with that many hex zeroes."""
    prefix = "0" * leading_zeroes
    base = hashlib.md5(key.encode())
    for number in range(_LIMIT):
        digest = base.copy()
        digest.update(str(number).encode())
        if digest.hexdigest().startswith(prefix):
            return number
    raise ValueError("could not find collision")


def part1(key: str) -> int:
    """Return the lowest number giving five leading zeroes."""
    return find_suffix(key, PART1_ZEROES)


def part2(key: str) -> int:
    """Return the lowest number giving six leading zeroes."""
    return find_suffix(key, PART2_ZEROES)