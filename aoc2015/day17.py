"""Day 17: filling containers with eggnog."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EGGNOG_LITRES = 150


def count_combinations(sizes: Sequence[int], total: int, limit: int | None = None) -> int:
    """Count the sets of containers filling exactly ``total``, using at most ``limit`` of them."""
    sizes = tuple(sizes)
    if limit is None:
        limit = len(sizes)
    if not sizes or limit == 0:
        return 0
    count = 0
    for position, size in enumerate(sizes):
        if size == total:
            count += 1
        elif size < total:
            count += count_combinations(sizes[position + 1 :], total - size, limit - 1)
    return count


def count_minimal_combinations(sizes: Sequence[int], total: int) -> int:
    """Count the ways to fill ``total`` with the fewest containers possible."""
    sizes = tuple(sizes)
    counts = (count_combinations(sizes, total, limit) for limit in range(len(sizes)))
    return next((count for count in counts if count), 0)


def _sizes(lines: Iterable[str]) -> list[int]:
    return [int(line) for line in lines]


def part1(lines: Iterable[str]) -> int:
    """Return how many container sets hold exactly 150 litres."""
    return count_combinations(_sizes(lines), EGGNOG_LITRES)


def part2(lines: Iterable[str]) -> int:
    """Return how many minimal container sets hold exactly 150 litres."""
    return count_minimal_combinations(_sizes(lines), EGGNOG_LITRES)