"""Day 15: the highest-scoring cookie recipe."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from math import prod

TEASPOONS = 100
TARGET_CALORIES = 500

_INGREDIENT = re.compile(
    r"([A-Z][a-z]*): capacity (-?[0-9]+), durability (-?[0-9]+), "
    r"flavor (-?[0-9]+), texture (-?[0-9]+), calories (-?[0-9]+)"
)


@dataclass(frozen=True)
class Ingredient:
    """An ingredient's properties per teaspoon."""

    name: str
    capacity: int
    durability: int
    flavor: int
    texture: int
    calories: int

    @property
    def qualities(self) -> tuple[int, int, int, int]:
        """The properties that make up a cookie's score."""
        return self.capacity, self.durability, self.flavor, self.texture


def parse_ingredient(line: str) -> Ingredient:
    """Parse a line such as ``Sugar: capacity 3, durability 0, ...``."""
    match = _INGREDIENT.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid ingredient: {line}")
    return Ingredient(match[1], *(int(group) for group in match.groups()[1:]))


def parse_ingredients(lines: Iterable[str]) -> list[Ingredient]:
    """Parse one ingredient from each line."""
    return [parse_ingredient(line) for line in lines]


def _mixes(total: int, count: int) -> Iterator[tuple[int, ...]]:
    """Yield every way of splitting ``total`` into ``count`` ordered non-negative parts."""
    if count == 0:
        return
    if count == 1:
        yield (total,)
        return
    for first in range(total + 1):
        for rest in _mixes(total - first, count - 1):
            yield (first, *rest)


def highest_scoring_cookie(ingredients: Sequence[Ingredient], target_calories: int = 0) -> int:
    """Return the best score over all 100-teaspoon recipes.

    A non-zero ``target_calories`` admits only recipes with exactly that many calories.
    """
    columns = list(zip(*(ingredient.qualities for ingredient in ingredients)))
    best = 0
    for amounts in _mixes(TEASPOONS, len(ingredients)):
        if target_calories:
            calories = sum(amount * ingredient.calories for amount, ingredient in zip(amounts, ingredients))
            if calories != target_calories:
                continue
        totals = [sum(amount * value for amount, value in zip(amounts, column)) for column in columns]
        score = prod(totals) if all(value > 0 for value in totals) else 0
        best = max(best, score)
    return best


def part1(lines: Iterable[str]) -> int:
    """Return the highest cookie score."""
    return highest_scoring_cookie(parse_ingredients(lines))


def part2(lines: Iterable[str]) -> int:
    """Return the highest score of a cookie with exactly 500 calories."""
    return highest_scoring_cookie(parse_ingredients(lines), TARGET_CALORIES)