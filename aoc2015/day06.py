"""Day 6: a grid of a million lights."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

GRID_SIZE = 1000
MAX_BRIGHTNESS = 2**32 - 1

Point = tuple[int, int]

_INSTRUCTION = re.compile(r"(turn on|toggle|turn off) ([0-9]+),([0-9]+) through ([0-9]+),([0-9]+)")


class Action(Enum):
    """What an instruction does to its rectangle of lights."""

    ON = "turn on"
    OFF = "turn off"
    TOGGLE = "toggle"


def _rows(rows: list[list], start: Point, end: Point):
    """Yield each affected row with the column slice, checking the bounds."""
    (x0, y0), (x1, y1) = start, end
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if x0 < 0 or y0 < 0 or (x0 <= x1 and x1 >= width) or (y0 <= y1 and y1 >= height):
        raise IndexError(f"rectangle {start}-{end} lies outside the grid")
    columns = slice(x0, x1 + 1)
    for row in rows[y0 : y1 + 1]:
        yield row, columns


@dataclass
class LightGrid:
    """Lights that are either on or off, indexed as ``rows[y][x]``."""

    rows: list[list[bool]]

    @classmethod
    def blank(cls, width: int, height: int, initial: bool = False) -> LightGrid:
        return cls([[initial] * width for _ in range(height)])

    def turn_on(self, start: Point, end: Point) -> None:
        for row, columns in _rows(self.rows, start, end):
            row[columns] = [True] * len(row[columns])

    def turn_off(self, start: Point, end: Point) -> None:
        for row, columns in _rows(self.rows, start, end):
            row[columns] = [False] * len(row[columns])

    def toggle(self, start: Point, end: Point) -> None:
        for row, columns in _rows(self.rows, start, end):
            row[columns] = [not light for light in row[columns]]

    def apply(self, action: Action, start: Point, end: Point) -> None:
        {Action.ON: self.turn_on, Action.OFF: self.turn_off, Action.TOGGLE: self.toggle}[action](start, end)

    def count_on(self) -> int:
        return sum(sum(row) for row in self.rows)


@dataclass
class BrightnessGrid:
    """Lights with a brightness level, indexed as ``rows[y][x]``."""

    rows: list[list[int]]

    @classmethod
    def blank(cls, width: int, height: int, initial: int = 0) -> BrightnessGrid:
        return cls([[initial] * width for _ in range(height)])

    def turn_on(self, start: Point, end: Point) -> None:
        for row, columns in _rows(self.rows, start, end):
            row[columns] = [min(level + 1, MAX_BRIGHTNESS) for level in row[columns]]

    def turn_off(self, start: Point, end: Point) -> None:
        for row, columns in _rows(self.rows, start, end):
            row[columns] = [max(level - 1, 0) for level in row[columns]]

    def toggle(self, start: Point, end: Point) -> None:
        self.turn_on(start, end)
        self.turn_on(start, end)

    def apply(self, action: Action, start: Point, end: Point) -> None:
        {Action.ON: self.turn_on, Action.OFF: self.turn_off, Action.TOGGLE: self.toggle}[action](start, end)

    def total(self) -> int:
        return sum(sum(row) for row in self.rows)


def parse_instruction(line: str) -> tuple[Action, Point, Point]:
    """Parse a line such as ``turn on 0,0 through 999,999``."""
    match = _INSTRUCTION.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid instruction: {line}")
    x0, y0, x1, y1 = (int(group) for group in match.groups()[1:])
    return Action(match[1]), (x0, y0), (x1, y1)


def part1(lines: Iterable[str]) -> int:
    """Return how many lights are lit after all instructions."""
    grid = LightGrid.blank(GRID_SIZE, GRID_SIZE)
    for line in lines:
        grid.apply(*parse_instruction(line))
    return grid.count_on()


def part2(lines: Iterable[str]) -> int:
    """Return the total brightness after all instructions."""
    grid = BrightnessGrid.blank(GRID_SIZE, GRID_SIZE)
    for line in lines:
        grid.apply(*parse_instruction(line))
    return grid.total()