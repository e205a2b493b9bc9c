"""Day 18: an animated grid of lights."""

from collections.abc import Sequence

STEPS = 100
ON = "#"
OFF = "."

_NEIGHBOURS = [(dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dy, dx) != (0, 0)]


def count_on(grid: Sequence[str]) -> int:
    """Return how many lights are on."""
    return sum(row.count(ON) for row in grid)


def next_state(grid: Sequence[str]) -> list[str]:
    """Return the grid after one animation step."""
    height = len(grid)

    def lit(y: int, x: int) -> bool:
        return 0 <= y < height and 0 <= x < len(grid[y]) and grid[y][x] == ON

    rows = []
    for y, row in enumerate(grid):
        cells = []
        for x, cell in enumerate(row):
            neighbours = sum(lit(y + dy, x + dx) for dy, dx in _NEIGHBOURS)
            if cell == ON:
                cells.append(ON if neighbours in (2, 3) else OFF)
            else:
                cells.append(ON if neighbours == 3 else cell)
        rows.append("".join(cells))
    return rows


def _light_corners(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    for y in {0, len(rows) - 1} if rows else ():
        row = rows[y]
        if row:
            rows[y] = ON + row[1:-1] + ON if len(row) > 1 else ON
    return rows


def next_state_stuck(grid: Sequence[str]) -> list[str]:
    """Return the next state with the four corner lights stuck on."""
    return _light_corners(next_state(grid))


def part1(grid: Sequence[str]) -> int:
    """Return how many lights are on after 100 steps."""
    state = list(grid)
    for _ in range(STEPS):
        state = next_state(state)
    return count_on(state)


def part2(grid: Sequence[str]) -> int:
    """Return how many lights are on after 100 steps with the corners stuck on."""
    state = _light_corners(grid)
    for _ in range(STEPS):
        state = next_state_stuck(state)
    return count_on(state)