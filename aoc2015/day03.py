"""Day 3: houses visited while delivering presents."""

_STEPS = {"^": (0, 1), ">": (1, 0), "v": (0, -1), "<": (-1, 0)}


def _step(position: tuple[int, int], move: str) -> tuple[int, int]:
    dx, dy = _STEPS.get(move, (0, 0))
    return position[0] + dx, position[1] + dy


def part1(moves: str) -> int:
    """Return how many houses Santa visits at least once."""
    position = (0, 0)
    visited = {position}
    for move in moves:
        position = _step(position, move)
        visited.add(position)
    return len(visited)


def part2(moves: str) -> int:
    """Return how many houses Santa and Robo-Santa visit, taking turns moving."""
    positions = [(0, 0), (0, 0)]
    visited = {(0, 0)}
    for turn, move in enumerate(moves):
        mover = turn % 2
        positions[mover] = _step(positions[mover], move)
        visited.add(positions[mover])
    return len(visited)