"""Day 14: the reindeer olympics."""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

RACE_SECONDS = 2503

_DESCRIPTION = re.compile(
    r"([a-zA-Z]+) can fly ([0-9]+) km/s for ([0-9]+) seconds, "
    r"but then must rest for ([0-9]+) seconds\."
)


@dataclass(frozen=True)
class Reindeer:
    """A reindeer's flying speed and its cycle of flying and resting."""

    name: str
    speed: int
    move_time: int
    rest_time: int

    def distance_after(self, seconds: int) -> int:
        """Return how far the reindeer has flown after ``seconds``."""
        cycles, remainder = divmod(seconds, self.move_time + self.rest_time)
        flying = cycles * self.move_time + min(remainder, self.move_time)
        return flying * self.speed


def create_reindeers(lines: Iterable[str]) -> list[Reindeer]:
    """Parse one reindeer from each line."""
    reindeers = []
    for line in lines:
        match = _DESCRIPTION.fullmatch(line)
        if match is None:
            raise ValueError(f"invalid reindeer: {line}")
        reindeers.append(Reindeer(match[1], int(match[2]), int(match[3]), int(match[4])))
    return reindeers


def winning_distance(reindeers: Iterable[Reindeer], seconds: int) -> int:
    """Return the distance of the leader after ``seconds``."""
    return max((reindeer.distance_after(seconds) for reindeer in reindeers), default=0)


def winning_points(reindeers: Sequence[Reindeer], seconds: int) -> int:
    """Return the winner's points when every leader scores one point each second."""
    if not reindeers:
        return 0
    points = {reindeer.name: 0 for reindeer in reindeers}
    for second in range(1, seconds + 1):
        distances = {reindeer.name: reindeer.distance_after(second) for reindeer in reindeers}
        lead = max(distances.values())
        for name, distance in distances.items():
            if distance == lead:
                points[name] += 1
    return max(points.values())


def part1(lines: Iterable[str]) -> int:
    """Return the winning distance after the race."""
    return winning_distance(create_reindeers(lines), RACE_SECONDS)


def part2(lines: Iterable[str]) -> int:
    """Return the winning points after the race."""
    return winning_points(create_reindeers(lines), RACE_SECONDS)