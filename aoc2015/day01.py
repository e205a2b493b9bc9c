"""Day 1: following floor instructions."""


def part1(instructions: str) -> int:
    """Return the floor reached after following every instruction."""
    return sum(1 if symbol == "(" else -1 for symbol in instructions)


def part2(instructions: str) -> int:
    """Return the 1-based position of the first instruction that enters the basement."""
    floor = 0
    for position, symbol in enumerate(instructions, start=1):
        floor += 1 if symbol == "(" else -1
        if floor < 0:
            return position
    raise ValueError("could not find negative floor")