"""Solutions to the 2015 Advent of Code puzzles, days 1 to 18, with a command line runner."""

__version__ = "1.0.0"