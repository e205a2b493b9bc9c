[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2015"
version = "1.0.0"
description = "Solutions to the 2015 Advent of Code puzzles, days 1 to 18"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2015"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2015 = "aoc2015.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2015"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
