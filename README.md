# aoc2015

This package solves days 1 to 18 of the 2015 Advent of Code puzzles. You can use it from the command line or import it as a library. It needs only the Python standard library.

## Installation

```
pip install .
```

## Command line

Give the day number and the path to your puzzle input:

```
aoc2015 7 input.txt
```

The answers to both parts are printed, one line each, in the form `DAY_PART: ANSWER`. For example:

```
7_1: <answer to part 1>
7_2: <answer to part 2>
```

The command prints a message to standard error and exits with status 1 in these cases:

- the number of arguments is not two;
- the day is not a whole number;
- the file cannot be opened;
- the file is empty;
- the day is not between 1 and 18.

Some puzzle inputs have no answer. For example, day 1 part 2 fails on an input that never reaches the basement. In that case the exception from the solver is raised and is not reported as a message.

Days 1, 3, 4, 10, 11 and 12 read only the first line of the file. The other days read every line.

## Library

Each day has its own module, `aoc2015.day01` to `aoc2015.day18`. Each module has `part1` and `part2` functions:

- For the one-line days above, these functions take a string.
- For the other days, they take a list of lines. On day 18 the lines are the rows of the grid.

`aoc2015.cli.solve(day, lines)` returns both answers as a tuple. It raises `ValueError` for a day that is not between 1 and 18.

```python
from aoc2015 import cli, day01, day10

day01.part1("(()(()(")          # 3
day01.part2("())")              # 3
day10.look_and_say("1211")      # "111221"
cli.solve(1, ["())"])           # (-1, 3)
```

The day modules also expose the building blocks behind each puzzle. Some examples:

- `day02.paper_for_gift` and `day02.ribbon_for_gift`;
- `day05.is_nice` and `day05.is_nice2`;
- `day06.LightGrid`, `day06.BrightnessGrid` and `day06.parse_instruction`;
- `day07.create_circuit` and `day07.signal_on_wire`;
- `day11.next_valid_password`;
- `day12.sum_numbers`;
- `day13.optimal_happiness`;
- `day14.Reindeer`, `day14.winning_distance` and `day14.winning_points`;
- `day15.Ingredient` and `day15.highest_scoring_cookie`;
- `day16.aunt_index`;
- `day17.count_combinations` and `day17.count_minimal_combinations`;
- `day18.next_state` and `day18.next_state_stuck`.

Input lines that do not have the expected format raise `ValueError`.

## What it does not do

Days 19 to 25 of 2015 are not solved. The package does not download puzzle inputs or submit answers.

Day 4 searches MD5 hashes by brute force, so its part 2 can take a while.

## Tests

```
pip install .[test]
pytest
```