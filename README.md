# adventsolutions

Parsers and solvers for a series of daily programming puzzles. Each day is a
module under `adventsolutions.y2023` or `adventsolutions.y2024` with plain
functions that take the puzzle text (or its rows) and return the answer.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it

Read your puzzle input yourself and hand it to the matching module:

```python
from pathlib import Path

from adventsolutions.y2023 import day01, day15
from adventsolutions.y2024 import day03

rows = Path("input.txt").read_text().split("\n")
print(day01.extract_total(rows, False))   # digits only
print(day01.extract_total(rows, True))    # spelled-out digits count too

text = Path("input15.txt").read_text()
print(day15.solution_1(text))
print(day15.solution_2(text))

memory = Path("input3.txt").read_text()
print(day03.calculate_mul(day03.get_muls(memory)))
print(day03.calculate_mul(day03.get_muls(day03.remove_donts(memory))))
```

## What each day offers

`adventsolutions.y2023`:

- `day01`: `extract_number`, `replace_spelled_numbers`, `extract_total(rows, convert_spelled_numbers)`.
- `day02`: `extract_games(rows)`, `solution_1(games, bag)` with a bag mapping
  `CubeColor` to counts, `solution_2(games)`.
- `day04`: `parse_cards(rows)`, `solution_1(cards)`, `solution_2(cards)` and
  `card_counts(cards)`.
- `day05`: `parse_almanac(text)`, `solution(almanac, "seed", "location")`. The
  seeds line is always read as pairs of start and length.
- `day06`: `Race(duration, record)` and `solution_1(races)`.
- `day07`: `parse_play(row, jokers)`, `solution_1(plays)`, `solution_2(plays)`.
- `day08`: `parse_network(text)`, `solution_1(network, "AAA", "ZZZ")`,
  `solution_2(network, "A", "Z")`.
- `day09`: `parse_rows(text)`, `solution_1(rows)`, `solution_2(rows)`.
- `day10`: `build_maze(parse_char_map(rows))`, `solution_1(maze)`, `solution_2(maze)`.
- `day11`: `parse_milky_way(rows)` returns a `MilkyWay`; call `expand(rate)`
  then `total_distance()`, which returns the total and the measured id pairs.
- `day12`: `parse_spring_row(row)` returns a `SpringRow` with `unfold()` and
  `count_arrangements()`; `solution(rows)` sums the counts.
- `day13`: `solution_1(text)`, `solution_2(text)`.
- `day15`: `custom_hash(text)`, `solution_1(text)`, `solution_2(text)`.

`adventsolutions.y2024`:

- `day01`: `parse_input(text)`, `total_distance(columns)`, `similarity(columns)`.
- `day02`: `parse_input(text)`, `count_valid_lists(lists, allowed_unsafes)`
  (0 for the strict check, 1 to allow one level to be removed).
- `day03`: `get_muls`, `remove_donts`, `calculate_mul`.
- `day04`: `parse_input(text)`, `count_xmas_part1(grid)`, `count_xmas_part2(grid)`.
- `day05`: `split_input`, `page_order_index`, `page_numbers`; `part1` and
  `part2` return lists of middle pages, to be summed.
- `day06`: `parse_input`, `find_guard`, `traverse_map(grid, guard)` returning
  the final guard and whether it looped (`len(guard.previous_positions)` is the
  number of visited positions), and `loops_with_obstacle(guard, grid, obstacle)`.
- `day07`: `parse_input(text)`, `can_operations_combine_result(equation, allow_concat)`,
  `can_combine_two_operators(equation)`.

## Timing a solver

`log_method_duration` calls a function with no arguments, prints the elapsed
time in seconds and returns the result:

```python
from adventsolutions.timing import log_method_duration

answer = log_method_duration(lambda: day15.solution_2(text))
```

## What it does not do

There is no command-line program and nothing reads input files for you. Only
the days listed above are covered; 2023 days 3, 14, 16 and 17 are not. Many
parsers raise `ValueError` on malformed lines, but not every kind of bad input
is caught.