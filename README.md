# aoc2025

This package solves the first six days of the 2025 Advent of Code puzzles. It also
provides the small helpers the solutions use: a 2-D `Grid`, the `Point` and `Pair`
value types, and a few string-splitting functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a day

Put the puzzle input under `inputs/` in the current directory. Use one of these names:

- `inputs/day<N>.txt` for the real input.
- `inputs/day<N>_test.txt` for the example input.

Then run:

```
aoc2025 3          # solve day 3 with inputs/day3.txt
aoc2025 3 test     # any extra argument switches to inputs/day3_test.txt
```

The command prints the following, in order:

1. Part 1's answer.
2. A blank line.
3. Part 2's answer.
4. Another blank line.
5. How long each part took, as `Time elapsed = <part 1>, <part 2>`.

A time below 10 ms is shown in microseconds (`μs`). A longer time is shown in
milliseconds (`ms`).

The command stops with an error in two cases:

- The input file is missing.
- The day is not one of 1 to 6.

## Using the solvers from Python

Each of `aoc2025.day1` to `aoc2025.day6` has these functions:

- `parse_input`
- `part1`
- `part2`
- `solve`

In `day6`, `part2` takes the raw input text rather than the parsed `Worksheet`. Day 6
also provides `whitespace_aware_split`.

```python
from aoc2025 import day1

steps = day1.parse_input("L68\nL30\nR48\n")
print(day1.part1(steps), day1.part2(steps))

with open("inputs/day1.txt", encoding="utf-8") as f:
    result = day1.solve(f.read())
print(result.part1, result.part2, result.time1, result.time2)
```

`solve` returns a `FullSolution` from `aoc2025.solution`. It holds both answers and the
time each part took in seconds. The time for part 1 includes parsing the input.
`solution.solve_timed(parse, part1, part2, text)` runs and times any such trio of
functions.

Malformed input raises `ValueError`. Examples are a bad number, a missing operator line,
or an unknown operator.

## Helpers

### `aoc2025.grid.Grid`

A rectangular grid stored row by row.

- Indexing: read and assign cells with a `Point` or an `(x, y)` tuple. A position outside
  the grid raises `IndexError`.
- Bounds-checked lookup:
  - `get` returns `None` outside the grid.
  - `get_or` returns a default outside the grid.
  - `is_in_bounds` tells whether a position is inside the grid.
- Wrap-around lookup: `index_wrap` and `index_wrap_update`. The second one also returns
  the wrapped position.
- Positions: `coords` converts a storage index to a `Point`.
- Iteration: `enumerate` yields `(Point, value)` pairs row by row.
- Building a grid:
  - `Grid.filled` makes a grid where every cell holds the same value.
  - `Grid.from_str` builds a grid from text, with an optional per-character conversion.
    The width is the length of the first line, and whitespace is skipped. If the text
    does not fill whole rows, it raises `ValueError`.
- Other: `copy`, and `str()` renders one line per row.

### `aoc2025.point.Point`

A frozen integer 2-D point, with y growing downwards.

- Operators: `+`, `-`, `*` by an integer, and unary `-`.
- Class methods: `origin`, `up`, `down`, `left` and `right`.

### `aoc2025.point.Pair`

A frozen inclusive `low`..`high` range.

- `create_or_empty` returns `None` when `high < low`.
- `ordered` accepts the two bounds in either order.
- `as_tuple` returns `(low, high)`.

### `aoc2025.stringfuncs`

- `clean_split` splits a string and drops the empty pieces.
- `lstrip_parse` removes a required prefix and parses the rest as an integer.
- `rstrip_parse` removes a required suffix and parses the rest as an integer.
- `interval_split` cuts a string into fixed-width chunks and drops any short tail.

## What it does not do

The package does not download puzzle inputs or submit answers. It only reads input
files that you have already placed under `inputs/`. Days after day 6 are not solved.