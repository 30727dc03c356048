"""Day 4: finding paper rolls a forklift can reach."""

from __future__ import annotations

from itertools import product

from aoc2025.grid import Grid
from aoc2025.point import Point
from aoc2025.solution import FullSolution, solve_timed

ROLL = "@"
EMPTY = "."
_CROWDED = 4


def parse_input(text: str) -> Grid:
    return Grid.from_str(text)


def _neighbours(grid: Grid, pos: Point) -> int:
    around = sum(
        grid.get_or((x, y), EMPTY) == ROLL
        for y in range(pos.y - 1, pos.y + 2)
        for x in range(pos.x - 1, pos.x + 2)
    )
    return around - 1


def part1(grid: Grid) -> int:
    """Count rolls with fewer than four rolls around them."""
    return sum(
        1
        for pos, cell in grid.enumerate()
        if cell == ROLL and _neighbours(grid, pos) < _CROWDED
    )


def part2(grid: Grid) -> int:
    """Keep removing reachable rolls until none are left; count them all."""
    grid = grid.copy()
    total = 0
    while True:
        removed = 0
        for x, y in product(range(grid.width), range(grid.height)):
            pos = Point(x, y)
            if grid[pos] == EMPTY:
                continue
            if _neighbours(grid, pos) < _CROWDED:
                grid[pos] = EMPTY
                removed += 1
        total += removed
        if not removed:
            return total


def solve(text: str) -> FullSolution:
    return solve_timed(parse_input, part1, part2, text)