"""Day 5: checking ingredient ids against fresh ranges."""

from __future__ import annotations

from typing import List, Tuple

from aoc2025.point import Pair
from aoc2025.solution import FullSolution, solve_timed
from aoc2025.stringfuncs import clean_split

Inventory = Tuple[List[Pair], List[int]]


def parse_input(text: str) -> Inventory:
    """Parse the ranges block and the ids block, separated by a blank line."""
    sections = clean_split(text, "\n\n")
    if len(sections) < 2:
        raise ValueError("expected a block of ranges and a block of ids")
    ranges = []
    for line in clean_split(sections[0], "\n"):
        bounds = clean_split(line, "-")
        ranges.append(Pair(int(bounds[0]), int(bounds[1])))
    ids = [int(line) for line in clean_split(sections[1], "\n")]
    return ranges, ids


def part1(inventory: Inventory) -> int:
    """Count the ids that fall into any fresh range."""
    ranges, ids = inventory
    return sum(1 for item in ids if any(r.low <= item <= r.high for r in ranges))


def part2(inventory: Inventory) -> int:
    """Count how many distinct ids the fresh ranges cover together."""
    ranges = sorted(inventory[0], key=lambda r: r.low)
    if not ranges:
        raise ValueError("no ranges to merge")
    start, covered = ranges[0].as_tuple()
    count = covered - start + 1
    for r in ranges[1:]:
        if r.low > covered:
            count += r.high - r.low + 1
            covered = r.high
        elif r.high > covered:
            count += r.high - covered
            covered = r.high
    return count


def solve(text: str) -> FullSolution:
    return solve_timed(parse_input, part1, part2, text)