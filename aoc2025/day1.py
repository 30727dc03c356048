"""Day 1: counting how often a combination dial points at zero."""

from __future__ import annotations

from itertools import accumulate, islice

from aoc2025.solution import FullSolution, solve_timed
from aoc2025.stringfuncs import lstrip_parse

_START = 50
_SIZE = 100


def parse_input(text: str) -> list[int]:
    """Turn lines such as ``L68`` and ``R48`` into signed step counts."""
    return [
        -lstrip_parse(line, "L") if line.startswith("L") else lstrip_parse(line, "R")
        for line in text.split("\n")
        if line
    ]


def part1(steps: list[int]) -> int:
    """Count the turns that leave the dial resting on zero."""
    positions = islice(accumulate(steps, initial=_START), 1, None)
    return sum(1 for pos in positions if pos % _SIZE == 0)


def part2(steps: list[int]) -> int:
    """Count every time the dial passes or lands on zero."""
    pos = _START
    count = 0
    for step in steps:
        pos += step
        if pos <= 0 and pos != step:
            count += 1
        count += abs(pos) // _SIZE
        pos %= _SIZE
    return count


def solve(text: str) -> FullSolution:
    return solve_timed(parse_input, part1, part2, text)