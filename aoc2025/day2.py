"""Day 2: finding product ids made of a repeated digit pattern."""

from __future__ import annotations

from aoc2025.solution import FullSolution, solve_timed
from aoc2025.stringfuncs import interval_split


def parse_input(text: str) -> list[tuple[int, int]]:
    """Parse comma separated ``low-high`` ranges."""
    ranges = []
    for item in text.strip().split(","):
        bounds = [int(piece) for piece in item.strip().split("-")]
        ranges.append((bounds[0], bounds[1]))
    return ranges


def _numbers(ranges: list[tuple[int, int]]):
    for low, high in ranges:
        yield from range(low, high + 1)


def _is_doubled(digits: str) -> bool:
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def _is_repeated(digits: str) -> bool:
    for size in range(1, len(digits) // 2 + 1):
        if len(digits) % size:
            continue
        chunks = interval_split(digits, size)
        if all(chunk == chunks[0] for chunk in chunks):
            return True
    return False


def part1(ranges: list[tuple[int, int]]) -> int:
    """Sum the ids that are one digit sequence written twice."""
    return sum(num for num in _numbers(ranges) if _is_doubled(str(num)))


def part2(ranges: list[tuple[int, int]]) -> int:
    """Sum the ids that are one digit sequence written at least twice."""
    return sum(num for num in _numbers(ranges) if _is_repeated(str(num)))


def solve(text: str) -> FullSolution:
    return solve_timed(parse_input, part1, part2, text)