"""Day 3: picking the largest joltage from banks of batteries."""

from __future__ import annotations

from functools import reduce

from aoc2025.solution import FullSolution, solve_timed

_DIGITS = "0123456789"
_KEEP = 12


def _digit(char: str) -> int:
    if len(char) != 1 or char not in _DIGITS:
        raise ValueError(f"not a decimal digit: {char!r}")
    return int(char)


def parse_input(text: str) -> list[list[int]]:
    """One list of digits for each line."""
    return [[_digit(char) for char in line] for line in text.strip().split("\n")]


def _best_pair(bank: list[int]) -> int:
    ones = tens = 0
    for digit in bank:
        if ones > tens:
            tens, ones = ones, digit
        elif digit > ones:
            ones = digit
    return tens * 10 + ones


def _best_twelve(bank: list[int]) -> int:
    digits = [0] * (_KEEP + 1)
    for digit in bank:
        digits[_KEEP] = digit
        # Drop the first digit that is smaller than its successor.
        for i in range(_KEEP):
            if digits[i] < digits[i + 1]:
                digits[i:_KEEP] = digits[i + 1:]
                break
    return reduce(lambda acc, d: acc * 10 + d, digits[:_KEEP], 0)


def part1(banks: list[list[int]]) -> int:
    """Sum the largest two-digit number each bank can form in order."""
    return sum(_best_pair(bank) for bank in banks)


def part2(banks: list[list[int]]) -> int:
    """Sum the largest twelve-digit number each bank can form in order."""
    return sum(_best_twelve(bank) for bank in banks)


def solve(text: str) -> FullSolution:
    return solve_timed(parse_input, part1, part2, text)