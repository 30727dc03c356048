"""Day 6: a worksheet of column arithmetic problems."""

from __future__ import annotations

import math
from dataclasses import dataclass

from aoc2025.solution import FullSolution, solve_timed
from aoc2025.stringfuncs import clean_split

_OPS = ("+", "*")


@dataclass
class Worksheet:
    """Rows of numbers and the operator under each column."""

    numbers: list[list[int]]
    ops: list[str]


def _is_op_line(line: str) -> bool:
    return line.startswith(_OPS)


def _ops_line(text: str) -> str:
    line = next((line for line in text.splitlines() if _is_op_line(line)), None)
    if line is None:
        raise ValueError("worksheet has no operator line")
    return line


def _apply(op: str, values: list[int]) -> int:
    if op == "*":
        return math.prod(values)
    if op == "+":
        return sum(values)
    raise ValueError(f"unknown operator: {op!r}")


def parse_input(text: str) -> Worksheet:
    numbers = [
        [int(num) for num in clean_split(line, " ")]
        for line in clean_split(text, "\n")
        if not _is_op_line(line)
    ]
    return Worksheet(numbers, clean_split(_ops_line(text), " "))


def part1(sheet: Worksheet) -> int:
    """Solve every column read row by row and add the results."""
    total = 0
    for col in range(len(sheet.numbers[0])):
        op = sheet.ops[col]
        total += _apply(op, [row[col] for row in sheet.numbers])
    return total


def whitespace_aware_split(line: str) -> list[tuple[str, int]]:
    """Pair each operator with the number of blanks that follow it."""
    if not line:
        raise ValueError("empty operator line")
    output = []
    last = line[0]
    spaces = 0
    for char in line[1:]:
        if char.isspace():
            spaces += 1
        else:
            output.append((last, spaces))
            spaces = 0
            last = char
    output.append((last, spaces))
    return output


def part2(text: str) -> int:
    """Solve every problem with numbers written top to bottom in character columns."""
    ops = whitespace_aware_split(_ops_line(text))
    rows = [line for line in text.strip().splitlines() if not _is_op_line(line)]
    total = 0
    start = 0
    for op, gap in ops:
        values = []
        for idx in range(start, start + gap + 1):
            digits = "".join(row[idx] for row in rows).strip()
            if digits:
                values.append(int(digits))
        total += _apply(op, values)
        start += gap + 1
    return total


def solve(text: str) -> FullSolution:
    return solve_timed(lambda raw: raw, lambda raw: part1(parse_input(raw)), part2, text)