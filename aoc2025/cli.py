"""Command line entry point: solve one day's puzzle from the inputs directory."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from aoc2025 import day1, day2, day3, day4, day5, day6
from aoc2025.solution import FullSolution

_DAYS: dict[str, Callable[[str], FullSolution]] = {
    "1": day1.solve,
    "2": day2.solve,
    "3": day3.solve,
    "4": day4.solve,
    "5": day5.solve,
    "6": day6.solve,
}


def time_fmt(seconds: float) -> str:
    """Show microseconds below ten milliseconds, milliseconds otherwise."""
    micros = int(seconds * 1_000_000)
    if micros < 10_000:
        return f"{micros}μs"
    return f"{micros // 1000}ms"


def get_day(day: str) -> Callable[[str], FullSolution]:
    try:
        return _DAYS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aoc2025", description="Solve one day's puzzle.")
    parser.add_argument("day", help="day number")
    parser.add_argument("test", nargs="*", help="any extra argument selects the test input")
    args = parser.parse_args(argv)

    suffix = "_test" if args.test else ""
    path = Path("inputs") / f"day{args.day}{suffix}.txt"
    if not path.is_file():
        sys.exit(f"File not found: {path}")
    text = path.read_text(encoding="utf-8")

    try:
        solve = get_day(args.day)
    except ValueError as err:
        parser.error(str(err))

    solution = solve(text)
    print(
        f"{solution.part1}\n\n{solution.part2}\n\n"
        f"Time elapsed = {time_fmt(solution.time1)}, {time_fmt(solution.time2)}"
    )
    return 0