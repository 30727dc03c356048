"""Solutions to days 1 to 6 of Advent of Code 2025, with grid, point and string helpers."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "day1",
    "day2",
    "day3",
    "day4",
    "day5",
    "day6",
    "grid",
    "point",
    "solution",
    "stringfuncs",
]