"""The answers to one day's puzzle together with how long they took."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, TypeVar, Union

Answer = Union[int, str]
_Parsed = TypeVar("_Parsed")


@dataclass(frozen=True)
class FullSolution:
    """Both answers of a day; times are in seconds."""

    part1: Answer
    part2: Answer
    time1: float
    time2: float


def solve_timed(
    parse: Callable[[str], _Parsed],
    part1: Callable[[_Parsed], Answer],
    part2: Callable[[_Parsed], Answer],
    text: str,
) -> FullSolution:
    """Parse ``text`` and run both parts, timing parse plus part one, then part two."""
    start = time.perf_counter()
    parsed = parse(text)
    answer1 = part1(parsed)
    time1 = time.perf_counter() - start

    start = time.perf_counter()
    answer2 = part2(parsed)
    time2 = time.perf_counter() - start

    return FullSolution(part1=answer1, part2=answer2, time1=time1, time2=time2)