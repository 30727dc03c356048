"""A rectangular grid stored row by row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar, Union

from aoc2025.point import Point

T = TypeVar("T")
Position = Union[Point, Tuple[int, int]]


def _xy(pos: Position) -> tuple[int, int]:
    if isinstance(pos, Point):
        return pos.x, pos.y
    x, y = pos
    return x, y


@dataclass
class Grid(Generic[T]):
    """Cells of a ``width`` by ``height`` grid, in row-major order."""

    data: list
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or len(self.data) != self.width * self.height:
            raise ValueError("Grid declaration uneven!")

    @classmethod
    def filled(cls, width: int, height: int, default: T) -> Grid[T]:
        return cls([default] * (width * height), width, height)

    @classmethod
    def from_str(cls, text: str, convert: Optional[Callable[[str], T]] = None) -> Grid:
        """Build a grid from text; width is the first line's length, whitespace is skipped."""
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("cannot build a grid from an empty first line")
        width = len(lines[0])
        convert = convert if convert is not None else (lambda c: c)
        data = [convert(c) for c in text if not c.isspace()]
        height = len(data) // width
        # Trailing cells that do not fill a whole row are kept out of the shape but not the data
        # in the reference behaviour; here an uneven text is rejected instead.
        return cls(data, width, height)

    def _flat(self, pos: Position) -> int:
        x, y = _xy(pos)
        flat = y * self.width + x
        if x < 0 or y < 0 or flat >= len(self.data):
            raise IndexError(f"grid index out of range: {(x, y)}")
        return flat

    def __getitem__(self, pos: Position) -> T:
        return self.data[self._flat(pos)]

    def __setitem__(self, pos: Position, value: T) -> None:
        self.data[self._flat(pos)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __str__(self) -> str:
        rows = (
            "".join(str(cell) for cell in self.data[row * self.width:(row + 1) * self.width])
            for row in range(self.height)
        )
        return "".join(row + "\n" for row in rows)

    def index_wrap(self, pos: Point) -> T:
        """Look up a position, wrapping coordinates around the edges."""
        return self.index_wrap_update(pos)[0]

    def index_wrap_update(self, pos: Point) -> tuple[T, Point]:
        """Look up a position with wrapping and return the wrapped position too."""
        wrapped = Point(pos.x % self.width, pos.y % self.height)
        return self[wrapped], wrapped

    def is_in_bounds(self, pos: Position) -> bool:
        x, y = _xy(pos)
        return 0 <= x < self.width and 0 <= y < self.height

    def coords(self, index: int) -> Point:
        """The position of the cell stored at ``index``."""
        return Point(index % self.width, index // self.width)

    def get(self, pos: Position) -> Optional[T]:
        return self[pos] if self.is_in_bounds(pos) else None

    def get_or(self, pos: Position, default: T) -> T:
        return self[pos] if self.is_in_bounds(pos) else default

    def enumerate(self) -> Iterator[tuple[Point, T]]:
        """Yield each cell with its position, row by row."""
        for index, cell in enumerate(self.data):
            yield self.coords(index), cell

    def copy(self) -> Grid[T]:
        return Grid(list(self.data), self.width, self.height)