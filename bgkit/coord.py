"""Coordinates on a rectangular grid of fixed width and height."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, order=True)
class Coord:
    """A tile on a `width` x `height` grid, stored as a row-major index."""

    index: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid grid shape {self.width}x{self.height}")
        if not 0 <= self.index < self.width * self.height:
            raise ValueError(f"index {self.index} out of range for a {self.width}x{self.height} grid")

    @classmethod
    def from_index(cls, index: int, width: int, height: int) -> Coord:
        return cls(index, width, height)

    @classmethod
    def from_xy(cls, x: int, y: int, width: int, height: int) -> Coord:
        if not 0 <= x < width:
            raise ValueError(f"x={x} out of range for width {width}")
        if not 0 <= y < height:
            raise ValueError(f"y={y} out of range for height {height}")
        return cls(x + width * y, width, height)

    @classmethod
    def all(cls, width: int, height: int) -> Iterator[Coord]:
        """Every coordinate of the grid, in index order."""
        return (cls(index, width, height) for index in range(width * height))

    @property
    def x(self) -> int:
        return self.index % self.width

    @property
    def y(self) -> int:
        return self.index // self.width

    def dense_index(self, size: int) -> int:
        """The index of this tile on a square board of side `size`."""
        return size * self.y + self.x

    def _check_same_grid(self, other: Coord) -> None:
        if (self.width, self.height) != (other.width, other.height):
            raise ValueError("coordinates belong to grids of different shape")

    def manhattan_distance(self, other: Coord) -> int:
        self._check_same_grid(other)
        return abs(self.x - other.x) + abs(self.y - other.y)

    def diagonal_distance(self, other: Coord) -> int:
        self._check_same_grid(other)
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def cast(self, width: int, height: int) -> Coord:
        """The same (x, y) position on a grid of another shape."""
        return Coord.from_xy(self.x, self.y, width, height)

    def valid_for_size(self, size: int) -> bool:
        return self.x < size and self.y < size

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def coord8(x: int, y: int) -> Coord:
    """A coordinate on an 8x8 grid."""
    return Coord.from_xy(x, y, 8, 8)


def coord3(x: int, y: int) -> Coord:
    """A coordinate on a 3x3 grid."""
    return Coord.from_xy(x, y, 3, 3)