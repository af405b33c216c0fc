"""Symmetry groups of square boards: the identity, a single mirror, and the dihedral group D4."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple, Type, TypeVar, Union

from bgkit.coord import Coord

S = TypeVar("S", "UnitSymmetry", "D1Symmetry", "D4Symmetry")


@dataclass(frozen=True)
class UnitSymmetry:
    """The trivial symmetry group containing only the identity."""

    @classmethod
    def all(cls) -> Tuple[UnitSymmetry, ...]:
        return _UNIT_ALL

    @classmethod
    def is_unit(cls) -> bool:
        return len(cls.all()) == 1

    def inverse(self) -> UnitSymmetry:
        return self


_UNIT_ALL = (UnitSymmetry(),)


@dataclass(frozen=True)
class D1Symmetry:
    """The group of a single axis mirror; the default value is the identity."""

    mirror: bool = False

    @classmethod
    def all(cls) -> Tuple[D1Symmetry, ...]:
        return _D1_ALL

    @classmethod
    def is_unit(cls) -> bool:
        return len(cls.all()) == 1

    def inverse(self) -> D1Symmetry:
        return self

    def map_axis(self, x: int, size: int) -> int:
        """Map position `x` on an axis of length `size`."""
        return (size - 1) - x if self.mirror else x


_D1_ALL = (D1Symmetry(False), D1Symmetry(True))


@dataclass(frozen=True)
class D4Symmetry:
    """Any combination of transposing and flipping: first an optional transpose, then optional flips per axis."""

    transpose: bool = False
    flip_x: bool = False
    flip_y: bool = False

    @classmethod
    def all(cls) -> Tuple[D4Symmetry, ...]:
        return _D4_ALL

    @classmethod
    def is_unit(cls) -> bool:
        return len(cls.all()) == 1

    def inverse(self) -> D4Symmetry:
        if self.transpose:
            return D4Symmetry(True, self.flip_y, self.flip_x)
        return self

    def map_xy(self, x: int, y: int, size: int) -> Tuple[int, int]:
        """Map the position `(x, y)` on a square board of side `size`."""
        top = size - 1
        if self.transpose:
            x, y = y, x
        if self.flip_x:
            x = top - x
        if self.flip_y:
            y = top - y
        return x, y

    def map_coord(self, coord: Coord, size: int) -> Coord:
        """Map `coord` within the lower-left `size` x `size` square of its grid."""
        if size > coord.width or size > coord.height:
            raise ValueError(f"size {size} exceeds grid {coord.width}x{coord.height}")
        x, y = self.map_xy(coord.x, coord.y, size)
        return Coord.from_xy(x, y, coord.width, coord.height)


_D4_ALL = tuple(
    D4Symmetry(transpose, flip_x, flip_y)
    for transpose in (False, True)
    for flip_x in (False, True)
    for flip_y in (False, True)
)


def random_symmetry(
    kind: Type[S],
    rng: Optional[random.Random] = None,
) -> Union[UnitSymmetry, D1Symmetry, D4Symmetry]:
    """Pick a uniformly random element of the symmetry group `kind`."""
    elements = kind.all()
    if not elements:
        raise ValueError("a symmetry group cannot be empty")
    chooser = rng if rng is not None else random
    return chooser.choice(elements)