"""An 8x8 bitboard stored in a 64-bit integer, bit index x + 8 * y."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from bgkit.bits import bit_indices, get_nth_set_bit
from bgkit.coord import Coord

_MASK64 = (1 << 64) - 1

_NOT_COL_7 = 0x7F7F7F7F7F7F7F7F
_NOT_COL_0 = 0xFEFEFEFEFEFEFEFE
_NOT_COL_67 = 0x3F3F3F3F3F3F3F3F
_NOT_COL_01 = 0xFCFCFCFCFCFCFCFC

_FULL_FOR_SIZE = (
    0x0000000000000000,
    0x0000000000000001,
    0x0000000000000303,
    0x0000000000070707,
    0x000000000F0F0F0F,
    0x0000001F1F1F1F1F,
    0x00003F3F3F3F3F3F,
    0x007F7F7F7F7F7F7F,
    0xFFFFFFFFFFFFFFFF,
)

_REVERSED_BYTES = bytes(int(f"{b:08b}"[::-1], 2) for b in range(256))


def _index_of(coord: Coord) -> int:
    if (coord.width, coord.height) != (8, 8):
        raise ValueError(f"expected a coordinate on an 8x8 grid, got {coord.width}x{coord.height}")
    return coord.index


@dataclass(frozen=True)
class BitBoard8:
    """A set of tiles on an 8x8 board."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MASK64:
            raise ValueError(f"bitboard value {self.value:#x} does not fit in 64 bits")

    @classmethod
    def coord(cls, coord: Coord) -> BitBoard8:
        return cls(1 << _index_of(coord))

    @classmethod
    def coord_option(cls, coord: Optional[Coord]) -> BitBoard8:
        return cls() if coord is None else cls.coord(coord)

    @classmethod
    def from_coords(cls, coords: Iterable[Coord]) -> BitBoard8:
        value = 0
        for coord in coords:
            value |= 1 << _index_of(coord)
        return cls(value)

    @classmethod
    def full_for_size(cls, size: int) -> BitBoard8:
        """All tiles of the lower-left `size` x `size` square."""
        if not 0 <= size <= 8:
            raise ValueError(f"size {size} out of range 0..8")
        return cls(_FULL_FOR_SIZE[size])

    def has(self, coord: Coord) -> bool:
        return (self.value >> _index_of(coord)) & 1 != 0

    def none(self) -> bool:
        return self.value == 0

    def any(self) -> bool:
        return self.value != 0

    def count(self) -> int:
        return bin(self.value).count("1")

    def get_nth(self, index: int) -> Coord:
        return Coord.from_index(get_nth_set_bit(self.value, index), 8, 8)

    def set(self, coord: Coord) -> BitBoard8:
        return BitBoard8(self.value | (1 << _index_of(coord)))

    def clear(self, coord: Coord) -> BitBoard8:
        return BitBoard8(self.value & ~(1 << _index_of(coord)) & _MASK64)

    def left(self) -> BitBoard8:
        return BitBoard8((self.value >> 1) & _NOT_COL_7)

    def right(self) -> BitBoard8:
        return BitBoard8((self.value << 1) & _NOT_COL_0)

    def down(self) -> BitBoard8:
        return BitBoard8(self.value >> 8)

    def up(self) -> BitBoard8:
        return BitBoard8((self.value << 8) & _MASK64)

    def orthogonal(self) -> BitBoard8:
        x = self.value
        y = (x >> 1) & _NOT_COL_7 | (x << 1) & _NOT_COL_0 | x << 8 | x >> 8
        return BitBoard8(y & _MASK64)

    def diagonal(self) -> BitBoard8:
        x = self.value
        y = (x << 7 | x >> 9) & _NOT_COL_7 | (x >> 7 | x << 9) & _NOT_COL_0
        return BitBoard8(y & _MASK64)

    def adjacent(self) -> BitBoard8:
        return BitBoard8(self.orthogonal().value | self.diagonal().value)

    def ring(self) -> BitBoard8:
        """The tiles at exactly distance two in the king-move metric."""
        x = self.value
        left_2 = (x >> 2 | x >> 10 | x >> 18 | x << 6 | x << 14) & _NOT_COL_67
        left_1 = (x >> 17 | x << 15) & _NOT_COL_7
        center = x << 16 | x >> 16
        right_1 = (x << 17 | x >> 15) & _NOT_COL_0
        right_2 = (x << 2 | x << 10 | x << 18 | x >> 6 | x >> 14) & _NOT_COL_01
        return BitBoard8((left_2 | left_1 | center | right_1 | right_2) & _MASK64)

    def adjacent_or_ring_not_self(self) -> BitBoard8:
        """The same as `(self.adjacent() | self.ring()) & ~self`."""
        x = self.value
        line = (
            (x << 2) & _NOT_COL_01
            | (x << 1) & _NOT_COL_0
            | x
            | (x >> 1) & _NOT_COL_7
            | (x >> 2) & _NOT_COL_67
        )
        y = (line | line << 8 | line >> 8 | line << 16 | line >> 16) & ~x & _MASK64
        return BitBoard8(y)

    def flip_x(self) -> BitBoard8:
        raw = self.value.to_bytes(8, "little").translate(_REVERSED_BYTES)
        return BitBoard8(int.from_bytes(raw, "little"))

    def flip_y(self) -> BitBoard8:
        return BitBoard8(int.from_bytes(self.value.to_bytes(8, "little"), "big"))

    def transpose(self) -> BitBoard8:
        x = self.value
        y = (
            x & 0x8040201008040201
            | (x & 0x0080402010080402) << 7
            | (x & 0x0000804020100804) << 14
            | (x & 0x0000008040201008) << 21
            | (x & 0x0000000080402010) << 28
            | (x & 0x0000000000804020) << 35
            | (x & 0x0000000000008040) << 42
            | (x & 0x0000000000000080) << 49
            | (x >> 7) & 0x0080402010080402
            | (x >> 14) & 0x0000804020100804
            | (x >> 21) & 0x0000008040201008
            | (x >> 28) & 0x0000000080402010
            | (x >> 35) & 0x0000000000804020
            | (x >> 42) & 0x0000000000008040
            | (x >> 49) & 0x0000000000000080
        )
        return BitBoard8(y & _MASK64)

    def __iter__(self) -> Iterator[Coord]:
        return (Coord.from_index(index, 8, 8) for index in bit_indices(self.value))

    def __str__(self) -> str:
        rows = (
            "".join("1" if (self.value >> (x + 8 * y)) & 1 else "." for x in range(8))
            for y in reversed(range(8))
        )
        return "".join(row + "\n" for row in rows)

    def __or__(self, other: BitBoard8) -> BitBoard8:
        if not isinstance(other, BitBoard8):
            return NotImplemented
        return BitBoard8(self.value | other.value)

    def __and__(self, other: BitBoard8) -> BitBoard8:
        if not isinstance(other, BitBoard8):
            return NotImplemented
        return BitBoard8(self.value & other.value)

    def __xor__(self, other: BitBoard8) -> BitBoard8:
        if not isinstance(other, BitBoard8):
            return NotImplemented
        return BitBoard8(self.value ^ other.value)

    def __invert__(self) -> BitBoard8:
        return BitBoard8(~self.value & _MASK64)


BitBoard8.EMPTY = BitBoard8(0)
BitBoard8.FULL = BitBoard8(_MASK64)