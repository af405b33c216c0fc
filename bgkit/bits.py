"""Compact bit tricks on 64-bit unsigned integers."""

from __future__ import annotations

from typing import Iterator

_MASK64 = (1 << 64) - 1


def _trailing_zeros(value: int) -> int:
    return (value & -value).bit_length() - 1


def bit_indices(value: int) -> Iterator[int]:
    """Yield the indices of the set bits of `value`, least significant first."""
    if value < 0:
        raise ValueError("value must be non-negative")
    while value:
        yield _trailing_zeros(value)
        value &= value - 1


def get_nth_set_bit(value: int, n: int) -> int:
    """The index of the `n`-th (zero-based) set bit of `value`."""
    value &= _MASK64
    for _ in range(n):
        value &= (value - 1) & _MASK64
    if value == 0:
        raise ValueError(f"value has no set bit number {n}")
    return _trailing_zeros(value)


def subsets(mask: int) -> Iterator[int]:
    """Yield every subset of `mask`, starting with zero; there are 2**popcount of them."""
    mask &= _MASK64
    curr = 0
    while True:
        yield curr
        curr = (curr - mask) & mask
        if curr == 0:
            return


def subsets_with_count(mask: int, m: int) -> Iterator[int]:
    """Yield every subset of `mask` with exactly `m` bits set, in increasing order."""
    mask &= _MASK64
    if m > mask.bit_count() if hasattr(int, "bit_count") else bin(mask).count("1"):
        return
    if m == 0:
        yield 0
        return

    curr = 0
    left = m
    for index in bit_indices(mask):
        if left == 0:
            break
        curr |= 1 << index
        left -= 1

    while curr != 0 and bin(curr).count("1") == m:
        yield curr
        curr = snoob_masked(curr, mask)


def snoob_masked(sub: int, full: int) -> int:
    """The next subset of `full` with the same number of bits as `sub`, with 64-bit wrapping."""
    sub &= _MASK64
    full &= _MASK64

    tmp = (sub - 1) & _MASK64
    rip = full & ((tmp + (sub & -sub) - full) & _MASK64)

    sub = (tmp & sub) ^ rip
    sub &= (sub - 1) & _MASK64

    while sub != 0:
        tmp = full & -full
        rip ^= tmp
        full ^= tmp
        sub &= (sub - 1) & _MASK64

    return rip & _MASK64