"""Required-one / required-zero bit masks and a greedy cover of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from bgkit.bitboard import BitBoard8
from bgkit.coord import Coord

_MASK64 = (1 << 64) - 1

Operation = Callable[[BitBoard8], BitBoard8]


@dataclass(frozen=True)
class Mask:
    """Bits that must be one and bits that must be zero."""

    one: int = 0
    zero: int = 0

    @classmethod
    def create(cls, one: int, zero: int) -> Optional[Mask]:
        """A mask, or None if some bit is required to be both one and zero."""
        if one & zero == 0:
            return cls(one, zero)
        return None

    def merge(self, other: Mask) -> Optional[Mask]:
        """The combined requirements, or None if they conflict."""
        return Mask.create(self.one | other.one, self.zero | other.zero)

    def __str__(self) -> str:
        symbols = {(True, False): "1", (False, True): "0", (False, False): ".", (True, True): "x"}
        rows = []
        for y in reversed(range(8)):
            row = "".join(
                symbols[(bool((self.one >> (x + 8 * y)) & 1), bool((self.zero >> (x + 8 * y)) & 1))]
                for x in range(8)
            )
            rows.append(row + "\n")
        return "".join(rows)


def cover_masks(requirements: Sequence[Mask]) -> List[Tuple[Mask, List[int]]]:
    """Greedily merge requirements into as few masks as possible.

    Returns each merged mask with the indices of the requirements it covers.
    """
    result: List[Tuple[Mask, List[int]]] = []
    for req_index, req in enumerate(requirements):
        for slot, (candidate, indices) in enumerate(result):
            merged = candidate.merge(req)
            if merged is not None:
                indices.append(req_index)
                result[slot] = (merged, indices)
                break
        else:
            result.append((req, [req_index]))
    return result


def find_requirements(ops: Sequence[Tuple[int, Operation]], result_mask: int) -> List[Mask]:
    """For each (shift, op), the mask under which a plain shift reproduces `op` within `result_mask`."""
    requirements = []
    for shift, op in ops:
        mask_one = 0
        mask_zero = 0
        for coord in Coord.all(8, 8):
            before = BitBoard8.coord(coord).value & result_mask
            after_correct = op(BitBoard8(before)).value & result_mask
            after_shift = apply_shift(before, shift) & result_mask

            if after_correct & ~after_shift:
                raise ValueError(f"shift {shift} does not cover the operation at {coord}")
            mask_one |= after_correct
            mask_zero |= after_shift & ~after_correct

        mask = Mask.create(mask_one, mask_zero)
        if mask is None:
            raise ValueError(f"conflicting requirements for shift {shift}")
        requirements.append(mask)
    return requirements


def apply_shift(value: int, delta: int) -> int:
    """Shift left for positive `delta`, right for negative, within 64 bits."""
    if delta >= 0:
        return (value << delta) & _MASK64
    return value >> -delta