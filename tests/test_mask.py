import pytest

from bgkit.bitboard import BitBoard8
from bgkit.mask import Mask, apply_shift, cover_masks, find_requirements

FULL = (1 << 64) - 1


def test_create_rejects_overlap():
    assert Mask.create(0b11, 0b10) is None
    assert Mask.create(0b01, 0b10) == Mask(0b01, 0b10)


def test_merge():
    assert Mask(1, 2).merge(Mask(4, 2)) == Mask(5, 2)
    assert Mask(1, 2).merge(Mask(2, 1)) is None


def test_str_layout():
    text = str(Mask(1, 2))
    lines = text.splitlines()
    assert len(lines) == 8
    assert lines[-1] == "10......"
    assert all(line == "........" for line in lines[:-1])
    assert text.endswith("\n")


def test_str_shows_conflict():
    assert str(Mask(1 << 63, 1 << 63)).splitlines()[0] == ".......x"


def test_cover_masks_groups_compatible():
    reqs = [Mask(1, 2), Mask(4, 2), Mask(2, 1)]
    result = cover_masks(reqs)
    assert [indices for _, indices in result] == [[0, 1], [2]]
    assert result[0][0] == Mask(5, 2)


def test_cover_masks_covers_every_requirement():
    reqs = [Mask(1 << i, 1 << ((i + 1) % 8)) for i in range(8)]
    result = cover_masks(reqs)
    covered = sorted(i for _, indices in result for i in indices)
    assert covered == list(range(len(reqs)))
    for mask, indices in result:
        assert mask.one & mask.zero == 0
        for i in indices:
            assert reqs[i].one & ~mask.one == 0
            assert reqs[i].zero & ~mask.zero == 0


def test_cover_masks_empty():
    assert cover_masks([]) == []


def test_apply_shift():
    assert apply_shift(1, 3) == 8
    assert apply_shift(8, -3) == 1
    assert apply_shift(1 << 63, 1) == 0
    assert apply_shift(5, 0) == 5


def test_find_requirements_identity():
    [req] = find_requirements([(0, lambda b: b)], FULL)
    assert req == Mask(FULL, 0)


def test_find_requirements_right_shift():
    [req] = find_requirements([(1, BitBoard8.right)], FULL)
    full = BitBoard8(FULL)
    assert req.one == full.right().value
    assert req.zero == apply_shift(FULL, 1) & ~req.one
    assert req.one & req.zero == 0


def test_find_requirements_restricted_mask():
    result_mask = BitBoard8.full_for_size(4).value
    [req] = find_requirements([(8, BitBoard8.up)], result_mask)
    assert req.one & ~result_mask == 0
    assert req.zero & ~result_mask == 0


def test_find_requirements_uncovered_raises():
    with pytest.raises(ValueError):
        find_requirements([(1, BitBoard8.left)], FULL)