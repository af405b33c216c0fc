import random

import pytest

from bgkit.bitboard import BitBoard8
from bgkit.coord import Coord, coord3, coord8


@pytest.mark.parametrize(
    "coord, copy, jump",
    [
        (coord8(7, 7), 0x40C0000000000000, 0x2020E00000000000),
        (coord8(0, 7), 0x0203000000000000, 0x0404070000000000),
        (coord8(7, 0), 0x000000000000C040, 0x0000000000E02020),
        (coord8(0, 0), 0x0000000000000302, 0x0000000000070404),
    ],
)
def test_copy_jump(coord, copy, jump):
    assert BitBoard8.coord(coord).adjacent() == BitBoard8(copy)
    assert BitBoard8.coord(coord).ring() == BitBoard8(jump)


def test_flip():
    board = BitBoard8(0x16101010000606)
    assert board.flip_x() == BitBoard8(0x68080808006060)
    assert board.flip_y() == BitBoard8(0x606001010101600)


def _ring_slow(board):
    return (
        board.left().left()
        | board.left().left().down()
        | board.left().left().down().down()
        | board.left().down().down()
        | board.down().down()
        | board.right().down().down()
        | board.right().right().down().down()
        | board.right().right().down()
        | board.right().right()
        | board.right().right().up()
        | board.right().right().up().up()
        | board.right().up().up()
        | board.up().up()
        | board.left().up().up()
        | board.left().left().up().up()
        | board.left().left().up()
    )


def _check_spatial(board):
    assert str(board.left() | board.right() | board.up() | board.down()) == str(board.orthogonal())
    assert board.left() | board.right() | board.up() | board.down() == board.orthogonal()
    assert (
        board.left().up() | board.right().up() | board.left().down() | board.right().down()
        == board.diagonal()
    )
    assert board.orthogonal() | board.diagonal() == board.adjacent()
    assert _ring_slow(board) == board.ring()
    assert (board.adjacent() | board.ring()) & ~board == board.adjacent_or_ring_not_self()


@pytest.mark.parametrize("coord", list(Coord.all(8, 8)))
def test_spatial_single(coord):
    _check_spatial(BitBoard8.coord(coord))


def test_spatial_random():
    rng = random.Random(1234)
    for _ in range(128):
        _check_spatial(BitBoard8(rng.getrandbits(64)))


@pytest.mark.parametrize("coord", list(Coord.all(8, 8)))
def test_transpose_and_flips_move_single_tiles(coord):
    board = BitBoard8.coord(coord)
    assert board.transpose() == BitBoard8.coord(coord8(coord.y, coord.x))
    assert board.flip_x() == BitBoard8.coord(coord8(7 - coord.x, coord.y))
    assert board.flip_y() == BitBoard8.coord(coord8(coord.x, 7 - coord.y))


def test_set_clear_has_count():
    board = BitBoard8.EMPTY.set(coord8(1, 2)).set(coord8(5, 5))
    assert board.has(coord8(1, 2))
    assert not board.has(coord8(2, 1))
    assert board.count() == 2
    assert board.any() and not board.none()
    cleared = board.clear(coord8(1, 2))
    assert cleared.count() == 1
    assert cleared.clear(coord8(5, 5)).none()


def test_iter_and_get_nth():
    coords = [coord8(0, 0), coord8(3, 1), coord8(7, 7)]
    board = BitBoard8.from_coords(coords)
    assert list(board) == coords
    assert board.get_nth(1) == coord8(3, 1)
    with pytest.raises(ValueError):
        board.get_nth(3)


def test_coord_option():
    assert BitBoard8.coord_option(None) == BitBoard8.EMPTY
    assert BitBoard8.coord_option(coord8(2, 0)) == BitBoard8(0b100)


def test_full_for_size():
    assert BitBoard8.full_for_size(3) == BitBoard8(0x070707)
    assert BitBoard8.full_for_size(8) == BitBoard8.FULL
    assert BitBoard8.full_for_size(5).count() == 25
    with pytest.raises(ValueError):
        BitBoard8.full_for_size(9)


def test_str():
    expected = "." * 8 + "\n" + ("." * 8 + "\n") * 6 + "1......1\n"
    assert str(BitBoard8(0x81)) == expected


def test_bit_operations():
    a = BitBoard8(0b1100)
    b = BitBoard8(0b1010)
    assert a | b == BitBoard8(0b1110)
    assert a & b == BitBoard8(0b1000)
    assert a ^ b == BitBoard8(0b0110)
    assert ~BitBoard8.EMPTY == BitBoard8.FULL


def test_wrong_grid_rejected():
    with pytest.raises(ValueError):
        BitBoard8.coord(coord3(0, 0))


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        BitBoard8(1 << 64)