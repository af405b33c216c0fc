# bgkit

Small building blocks for deterministic two-player board games. The package needs nothing
outside the standard library.

## Modules

- `bgkit.pov`: `Player` (`A` and `B`, with `other()`). It also has `ScalarAbs` and
  `ScalarPov`, which hold a scalar value either as seen by player A or as seen by some
  player. `pov`, `un_pov` and `flip` convert between the two, and the usual arithmetic
  operators work on both.
- `bgkit.wdl`: game outcomes and win/draw/loss values.
  - `Outcome` (`Outcome.won_by(player)`, `Outcome.draw()`) is an absolute outcome.
  - `OutcomeWDL` (`WIN`, `DRAW`, `LOSS`) is an outcome seen by one player.
  - `WDL` and `WDLAbs` support arithmetic, `sum`, `value`, `normalized`, `nan`, `cast`,
    `total` and point-of-view conversion.
  - `OutcomeWDL.best` and `OutcomeWDL.best_maybe` pick the best child outcome. For
    `best_maybe`, `None` means unknown, and the order is win > unknown > draw > loss.
- `bgkit.rating`: `elo_from_wdl(wdl)` gives the Elo difference implied by a WDL tally,
  which does not have to be normalised. It returns `nan` for an empty tally and `±inf`
  when the score is 0 or 1.
- `bgkit.coord`: `Coord` is a tile on a grid of given width and height. It can be built
  with `from_index`, `from_xy` or `all`. It provides `x`, `y`, `dense_index`,
  `manhattan_distance`, `diagonal_distance`, `cast` and `valid_for_size`. The shortcuts
  `coord8(x, y)` and `coord3(x, y)` build coordinates on 8x8 and 3x3 grids.
  Out-of-range values raise `ValueError`.
- `bgkit.bits`: bit tricks on 64-bit integers.
  - `bit_indices` yields the indices of the set bits.
  - `get_nth_set_bit` finds the n-th set bit and raises `ValueError` if it is missing.
  - `subsets` yields every subset of a mask.
  - `subsets_with_count` yields the subsets of a mask that have exactly `m` bits set.
  - `snoob_masked` gives the next subset with the same number of bits.
- `bgkit.bitboard`: `BitBoard8` is an 8x8 bitboard in which tile (x, y) is bit
  `x + 8 * y`.
  - It offers the shifts `left`, `right`, `up` and `down`.
  - It offers the neighbourhoods `orthogonal`, `diagonal`, `adjacent`, `ring` and
    `adjacent_or_ring_not_self`.
  - It offers `flip_x`, `flip_y` and `transpose`, and the set operators `|`, `&`, `^`
    and `~`.
  - Iterating over a board yields its coordinates. `str()` draws the board, top row
    first.
  - `BitBoard8.EMPTY`, `BitBoard8.FULL` and `full_for_size(size)` give common boards.
- `bgkit.symmetry`: the `UnitSymmetry`, `D1Symmetry` and `D4Symmetry` groups.
  - Each group has `all()`, `is_unit()` and `inverse()`.
  - `D1Symmetry` has `map_axis`. `D4Symmetry` has `map_xy` and `map_coord`.
  - `random_symmetry(kind, rng=None)` picks a uniformly random element of a group.
- `bgkit.mask`: `Mask` holds required-one and required-zero bits. `Mask.create` and
  `merge` return `None` on a conflict. `cover_masks` greedily merges requirements.
  `find_requirements` derives the masks under which a plain shift (see `apply_shift`)
  reproduces a bitboard operation.
- `bgkit.aei`: the Arimaa Engine Interface.
  - `parse_command(text)` returns `Aei`, `IsReady`, `NewGame`, `SetPosition`,
    `SetOption`, `MakeMove`, `Go`, `Stop` or `Quit`, and raises `ParseError` on invalid
    input.
  - The response classes (`ProtocolVersion`, `AeiOk`, `ReadyOk`, `IdResponse`,
    `BestMove`, `InfoResponse`, `LogResponse`) format themselves with `str()`.
- `bgkit.gtp`: the Go Text Protocol.
  - `Command.parse` splits a line into an optional id, a name and arguments, and raises
    `InvalidCommand` when there is no name.
  - `CommandKind.from_name` raises `UnknownCommand` for an unsupported name.
  - `FinalStatusKind.parse` raises `UnknownStatus` for an unsupported status.
  - `Response` formats a success or failure reply, including the trailing blank line.
- `bgkit.uai`: the Universal Ataxx Interface. `parse_command(text)` returns `Uai`,
  `IsReady`, `NewGame`, `Quit`, `Takeback`, `Print`, `PositionCommand`, `Go` (with
  `MoveTime` or `ClockTime`), `SetOption` or `Moves`. It raises `ParseError` on invalid
  input.

## Installation

```
pip install .
```

## Examples

```python
from bgkit.pov import Player
from bgkit.wdl import Outcome, WDL
from bgkit.rating import elo_from_wdl

outcome = Outcome.won_by(Player.A)
print(outcome.pov(Player.B))          # OutcomeWDL.LOSS
print(elo_from_wdl(WDL(6.0, 2.0, 2.0)))
```

```python
from bgkit.bitboard import BitBoard8
from bgkit.coord import coord8

board = BitBoard8.coord(coord8(0, 0))
print(board.adjacent())
print(board.ring().count())
```

```python
from bgkit import uai, gtp

print(uai.parse_command("position startpos moves a b c"))
print(gtp.Command.parse("1 genmove black"))
```

## What this package does not do

The package contains no game rules, no move generation, no search or bots, and no engine
loop. The protocol modules parse commands and format responses only. Reading commands
from a stream, keeping a board and answering with moves is left to the program that uses
them.

## Running the tests

```
pip install ".[test]"
pytest
```