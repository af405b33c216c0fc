"""Game outcomes and win/draw/loss value triples."""

from __future__ import annotations

import enum
import functools
import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from bgkit.pov import Player, ScalarAbs


@dataclass(frozen=True)
class Outcome:
    """The absolute outcome of a finished game: won by a player, or a draw."""

    winner: Optional[Player] = None

    @classmethod
    def won_by(cls, player: Player) -> Outcome:
        return cls(player)

    @classmethod
    def draw(cls) -> Outcome:
        return cls(None)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def pov(self, pov: Player) -> OutcomeWDL:
        """This outcome as seen by `pov`."""
        if self.winner is None:
            return OutcomeWDL.DRAW
        return OutcomeWDL.WIN if self.winner is pov else OutcomeWDL.LOSS

    def flip(self) -> Outcome:
        """The outcome with the roles of the players swapped."""
        return self.pov(Player.A).un_pov(Player.B)

    def to_wdl_abs(self) -> WDLAbs:
        """A WDLAbs with a one at the place of this outcome and zero elsewhere."""
        if self.winner is Player.A:
            return WDLAbs(1, 0, 0)
        if self.winner is Player.B:
            return WDLAbs(0, 0, 1)
        return WDLAbs(0, 1, 0)

    def sign(self) -> ScalarAbs:
        """A win for A as 1, a draw as 0 and a win for B as -1."""
        if self.winner is Player.A:
            return ScalarAbs(1)
        if self.winner is Player.B:
            return ScalarAbs(-1)
        return ScalarAbs(0)

    def __str__(self) -> str:
        return "Draw" if self.winner is None else f"WonBy({self.winner.value})"


class OutcomeWDL(enum.Enum):
    """The outcome of a game from the point of view of one player."""

    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"

    def to_wdl(self) -> WDL:
        """A WDL with a one at the place of this outcome and zero elsewhere."""
        if self is OutcomeWDL.WIN:
            return WDL(1, 0, 0)
        if self is OutcomeWDL.DRAW:
            return WDL(0, 1, 0)
        return WDL(0, 0, 1)

    def sign(self) -> int:
        """A win as 1, a draw as 0 and a loss as -1."""
        if self is OutcomeWDL.WIN:
            return 1
        if self is OutcomeWDL.DRAW:
            return 0
        return -1

    def un_pov(self, pov: Player) -> Outcome:
        """The absolute outcome, given that this is seen from `pov`."""
        if self is OutcomeWDL.WIN:
            return Outcome.won_by(pov)
        if self is OutcomeWDL.DRAW:
            return Outcome.draw()
        return Outcome.won_by(pov.other())

    def flip(self) -> OutcomeWDL:
        """This outcome as seen by the opponent."""
        return self.un_pov(Player.A).pov(Player.B)

    @staticmethod
    def best(children: Iterable[OutcomeWDL]) -> OutcomeWDL:
        """The best outcome, with win > draw > loss; all values from the parent's view."""
        result = OutcomeWDL.best_maybe(children)
        assert result is not None
        return result

    @staticmethod
    def best_maybe(children: Iterable[Optional[OutcomeWDL]]) -> Optional[OutcomeWDL]:
        """The best outcome, with win > unknown (None) > draw > loss."""
        any_unknown = False
        all_known_are_loss = True
        for child in children:
            if child is None:
                any_unknown = True
            elif child is OutcomeWDL.WIN:
                return OutcomeWDL.WIN
            elif child is OutcomeWDL.DRAW:
                all_known_are_loss = False
        if any_unknown:
            return None
        return OutcomeWDL.LOSS if all_known_are_loss else OutcomeWDL.DRAW


@dataclass(frozen=True)
class WDL:
    """Win, draw and loss values from the point of view of one player."""

    win: Any = 0
    draw: Any = 0
    loss: Any = 0

    @classmethod
    def nan(cls) -> WDL:
        return cls(math.nan, math.nan, math.nan)

    @classmethod
    def total(cls, items: Iterable[WDL]) -> WDL:
        """The element-wise sum of `items`, starting from zero."""
        return functools.reduce(operator.add, items, cls())

    def to_tuple(self) -> tuple:
        return (self.win, self.draw, self.loss)

    def cast(self, kind: Callable[[Any], Any]) -> WDL:
        """Convert every value with `kind`, for example `float`."""
        return WDL(kind(self.win), kind(self.draw), kind(self.loss))

    def normalized(self) -> WDL:
        return self / self.sum()

    def try_to_outcome_wdl(self) -> Optional[OutcomeWDL]:
        """The outcome whose one-hot WDL equals this, if any."""
        return next((o for o in OutcomeWDL if o.to_wdl() == self), None)

    def value(self) -> Any:
        return self.win - self.loss

    def sum(self) -> Any:
        return self.win + self.draw + self.loss

    def un_pov(self, pov: Player) -> WDLAbs:
        """The absolute values, given that these are seen from `pov`."""
        if pov is Player.A:
            return WDLAbs(self.win, self.draw, self.loss)
        return WDLAbs(self.loss, self.draw, self.win)

    def flip(self) -> WDL:
        """These values as seen by the opponent."""
        return self.un_pov(Player.A).pov(Player.B)

    def __add__(self, other: WDL) -> WDL:
        if not isinstance(other, WDL):
            return NotImplemented
        return WDL(self.win + other.win, self.draw + other.draw, self.loss + other.loss)

    def __sub__(self, other: WDL) -> WDL:
        if not isinstance(other, WDL):
            return NotImplemented
        return WDL(self.win - other.win, self.draw - other.draw, self.loss - other.loss)

    def __mul__(self, factor: Any) -> WDL:
        return WDL(self.win * factor, self.draw * factor, self.loss * factor)

    def __truediv__(self, divisor: Any) -> WDL:
        return WDL(self.win / divisor, self.draw / divisor, self.loss / divisor)


@dataclass(frozen=True)
class WDLAbs:
    """Win-for-A, draw and win-for-B values."""

    win_a: Any = 0
    draw: Any = 0
    win_b: Any = 0

    @classmethod
    def nan(cls) -> WDLAbs:
        return cls(math.nan, math.nan, math.nan)

    @classmethod
    def total(cls, items: Iterable[WDLAbs]) -> WDLAbs:
        """The element-wise sum of `items`, starting from zero."""
        return functools.reduce(operator.add, items, cls())

    def cast(self, kind: Callable[[Any], Any]) -> WDLAbs:
        """Convert every value with `kind`, for example `float`."""
        return WDLAbs(kind(self.win_a), kind(self.draw), kind(self.win_b))

    def normalized(self) -> WDLAbs:
        return self / self.sum()

    def try_to_outcome(self) -> Optional[Outcome]:
        """The outcome whose one-hot WDLAbs equals this, if any."""
        candidates = (Outcome.won_by(Player.A), Outcome.draw(), Outcome.won_by(Player.B))
        return next((o for o in candidates if o.to_wdl_abs() == self), None)

    def value(self) -> ScalarAbs:
        return ScalarAbs(self.win_a - self.win_b)

    def sum(self) -> Any:
        return self.win_a + self.draw + self.win_b

    def pov(self, pov: Player) -> WDL:
        """These values as seen by `pov`."""
        if pov is Player.A:
            return WDL(self.win_a, self.draw, self.win_b)
        return WDL(self.win_b, self.draw, self.win_a)

    def flip(self) -> WDLAbs:
        """The values with the roles of the players swapped."""
        return self.pov(Player.A).un_pov(Player.B)

    def __add__(self, other: WDLAbs) -> WDLAbs:
        if not isinstance(other, WDLAbs):
            return NotImplemented
        return WDLAbs(self.win_a + other.win_a, self.draw + other.draw, self.win_b + other.win_b)

    def __sub__(self, other: WDLAbs) -> WDLAbs:
        if not isinstance(other, WDLAbs):
            return NotImplemented
        return WDLAbs(self.win_a - other.win_a, self.draw - other.draw, self.win_b - other.win_b)

    def __mul__(self, factor: Any) -> WDLAbs:
        return WDLAbs(self.win_a * factor, self.draw * factor, self.win_b * factor)

    def __truediv__(self, divisor: Any) -> WDLAbs:
        return WDLAbs(self.win_a / divisor, self.draw / divisor, self.win_b / divisor)