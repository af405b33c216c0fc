"""Players and scalar values seen either absolutely or from one player's point of view."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class Player(enum.Enum):
    """One of the two players of a game."""

    A = "A"
    B = "B"

    def other(self) -> Player:
        """The opponent of this player."""
        return Player.B if self is Player.A else Player.A


@dataclass(frozen=True, order=True)
class ScalarAbs:
    """A scalar value expressed from the point of view of player A."""

    value_a: Any = 0

    def pov(self, pov: Player) -> ScalarPov:
        """View this value from the point of view of `pov`."""
        return ScalarPov(self.value_a if pov is Player.A else -self.value_a)

    def flip(self) -> ScalarAbs:
        """The same value with the roles of the players swapped."""
        return self.pov(Player.A).un_pov(Player.B)

    def __add__(self, other: ScalarAbs) -> ScalarAbs:
        if not isinstance(other, ScalarAbs):
            return NotImplemented
        return ScalarAbs(self.value_a + other.value_a)

    def __sub__(self, other: ScalarAbs) -> ScalarAbs:
        if not isinstance(other, ScalarAbs):
            return NotImplemented
        return ScalarAbs(self.value_a - other.value_a)

    def __mul__(self, factor: Any) -> ScalarAbs:
        return ScalarAbs(self.value_a * factor)

    def __truediv__(self, divisor: Any) -> ScalarAbs:
        return ScalarAbs(self.value_a / divisor)


@dataclass(frozen=True, order=True)
class ScalarPov:
    """A scalar value expressed from the point of view of some player."""

    value: Any = 0

    def un_pov(self, pov: Player) -> ScalarAbs:
        """Convert back to an absolute value, given that this is seen from `pov`."""
        return ScalarAbs(self.value if pov is Player.A else -self.value)

    def flip(self) -> ScalarPov:
        """The value as seen by the other player."""
        return self.un_pov(Player.A).pov(Player.B)

    def __add__(self, other: ScalarPov) -> ScalarPov:
        if not isinstance(other, ScalarPov):
            return NotImplemented
        return ScalarPov(self.value + other.value)

    def __sub__(self, other: ScalarPov) -> ScalarPov:
        if not isinstance(other, ScalarPov):
            return NotImplemented
        return ScalarPov(self.value - other.value)

    def __mul__(self, factor: Any) -> ScalarPov:
        return ScalarPov(self.value * factor)

    def __truediv__(self, divisor: Any) -> ScalarPov:
        return ScalarPov(self.value / divisor)