"""Commands of the Universal Ataxx Interface (UAI), a UCI-like text protocol."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

_U32_MAX = (1 << 32) - 1


class ParseError(ValueError):
    """Raised when a line is not a valid UAI command."""


@dataclass(frozen=True)
class Uai:
    """Asks the engine to identify itself."""


@dataclass(frozen=True)
class IsReady:
    """Asks the engine to answer once it is ready."""


@dataclass(frozen=True)
class NewGame:
    """Starts a new game."""


@dataclass(frozen=True)
class Quit:
    """Asks the engine to exit."""


@dataclass(frozen=True)
class Takeback:
    """Undoes the last position change."""


@dataclass(frozen=True)
class Print:
    """Asks the engine to print the current board."""


@dataclass(frozen=True)
class StartPos:
    """The standard starting position."""


@dataclass(frozen=True)
class FenPosition:
    """A position given in FEN notation."""

    fen: str


Position = Union[StartPos, FenPosition]


@dataclass(frozen=True)
class PositionCommand:
    """Sets the position, optionally followed by moves to play on it."""

    position: Position
    moves: Optional[str] = None


@dataclass(frozen=True)
class MoveTime:
    """A fixed time for one move, in milliseconds."""

    millis: int


@dataclass(frozen=True)
class ClockTime:
    """Remaining time and increment per side, in milliseconds."""

    b_time: int
    w_time: int
    b_inc: int
    w_inc: int


@dataclass(frozen=True)
class Go:
    """Starts searching with the given time settings."""

    time: Union[MoveTime, ClockTime]


@dataclass(frozen=True)
class SetOption:
    """Sets an engine option."""

    name: str
    value: str


@dataclass(frozen=True)
class Moves:
    """Moves to play on the current position, separated by spaces."""

    moves: str


Command = Union[
    Uai, IsReady, NewGame, Quit, Takeback, Print, PositionCommand, Go, SetOption, Moves
]

_MOVE_TIME = re.compile(r"movetime ([0-9]+)")
_CLOCK_TIME = re.compile(r"btime ([0-9]+) wtime ([0-9]+) binc ([0-9]+) winc ([0-9]+)")


def _to_u32(digits: str) -> int:
    value = int(digits)
    if value > _U32_MAX:
        raise ParseError(f"number {digits} is too large")
    return value


def _exactly(text: str, keyword: str, command: Command) -> Command:
    if text != keyword:
        raise ParseError(f"unexpected input after '{keyword}': {text!r}")
    return command


def _parse_position(rest: str) -> PositionCommand:
    position: Position
    if rest.startswith("startpos"):
        position = StartPos()
        tail = rest[len("startpos"):]
    elif rest.startswith("fen "):
        body = rest[len("fen "):]
        end = body.find(" moves")
        if end < 0:
            end = len(body)
        position = FenPosition(body[:end])
        tail = body[end:]
    else:
        raise ParseError(f"invalid position {rest!r}")

    if tail == "":
        return PositionCommand(position, None)
    if tail.startswith(" moves "):
        return PositionCommand(position, tail[len(" moves "):])
    raise ParseError(f"unexpected input after position: {tail!r}")


def _parse_go(rest: str) -> Go:
    match = _MOVE_TIME.fullmatch(rest)
    if match:
        return Go(MoveTime(_to_u32(match.group(1))))
    match = _CLOCK_TIME.fullmatch(rest)
    if match:
        b_time, w_time, b_inc, w_inc = (_to_u32(group) for group in match.groups())
        return Go(ClockTime(b_time, w_time, b_inc, w_inc))
    raise ParseError(f"invalid time settings {rest!r}")


def _parse_set_option(rest: str) -> SetOption:
    if not rest.startswith("name "):
        raise ParseError("setoption needs a name")
    body = rest[len("name "):]
    space = body.find(" ")
    if space < 0:
        raise ParseError("setoption needs a name followed by a value")
    name, tail = body[:space], body[space:]
    if not tail.startswith(" value "):
        raise ParseError(f"expected ' value ' after option name, got {tail!r}")
    return SetOption(name, tail[len(" value "):])


def parse_command(text: str) -> Command:
    """Parse one line of input into a command, raising ParseError if it is not valid."""
    if text.startswith("uainewgame"):
        return _exactly(text, "uainewgame", NewGame())
    if text.startswith("uai"):
        return _exactly(text, "uai", Uai())
    if text.startswith("isready"):
        return _exactly(text, "isready", IsReady())
    if text.startswith("quit"):
        return _exactly(text, "quit", Quit())
    if text.startswith("takeback"):
        return _exactly(text, "takeback", Takeback())
    if text.startswith("print"):
        return _exactly(text, "print", Print())
    if text.startswith("d"):
        return _exactly(text, "d", Print())
    if text.startswith("position "):
        return _parse_position(text[len("position "):])
    if text.startswith("moves "):
        return Moves(text[len("moves "):])
    if text.startswith("go "):
        return _parse_go(text[len("go "):])
    if text.startswith("setoption "):
        return _parse_set_option(text[len("setoption "):])
    raise ParseError(f"unknown command: {text!r}")