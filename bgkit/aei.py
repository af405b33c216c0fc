"""Commands and responses of the Arimaa Engine Interface (AEI), a UCI-like text protocol."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Optional, Union


class ParseError(ValueError):
    """Raised when a line is not a valid AEI command."""


class IdType(enum.Enum):
    """The kinds of identification an engine can report."""

    NAME = "name"
    AUTHOR = "author"
    VERSION = "version"

    def __str__(self) -> str:
        return self.value


class InfoType(enum.Enum):
    """The kinds of search information an engine can report."""

    SCORE = "score"
    DEPTH = "depth"
    NODES = "nodes"
    PV = "pv"
    TIME = "time"
    CURR_MOVE_NUMBER = "currmovenumber"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


class TCOptionName(enum.Enum):
    """Options that describe the time control."""

    TC_MOVE = "tcmove"
    TC_RESERVE = "tcreserve"
    TC_PERCENT = "tcpercent"
    TC_MAX = "tcmax"
    TC_TOTAL = "tctotal"
    TC_TURNS = "tcturns"
    TC_TURN_TIME = "tcturntime"
    G_RESERVE = "greserve"
    S_RESERVE = "sreserve"
    G_USED = "gused"
    S_USED = "sused"
    LAST_MOVE_USED = "lastmoveused"
    MOVE_USED = "moveused"


class OptionName(enum.Enum):
    """Known options that are not about the time control."""

    OPPONENT = "opponent"
    OPPONENT_RATING = "opponent_rating"
    RATING = "rating"
    RATED = "rated"
    EVENT = "event"


# An option is a time-control option, a known option, or any other name as a plain string.
AnyOptionName = Union[TCOptionName, OptionName, str]

_KNOWN_OPTIONS: Dict[str, AnyOptionName] = {
    **{member.value: member for member in TCOptionName},
    **{member.value: member for member in OptionName},
}


@dataclass(frozen=True)
class Aei:
    """The first command, asking the engine to identify itself."""


@dataclass(frozen=True)
class IsReady:
    """Asks the engine to answer once it is ready."""


@dataclass(frozen=True)
class NewGame:
    """Starts a new game."""


@dataclass(frozen=True)
class SetPosition:
    """Sets the current position."""

    position: str


@dataclass(frozen=True)
class SetOption:
    """Sets an engine option; `name` is a string for options without a known meaning."""

    name: AnyOptionName
    value: Optional[str] = None


@dataclass(frozen=True)
class MakeMove:
    """Plays a move on the current position."""

    move: str


@dataclass(frozen=True)
class Go:
    """Starts searching, or pondering if `ponder` is set."""

    ponder: bool = False


@dataclass(frozen=True)
class Stop:
    """Stops the current search."""


@dataclass(frozen=True)
class Quit:
    """Asks the engine to exit."""


Command = Union[Aei, IsReady, NewGame, SetPosition, SetOption, MakeMove, Go, Stop, Quit]


def _check_single_line(text: str) -> None:
    if "\n" in text:
        raise ValueError("an AEI response cannot contain a newline")


@dataclass(frozen=True)
class ProtocolVersion:
    """Announces the protocol version."""

    def __str__(self) -> str:
        return "protocol-version 1"


@dataclass(frozen=True)
class AeiOk:
    """Confirms the end of the identification phase."""

    def __str__(self) -> str:
        return "aeiok"


@dataclass(frozen=True)
class ReadyOk:
    """Answers an isready command."""

    def __str__(self) -> str:
        return "readyok"


@dataclass(frozen=True)
class IdResponse:
    """Identification of the engine."""

    ty: IdType
    value: str

    def __post_init__(self) -> None:
        _check_single_line(self.value)

    def __str__(self) -> str:
        return f"id {self.ty} {self.value}"


@dataclass(frozen=True)
class BestMove:
    """The move chosen by the engine."""

    move: str

    def __post_init__(self) -> None:
        _check_single_line(self.move)

    def __str__(self) -> str:
        return f"bestmove {self.move}"


@dataclass(frozen=True)
class InfoResponse:
    """Information about the current search."""

    ty: InfoType
    value: str

    def __post_init__(self) -> None:
        _check_single_line(self.value)

    def __str__(self) -> str:
        return f"info {self.ty} {self.value}"


@dataclass(frozen=True)
class LogResponse:
    """A free-form log message."""

    message: str

    def __post_init__(self) -> None:
        _check_single_line(self.message)

    def __str__(self) -> str:
        return f"log {self.message}"


Response = Union[ProtocolVersion, AeiOk, ReadyOk, IdResponse, BestMove, InfoResponse, LogResponse]


def _exactly(text: str, keyword: str, command: Command) -> Command:
    if text != keyword:
        raise ParseError(f"unexpected input after '{keyword}': {text!r}")
    return command


def _parse_set_option(rest: str) -> SetOption:
    space = rest.find(" ")
    if space < 0:
        raise ParseError("setoption needs a name followed by a value")
    name_text, tail = rest[:space], rest[space:]
    if not tail.startswith(" value "):
        raise ParseError(f"expected ' value ' after option name, got {tail!r}")
    name = _KNOWN_OPTIONS.get(name_text, name_text)
    return SetOption(name, tail[len(" value "):])


def parse_command(text: str) -> Command:
    """Parse one line of input into a command, raising ParseError if it is not valid."""
    if text.startswith("aei"):
        return _exactly(text, "aei", Aei())
    if text.startswith("isready"):
        return _exactly(text, "isready", IsReady())
    if text.startswith("newgame"):
        return _exactly(text, "newgame", NewGame())
    if text.startswith("setposition "):
        return SetPosition(text[len("setposition "):])
    if text.startswith("setoption name "):
        return _parse_set_option(text[len("setoption name "):])
    if text.startswith("makemove "):
        return MakeMove(text[len("makemove "):])
    if text.startswith("go ponder"):
        return _exactly(text, "go ponder", Go(ponder=True))
    if text.startswith("go"):
        return _exactly(text, "go", Go(ponder=False))
    if text.startswith("stop"):
        return _exactly(text, "stop", Stop())
    if text.startswith("quit"):
        return _exactly(text, "quit", Quit())
    raise ParseError(f"unknown command: {text!r}")