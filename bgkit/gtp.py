"""Commands and responses of the Go Text Protocol (GTP)."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional, Tuple

_U64_MAX = (1 << 64) - 1
_ID_PATTERN = re.compile(r"\+?[0-9]+")


class InvalidCommand(ValueError):
    """Raised when a line cannot be split into an id, a name and arguments."""


class UnknownCommand(ValueError):
    """Raised for a command name that is not supported."""


class UnknownStatus(ValueError):
    """Raised for a final status that is not supported."""


def _parse_id(token: str) -> Optional[int]:
    if not _ID_PATTERN.fullmatch(token):
        return None
    value = int(token)
    return value if value <= _U64_MAX else None


@dataclass(frozen=True)
class Command:
    """A raw command line: an optional numeric id, a name and its arguments."""

    id: Optional[int]
    name: str
    args: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Command:
        """Split a line on single spaces; raises InvalidCommand if there is no name."""
        tokens = text.split(" ")
        command_id = _parse_id(tokens[0])
        if command_id is not None:
            tokens = tokens[1:]
        if not tokens:
            raise InvalidCommand(f"missing command name in {text!r}")
        return cls(command_id, tokens[0], tuple(tokens[1:]))


class CommandKind(enum.Enum):
    """The supported commands, by protocol name."""

    NAME = "name"
    PROTOCOL_VERSION = "protocol_version"
    VERSION = "version"
    KNOWN_COMMAND = "known_command"
    LIST_COMMANDS = "list_commands"
    QUIT = "quit"
    BOARD_SIZE = "boardsize"
    CLEAR_BOARD = "clear_board"
    KOMI = "komi"
    PLAY = "play"
    GEN_MOVE = "genmove"
    UNDO = "undo"
    TIME_SETTINGS = "time_settings"
    TIME_LEFT = "time_left"
    FINAL_SCORE = "final_score"
    FINAL_STATUS_LIST = "final_status_list"
    SHOW_BOARD = "showboard"

    @classmethod
    def from_name(cls, name: str) -> CommandKind:
        try:
            return cls(name)
        except ValueError:
            raise UnknownCommand(f"unknown command {name!r}") from None

    def __str__(self) -> str:
        return self.value


class FinalStatusKind(enum.Enum):
    """The stone statuses that final_status_list can be asked about."""

    ALIVE = "alive"
    DEAD = "dead"
    SEKI = "seki"

    @classmethod
    def parse(cls, text: str) -> FinalStatusKind:
        try:
            return cls(text)
        except ValueError:
            raise UnknownStatus(f"unknown status {text!r}") from None


@dataclass(frozen=True)
class Response:
    """A reply to a command: a success with optional content, or a failure when `error` is set."""

    id: Optional[int] = None
    content: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.content is not None:
            raise ValueError("a response is either a success or a failure, not both")
        message = self.error if self.error is not None else self.content
        if message is not None and "\n\n" in message:
            raise ValueError("a response cannot contain two consecutive newlines")

    def __str__(self) -> str:
        id_text = "" if self.id is None else str(self.id)
        if self.error is not None:
            return f"?{id_text} {self.error}\n\n"
        if self.content is not None:
            return f"={id_text} {self.content}\n\n"
        return f"={id_text}\n\n"