import pytest

from bgkit.aei import (
    Aei,
    AeiOk,
    BestMove,
    Go,
    IdResponse,
    IdType,
    InfoResponse,
    InfoType,
    IsReady,
    LogResponse,
    MakeMove,
    NewGame,
    OptionName,
    ParseError,
    ProtocolVersion,
    Quit,
    ReadyOk,
    SetOption,
    SetPosition,
    Stop,
    TCOptionName,
    parse_command,
)


def test_set_option():
    parsed = parse_command("setoption name opponent_rating value 1325")
    assert parsed == SetOption(OptionName.OPPONENT_RATING, "1325")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("aei", Aei()),
        ("isready", IsReady()),
        ("newgame", NewGame()),
        ("go", Go(ponder=False)),
        ("go ponder", Go(ponder=True)),
        ("stop", Stop()),
        ("quit", Quit()),
        ("setposition g [rrrrrrrr] ", SetPosition("g [rrrrrrrr] ")),
        ("makemove Ed2n Ed3n", MakeMove("Ed2n Ed3n")),
    ],
)
def test_simple_commands(text, expected):
    assert parse_command(text) == expected


def test_set_option_time_control():
    assert parse_command("setoption name tcmove value 30") == SetOption(TCOptionName.TC_MOVE, "30")


def test_set_option_unknown_name_is_string():
    assert parse_command("setoption name hash value 64") == SetOption("hash", "64")


def test_set_option_empty_value():
    assert parse_command("setoption name rated value ") == SetOption(OptionName.RATED, "")


@pytest.mark.parametrize(
    "text",
    ["", "aeix", "go x", "go ponderx", "setoption name rated", "setoption name x foo", "hello", "stop now"],
)
def test_invalid_commands(text):
    with pytest.raises(ParseError):
        parse_command(text)


def test_response_strings():
    assert str(ProtocolVersion()) == "protocol-version 1"
    assert str(AeiOk()) == "aeiok"
    assert str(ReadyOk()) == "readyok"
    assert str(IdResponse(IdType.AUTHOR, "someone")) == "id author someone"
    assert str(BestMove("Ed2n")) == "bestmove Ed2n"
    assert str(InfoResponse(InfoType.CURR_MOVE_NUMBER, "3")) == "info currmovenumber 3"
    assert str(LogResponse("hi there")) == "log hi there"


def test_response_with_newline_rejected():
    with pytest.raises(ValueError):
        LogResponse("two\nlines")
    with pytest.raises(ValueError):
        BestMove("a\nb")