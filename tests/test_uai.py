import pytest

from bgkit.uai import (
    ClockTime,
    FenPosition,
    Go,
    IsReady,
    Moves,
    MoveTime,
    NewGame,
    ParseError,
    PositionCommand,
    Print,
    Quit,
    SetOption,
    StartPos,
    Takeback,
    Uai,
    parse_command,
)

FEN = "x5o/2o2o1/7/7/4x2/5xx/o6 x 1 4"


def test_basics():
    assert parse_command("uai") == Uai()
    assert parse_command("isready") == IsReady()
    assert parse_command("uainewgame") == NewGame()
    assert parse_command("quit") == Quit()


def test_moves():
    assert parse_command("moves a b c") == Moves("a b c")


def test_position():
    assert parse_command("position startpos") == PositionCommand(StartPos(), None)
    assert parse_command(f"position fen {FEN}") == PositionCommand(FenPosition(FEN), None)


def test_position_moves():
    assert parse_command("position startpos moves a b c") == PositionCommand(StartPos(), "a b c")
    assert parse_command(f"position fen {FEN} moves a b c") == PositionCommand(FenPosition(FEN), "a b c")


def test_print_and_takeback():
    assert parse_command("print") == Print()
    assert parse_command("d") == Print()
    assert parse_command("takeback") == Takeback()


def test_go_movetime():
    assert parse_command("go movetime 1500") == Go(MoveTime(1500))


def test_go_clock():
    command = parse_command("go btime 60000 wtime 50000 binc 100 winc 200")
    assert command == Go(ClockTime(b_time=60000, w_time=50000, b_inc=100, w_inc=200))


def test_set_option():
    assert parse_command("setoption name Hash value 128 MB") == SetOption("Hash", "128 MB")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "uaix",
        "dd",
        "position startposx",
        "position startpos moves",
        f"position fen {FEN} moves",
        "go",
        "go movetime",
        "go movetime 12a",
        "go movetime 4294967296",
        "go btime 1 wtime 2",
        "setoption name Hash",
        "setoption Hash value 1",
        "hello",
    ],
)
def test_invalid_commands(text):
    with pytest.raises(ParseError):
        parse_command(text)


def test_go_movetime_max_u32():
    assert parse_command("go movetime 4294967295") == Go(MoveTime(4294967295))