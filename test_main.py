"""
End-to-end tests for the console game.
"""

import pytest

from logic.board import Mark
from logic.errors import GameAlreadyOver
from logic.win_checker import DRAW, Win
from main import ConsoleGame, main


def scripted_input(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_x_wins(monkeypatch, capsys):
    scripted_input(monkeypatch, ["1A", "2A", "1B", "2B", "1C"])

    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.count("Current piece: x") == 3
    assert out.count("Current piece: o") == 2
    assert " 1 x x x\n 2 o o ▢\n 3 ▢ ▢ ▢\n" in out
    assert out.rstrip().endswith("x wins!")


def test_draw(monkeypatch, capsys):
    scripted_input(monkeypatch, ["1A", "1B", "1C", "2B", "2A", "2C", "3B", "3A", "3C"])

    assert main([]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Tie!")


def test_occupied_cell_reprompts(monkeypatch, capsys):
    scripted_input(monkeypatch, ["1A", "1a", "2A", "3C", "2B", "1B", "2C"])

    game = ConsoleGame()
    assert game.play() == Win(Mark.O)

    captured = capsys.readouterr()
    assert "The tile at position 1A already has piece x in it!" in captured.err
    assert captured.out.rstrip().endswith("o wins!")


def test_bad_text_reprompts(monkeypatch, capsys):
    scripted_input(monkeypatch, ["nope", "1A", "2A", "1B", "2B", "1C"])

    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Invalid move: 'nope'. Please try again." in captured.err
    assert "x wins!" in captured.out


def test_end_of_input_exits_cleanly(monkeypatch, capsys):
    scripted_input(monkeypatch, ["1A"])

    assert main([]) == 0
    assert "wins!" not in capsys.readouterr().out


def test_interrupt_exits_cleanly(monkeypatch, capsys):
    def interrupted(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)

    assert main([]) == 0
    assert "Game interrupted by user." in capsys.readouterr().out


def test_console_game_with_custom_reader(capsys):
    moves = iter([(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)])
    shown = []

    game = ConsoleGame(read=lambda: next(moves), show=shown.append)

    assert game.play() == DRAW
    assert len(shown) == 10  # before each of the 9 moves, plus the final board
    assert shown[-1].is_full()
    assert capsys.readouterr().out.rstrip().endswith("Tie!")

    with pytest.raises(GameAlreadyOver):
        game.game_state.make_move((0, 0))


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "1A" in capsys.readouterr().out
