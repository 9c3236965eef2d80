import random

from main import ConsoleGame
from tictactoe_ai.board import Board, Player
from tictactoe_ai.config import EngineConfig
from tictactoe_ai.decision_engine import DecisionEngine
from tictactoe_ai.match import Match
from tictactoe_ai.strategies import Difficulty


def make_game(board: str = ".........") -> ConsoleGame:
    engine = DecisionEngine(difficulty="easy", side="O", think_delay=0.0, rng=random.Random(0))
    return ConsoleGame(Match(engine=engine, board=Board.from_string(board)))


def test_move_command_places_a_mark() -> None:
    game = make_game()
    game._handle_command("5")
    assert game.match.board[4] is Player.X


def test_bad_move_is_reported(capsys) -> None:
    game = make_game()
    game._handle_command("banana")
    assert "Can't read" in capsys.readouterr().out
    assert str(game.match.board) == "........."


def test_difficulty_command(capsys) -> None:
    game = make_game()
    game._handle_command("d hard")
    assert game.match.engine.get_difficulty() is Difficulty.HARD

    game._handle_command("d nightmare")
    assert "Unknown difficulty" in capsys.readouterr().out
    assert game.match.engine.get_difficulty() is Difficulty.HARD


def test_hint_command(capsys) -> None:
    game = make_game("XX.OO....")
    game._handle_command("h")
    assert "Hint: play 3 (3:win" in capsys.readouterr().out


def test_reset_and_quit_commands() -> None:
    game = make_game()
    game._handle_command("1")
    game._handle_command("r")
    assert str(game.match.board) == "........."

    game.is_running = True
    game._handle_command("q")
    assert not game.is_running


def test_hint_labels_follow_configured_scores(monkeypatch, capsys) -> None:
    monkeypatch.setattr(EngineConfig, "WIN_SCORE", 100)
    monkeypatch.setattr(EngineConfig, "LOSS_SCORE", -100)
    game = make_game("XX.OO....")
    game._handle_command("h")
    out = capsys.readouterr().out
    assert "Hint: play 3 (3:win" in out
    assert "100" not in out


def test_engine_turn_plays_a_move(capsys) -> None:
    game = make_game("X........")
    game._engine_turn()
    assert game.match.board.count(Player.O) == 1
    assert "Computer plays" in capsys.readouterr().out
