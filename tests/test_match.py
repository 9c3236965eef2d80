import asyncio
import random

from tictactoe_ai.board import Board, Player
from tictactoe_ai.decision_engine import DecisionEngine
from tictactoe_ai.match import Match, Score
from tictactoe_ai.strategies import Difficulty
from tictactoe_ai.win_checker import GameStatus


def make_match(difficulty="hard", board=None, think_delay=0.0) -> Match:
    engine = DecisionEngine(
        difficulty=difficulty,
        side="O",
        think_delay=think_delay,
        rng=random.Random(0),
    )
    if board is None:
        return Match(engine=engine)
    return Match(engine=engine, board=Board.from_string(board))


def test_new_match() -> None:
    match = make_match()
    assert match.human_side is Player.X
    assert match.current_player is Player.X
    assert match.status == GameStatus.IN_PROGRESS
    assert match.is_human_turn()
    assert not match.is_engine_turn()
    assert match.score == Score()


def test_player_then_engine_move() -> None:
    match = make_match()
    result = match.make_player_move(4)
    assert result.is_valid
    assert match.board[4] is Player.X
    assert match.is_engine_turn()

    move = asyncio.run(match.make_engine_move())
    assert move in {0, 2, 6, 8}
    assert match.board[move] is Player.O
    assert match.is_human_turn()


def test_player_cannot_move_twice() -> None:
    match = make_match()
    match.make_player_move(0)
    result = match.make_player_move(1)
    assert not result.is_valid
    assert match.board[1] is None


def test_player_cannot_take_occupied_cell() -> None:
    match = make_match(board="XO.......")
    result = match.make_player_move(1)
    assert not result.is_valid
    assert "already taken" in result.error_message


def test_engine_move_only_on_its_turn() -> None:
    match = make_match()
    assert asyncio.run(match.make_engine_move()) is None
    assert match.board == Board.empty()


def test_player_win_is_scored() -> None:
    match = make_match(board="XX.OO....")
    match.make_player_move(2)

    assert match.status == GameStatus.WON
    assert match.winner is Player.X
    assert match.is_game_over
    assert match.score == Score(player=1, computer=0, draws=0)

    result = match.make_player_move(5)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert asyncio.run(match.make_engine_move()) is None


def test_engine_win_is_scored() -> None:
    match = make_match(difficulty="medium", board="XX.OO...X")
    move = asyncio.run(match.make_engine_move())

    assert move == 5
    assert match.winner is Player.O
    assert match.score == Score(player=0, computer=1, draws=0)


def test_draw_is_scored() -> None:
    match = make_match(board="XOXXOOOX.")
    match.make_player_move(8)

    assert match.status == GameStatus.DRAW
    assert match.winner is None
    assert match.score == Score(player=0, computer=0, draws=1)


def test_reset_game_keeps_score_and_reset_all_clears_it() -> None:
    match = make_match(board="XX.OO....")
    match.make_player_move(2)

    match.reset_game()
    assert match.board == Board.empty()
    assert match.status == GameStatus.IN_PROGRESS
    assert match.score.player == 1

    match.reset_all()
    assert match.score == Score()


def test_reset_while_engine_thinks_drops_the_move() -> None:
    match = make_match(think_delay=0.05)
    match.make_player_move(0)

    async def scenario():
        task = asyncio.ensure_future(match.make_engine_move())
        await asyncio.sleep(0)
        match.reset_game()
        return await task

    assert asyncio.run(scenario()) is None
    assert match.board == Board.empty()


def test_set_difficulty() -> None:
    match = make_match(difficulty="easy")
    match.set_difficulty("hard")
    assert match.engine.get_difficulty() is Difficulty.HARD


def test_hard_engine_never_loses_to_random_play() -> None:
    rng = random.Random(1234)
    match = make_match(difficulty="hard")
    for _ in range(5):
        while not match.is_game_over:
            if match.is_human_turn():
                match.make_player_move(rng.choice(match.board.empty_indices()))
            else:
                asyncio.run(match.make_engine_move())
        match.reset_game()

    assert match.score.player == 0
    assert match.score.computer + match.score.draws == 5
