import pytest

from tictactoe_ai.board import Board, Player, opponent
from tictactoe_ai.errors import IllegalMoveError


def test_empty_board() -> None:
    board = Board.empty()
    assert len(board) == 9
    assert list(board) == [None] * 9
    assert board.empty_indices() == list(range(9))
    assert not board.is_full()
    assert str(board) == "........."


def test_apply_returns_new_board_and_keeps_original() -> None:
    board = Board.empty()
    after = board.apply(4, Player.X)

    assert after[4] is Player.X
    assert board[4] is None
    assert after is not board
    assert after.empty_indices() == [0, 1, 2, 3, 5, 6, 7, 8]


def test_apply_on_occupied_cell_raises() -> None:
    board = Board.empty().apply(0, Player.X)
    with pytest.raises(IllegalMoveError) as excinfo:
        board.apply(0, Player.O)
    assert excinfo.value.index == 0
    assert board[0] is Player.X


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_apply_off_board_raises(index: int) -> None:
    with pytest.raises(IllegalMoveError):
        Board.empty().apply(index, Player.X)


def test_is_legal() -> None:
    board = Board.from_string("X........")
    assert not board.is_legal(0)
    assert board.is_legal(1)
    assert board.is_legal(8)
    assert not board.is_legal(-1)
    assert not board.is_legal(9)
    assert not board.is_legal(True)


def test_board_length_is_enforced() -> None:
    with pytest.raises(ValueError):
        Board((None,) * 8)
    with pytest.raises(ValueError):
        Board(("X",) + (None,) * 8)


def test_from_string_and_str() -> None:
    board = Board.from_string("XX./O../...")
    assert board[0] is Player.X
    assert board[1] is Player.X
    assert board[3] is Player.O
    assert str(board) == "XX.O....."
    assert Board.from_string(str(board)) == board

    with pytest.raises(ValueError):
        Board.from_string("XX.O....Z")


def test_is_full() -> None:
    assert Board.from_string("XOXXOOOXX").is_full()
    assert not Board.from_string("XOXXOOOX.").is_full()


def test_side_to_move_follows_mark_counts() -> None:
    assert Board.empty().side_to_move() is Player.X
    assert Board.from_string("X........").side_to_move() is Player.O
    assert Board.from_string("XO.......").side_to_move() is Player.X
    assert Board.from_string("XX.......").side_to_move() is None
    assert Board.from_string("O........").side_to_move() is None


def test_opponent_is_an_involution() -> None:
    for player in Player:
        assert opponent(player) is not player
        assert opponent(opponent(player)) is player
        assert player.opposite().opposite() is player


def test_player_parse() -> None:
    assert Player.parse("o") is Player.O
    assert Player.parse(Player.X) is Player.X
    with pytest.raises(ValueError):
        Player.parse("Z")


def test_grid_and_render() -> None:
    board = Board.from_string("X...O....")
    assert board.to_grid() == [
        [Player.X, None, None],
        [None, Player.O, None],
        [None, None, None],
    ]
    text = board.render()
    assert " X │ 2 │ 3 │" in text
    assert " 4 │ O │ 6 │" in text


def test_apply_rejects_a_non_player_mark() -> None:
    with pytest.raises(ValueError):
        Board.empty().apply(0, "X")


def test_applied_board_matches_a_checked_board() -> None:
    after = Board.from_string("X........").apply(4, Player.O)
    assert after == Board.from_string("X...O....")
    assert hash(after) == hash(Board.from_string("X...O...."))
    assert isinstance(after.cells, tuple)
