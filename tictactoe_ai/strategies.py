"""
Easy and medium move strategies for the TicTacToe engine.

Easy picks any empty cell at random. Medium follows a fixed priority list:
win, block, center, corner, edge. The hard tier (minimax) lives in
ai_player.py.
"""

import random
from enum import Enum
from typing import Optional, Sequence

from .board import Board, Player, opponent
from .config import EngineConfig
from .errors import NoLegalMoveError
from .win_checker import GameStatus, evaluate


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Win / block / center / corner / edge
    HARD = "hard"        # Full minimax

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """
        Turn a Difficulty or its name into a Difficulty.

        Raises:
            ValueError: for unknown levels.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown difficulty {value!r}, expected one of "
            f"{', '.join(level.value for level in cls)}"
        )


def _rng(rng: Optional[random.Random]):
    return rng if rng is not None else random


def random_move(board: Board, side: Player, rng: Optional[random.Random] = None) -> int:
    """
    Easy difficulty: a uniformly random empty cell.

    Args:
        board: Current board.
        side: The player to move (unused, no lookahead).
        rng: Random generator, the module-level one if omitted.

    Returns:
        Index of the chosen cell.

    Raises:
        NoLegalMoveError: if the board is full.
    """
    empty = board.empty_indices()
    if not empty:
        raise NoLegalMoveError()
    return _rng(rng).choice(empty)


def find_winning_move(board: Board, player: Player) -> Optional[int]:
    """
    Find the first cell (ascending) that completes a line for player.

    Returns:
        The index, or None if player can't win in one move.
    """
    for index in board.empty_indices():
        outcome = evaluate(board.apply(index, player))
        if outcome.status == GameStatus.WON and outcome.winner == player:
            return index
    return None


def _pick_free(board: Board, cells: Sequence[int], rng) -> Optional[int]:
    free = [index for index in cells if board.is_legal(index)]
    if not free:
        return None
    return rng.choice(free)


def heuristic_move(board: Board, side: Player, rng: Optional[random.Random] = None) -> int:
    """
    Medium difficulty: basic strategy.

    1. Win if possible
    2. Block the opponent from winning
    3. Take the center if available
    4. Take a random free corner
    5. Take a random free edge
    6. Fall back to a random move

    Raises:
        NoLegalMoveError: if the board is full.
    """
    if board.is_full():
        raise NoLegalMoveError()

    rng = _rng(rng)

    win = find_winning_move(board, side)
    if win is not None:
        return win

    block = find_winning_move(board, opponent(side))
    if block is not None:
        return block

    if board.is_legal(EngineConfig.CENTER):
        return EngineConfig.CENTER

    corner = _pick_free(board, EngineConfig.CORNERS, rng)
    if corner is not None:
        return corner

    edge = _pick_free(board, EngineConfig.EDGES, rng)
    if edge is not None:
        return edge

    # Unreachable on a 3x3 board with an empty cell
    return random_move(board, side, rng)
