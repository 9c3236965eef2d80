"""
Decision engine for the TicTacToe AI.
Holds the difficulty and side, and hands out moves.
"""

import asyncio
import logging
import random
from typing import Optional

from .ai_player import minimax_move
from .board import Board, Player
from .config import EngineConfig
from .errors import TurnOrderError
from .strategies import Difficulty, heuristic_move, random_move

logger = logging.getLogger(__name__)


class DecisionEngine:
    """
    The computer opponent.

    choose_move() is the synchronous core. request_move() wraps it with the
    think delay callers await. One request at a time per engine: the caller
    must await a request before sending the next one.
    """

    def __init__(
        self,
        difficulty=EngineConfig.DEFAULT_DIFFICULTY,
        side=EngineConfig.ENGINE_SIDE,
        think_delay: float = EngineConfig.THINK_DELAY_SECONDS,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the engine.

        Args:
            difficulty: Difficulty or its name ("easy", "medium", "hard").
            side: Player or letter the engine plays.
            think_delay: Seconds request_move() waits before answering.
            rng: Random generator for the easy and medium tiers.
        """
        self.difficulty = Difficulty.parse(difficulty)
        self.side = Player.parse(side)
        self.think_delay = think_delay
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, board: Board) -> int:
        """
        Pick a move without any delay.

        Args:
            board: Current board. Not modified.

        Returns:
            Index of an empty cell.

        Raises:
            TurnOrderError: if it's not the engine's turn on this board.
            NoLegalMoveError: if the board is full.
        """
        self._check_turn(board)
        return self._select(board, self.difficulty, self.side)

    async def request_move(self, board: Board) -> int:
        """
        Pick a move, then wait think_delay seconds before returning it.

        The search runs in the loop's default executor so the event loop
        keeps running. Cancelling the awaiting task yields no move at once;
        the board is untouched either way. Difficulty and side are read when
        the request starts.
        """
        self._check_turn(board)
        difficulty = self.difficulty
        side = self.side

        loop = asyncio.get_running_loop()
        move = await loop.run_in_executor(None, self._select, board, difficulty, side)

        if self.think_delay > 0:
            await asyncio.sleep(self.think_delay)
        return move

    def _check_turn(self, board: Board) -> None:
        to_move = board.side_to_move()
        if to_move != self.side:
            raise TurnOrderError(self.side, to_move)

    def _select(self, board: Board, difficulty: Difficulty, side: Player) -> int:
        if difficulty == Difficulty.EASY:
            move = random_move(board, side, self.rng)
        elif difficulty == Difficulty.MEDIUM:
            move = heuristic_move(board, side, self.rng)
        else:
            move = minimax_move(board, side)

        logger.debug("%s (%s) chose %d on %s", side.value, difficulty.value, move, board)
        return move

    def set_difficulty(self, difficulty) -> None:
        """Set difficulty level, used from the next request on."""
        self.difficulty = Difficulty.parse(difficulty)
        logger.info("Difficulty set to %s", self.difficulty.value)

    def get_difficulty(self) -> Difficulty:
        """Get current difficulty level."""
        return self.difficulty

    def set_side(self, side) -> None:
        """Set the player the engine plays."""
        self.side = Player.parse(side)

    def get_side(self) -> Player:
        """Get the player the engine plays."""
        return self.side


def create_engine(
    difficulty=EngineConfig.DEFAULT_DIFFICULTY,
    side=EngineConfig.ENGINE_SIDE,
    **kwargs
) -> DecisionEngine:
    """Create a new engine instance."""
    return DecisionEngine(difficulty=difficulty, side=side, **kwargs)
