"""
Match state for a human vs. engine series of games.
Tracks the board, whose turn it is, the result and the running score.
"""

import logging
from typing import Optional
from dataclasses import dataclass, field

from .board import Board, Player
from .decision_engine import DecisionEngine
from .move_validator import MoveValidator, ValidationResult
from .win_checker import GameStatus, Outcome, evaluate

logger = logging.getLogger(__name__)


@dataclass
class Score:
    """Games won by each side, and draws."""
    player: int = 0
    computer: int = 0
    draws: int = 0


@dataclass
class Match:
    """
    A series of games between a person and the engine.

    The board is replaced, never edited, after each move. Scores are
    kept across reset_game() and cleared by reset_all().
    """

    engine: DecisionEngine = field(default_factory=DecisionEngine)
    board: Board = field(default_factory=Board.empty)
    outcome: Outcome = field(default_factory=Outcome.in_progress)
    score: Score = field(default_factory=Score)
    validator: MoveValidator = field(default_factory=MoveValidator)

    @property
    def human_side(self) -> Player:
        return self.engine.get_side().opposite()

    @property
    def current_player(self) -> Optional[Player]:
        return self.board.side_to_move()

    @property
    def status(self) -> GameStatus:
        return self.outcome.status

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    def is_human_turn(self) -> bool:
        return not self.is_game_over and self.current_player == self.human_side

    def is_engine_turn(self) -> bool:
        return not self.is_game_over and self.current_player == self.engine.get_side()

    def make_player_move(self, index: int) -> ValidationResult:
        """
        Play the person's move.

        Args:
            index: Cell index (0-8).

        Returns:
            ValidationResult, invalid when the move was refused.
        """
        if not self.is_game_over and not self.is_human_turn():
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the computer to move!"
            )

        result = self.validator.validate_move(self.board, index, self.outcome)
        if not result.is_valid:
            return result

        self._play(index, self.human_side)
        return result

    async def make_engine_move(self) -> Optional[int]:
        """
        Ask the engine for a move and play it.

        Returns:
            The index played, or None if it wasn't the engine's turn or the
            game was reset while the engine was thinking.
        """
        if not self.is_engine_turn():
            return None

        board = self.board
        move = await self.engine.request_move(board)

        # Double-check the board hasn't changed while we waited
        if self.board is not board or not self.is_engine_turn():
            logger.info("Board changed during engine move, dropping move %d", move)
            return None

        self._play(move, self.engine.get_side())
        return move

    def reset_game(self) -> None:
        """Start a new game, keeping the score."""
        self.board = Board.empty()
        self.outcome = Outcome.in_progress()

    def reset_all(self) -> None:
        """Start a new game and clear the score."""
        self.reset_game()
        self.score = Score()

    def set_difficulty(self, difficulty) -> None:
        self.engine.set_difficulty(difficulty)

    def _play(self, index: int, player: Player) -> None:
        self.board = self.board.apply(index, player)
        self.outcome = evaluate(self.board)

        if not self.outcome.is_over:
            return

        if self.outcome.winner == self.human_side:
            self.score.player += 1
        elif self.outcome.winner is not None:
            self.score.computer += 1
        else:
            self.score.draws += 1
        logger.info("Game over: %s, score now %s", self.outcome.status.value, self.score)
