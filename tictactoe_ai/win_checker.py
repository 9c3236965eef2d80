"""
Win checker for the TicTacToe engine.
Classifies a board as won, drawn or still in progress.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board, Player


# All possible winning lines, checked in this order
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class GameStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "playing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board."""
    status: GameStatus
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won(cls, winner: Player, line: Tuple[int, int, int]) -> "Outcome":
        return cls(GameStatus.WON, winner, tuple(line))

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).
    The checker holds no state, so one instance can be shared.
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> Outcome:
        """
        Classify a board.

        The first line in WINNING_LINES order that is complete decides the
        winner. A full board with no line is a draw.

        Args:
            board: The board to check.

        Returns:
            The Outcome.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board.cells, line)
            if winner is not None:
                return Outcome.won(winner, line)

        if board.is_full():
            return Outcome.draw()

        return Outcome.in_progress()

    def check_winner(self, board: Board) -> Optional[Player]:
        """Get the winning Player, or None if nobody has won."""
        return self.evaluate(board).winner

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the first complete line, or None."""
        return self.evaluate(board).line

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has won."""
        return self.evaluate(board).is_draw

    def _check_line(self, cells: Tuple, line: Tuple[int, int, int]) -> Optional[Player]:
        a, b, c = line
        first = cells[a]
        if first is not None and first == cells[b] == cells[c]:
            return first
        return None


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Classify a board with the shared WinChecker."""
    return _checker.evaluate(board)
