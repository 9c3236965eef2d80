"""
Move validator for the TicTacToe engine.
Checks human input before it reaches the board.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board
from .win_checker import Outcome, evaluate


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves coming from a person.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells

    Unlike Board.apply(), mistakes here are reported, not raised.
    """

    def validate_move(
        self,
        board: Board,
        index: int,
        outcome: Optional[Outcome] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place a mark on (0-8).
            outcome: Already computed outcome of board, evaluated if omitted.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if outcome is None:
            outcome = evaluate(board)

        if outcome.is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not isinstance(index, int) or not 0 <= index <= 8:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-8."
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index + 1} is already taken by {board[index].value}"
            )

        return ValidationResult(is_valid=True, index=index)

    def parse_index(self, text: str) -> ValidationResult:
        """
        Turn console input into a cell index.

        Accepts keypad numbers "1"-"9" or "row,col" with rows and
        columns counted from 0.

        Returns:
            ValidationResult carrying the index when parsing worked.
        """
        text = text.strip()

        if "," in text:
            parts = [part.strip() for part in text.split(",")]
            if len(parts) != 2 or not all(part.isdigit() for part in parts):
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Can't read {text!r}. Use row,col like 1,2"
                )
            row, col = int(parts[0]), int(parts[1])
            if not (0 <= row <= 2 and 0 <= col <= 2):
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Invalid position ({row}, {col}). Must be 0-2."
                )
            return ValidationResult(is_valid=True, index=row * 3 + col)

        if text.isdigit() and 1 <= int(text) <= 9:
            return ValidationResult(is_valid=True, index=int(text) - 1)

        return ValidationResult(
            is_valid=False,
            error_message=f"Can't read {text!r}. Enter a cell number 1-9"
        )
