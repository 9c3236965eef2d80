"""
Errors raised by the TicTacToe engine.
"""


class TicTacToeError(Exception):
    """Base class for every engine error."""


class IllegalMoveError(TicTacToeError, ValueError):
    """Raised when a mark is placed on an occupied or off-board cell."""

    def __init__(self, index, board=None):
        self.index = index
        self.board = board
        if board is None:
            message = f"Illegal move at index {index!r}"
        else:
            message = f"Illegal move at index {index!r} on board {board}"
        super().__init__(message)


class NoLegalMoveError(TicTacToeError):
    """Raised when a strategy is asked to move on a full board."""

    def __init__(self, message: str = "No valid moves available"):
        super().__init__(message)


class TurnOrderError(TicTacToeError):
    """Raised when the engine is asked to move out of turn."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        actual_name = actual.value if actual is not None else "nobody (inconsistent board)"
        super().__init__(
            f"It's not {expected.value}'s turn, the board says {actual_name} moves next"
        )
