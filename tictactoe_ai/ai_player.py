"""
Hard difficulty for the TicTacToe engine.
Uses the Minimax algorithm to choose the best move.

The search runs on bitmasks (bit i set = that player holds cell i) rather
than Board objects, so the full tree from an empty board takes a fraction
of a second.
"""

import logging
from typing import Dict, Tuple

from .board import BOARD_CELLS, Board, Player
from .config import EngineConfig
from .errors import NoLegalMoveError
from .win_checker import WINNING_LINES, GameStatus, WinChecker

logger = logging.getLogger(__name__)


_BITS: Tuple[int, ...] = tuple(1 << index for index in range(BOARD_CELLS))

_FULL_MASK = (1 << BOARD_CELLS) - 1

_LINE_MASKS: Tuple[int, ...] = tuple(_BITS[a] | _BITS[b] | _BITS[c] for a, b, c in WINNING_LINES)

# For every set of cells held by one player: does it contain a full line?
_HAS_LINE: Tuple[bool, ...] = tuple(
    any(held & line == line for line in _LINE_MASKS)
    for held in range(_FULL_MASK + 1)
)

# Empty cells (ascending) for every mask of free cells
_FREE_CELLS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(index for index in range(BOARD_CELLS) if free & _BITS[index])
    for free in range(_FULL_MASK + 1)
)


def _mask(board: Board, player: Player) -> int:
    mask = 0
    for index, cell in enumerate(board.cells):
        if cell == player:
            mask |= _BITS[index]
    return mask


class MinimaxSearch:
    """
    Plays TicTacToe using the Minimax algorithm.

    The search walks the whole remaining game tree (at most 9 plies, no
    pruning), so the chosen move will win if a win can be forced and will
    never lose (at worst, draw).
    """

    def __init__(self, player: Player = Player.O):
        """
        Initialize the search.

        Args:
            player: Which player the search plays for (default: O)
        """
        self.player = player
        self.win_checker = WinChecker()

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Ties are broken in favour of the lowest index.

        Args:
            board: Current board, the searching player to move.

        Returns:
            Index of the best move.

        Raises:
            NoLegalMoveError: if the board is full.
        """
        scores = self.score_moves(board)

        best_move = None
        best_score = float('-inf')
        for index, score in scores.items():
            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "Minimax for %s evaluated %d positions. Best move: %d (score: %d)",
            self.player.value, self.positions_evaluated, best_move, best_score
        )
        return best_move

    def score_moves(self, board: Board) -> Dict[int, int]:
        """
        Score every legal move for the searching player.

        Args:
            board: Current board, the searching player to move.

        Returns:
            {index: minimax score}, in ascending index order.

        Raises:
            NoLegalMoveError: if the board is full.
        """
        self.positions_evaluated = 0

        valid_moves = board.empty_indices()
        if not valid_moves:
            raise NoLegalMoveError()

        # A board that is already won stays won whatever is played
        outcome = self.win_checker.evaluate(board)
        if outcome.status == GameStatus.WON:
            self.positions_evaluated = len(valid_moves)
            score = (
                EngineConfig.WIN_SCORE if outcome.winner == self.player
                else EngineConfig.LOSS_SCORE
            )
            return {index: score for index in valid_moves}

        mine = _mask(board, self.player)
        theirs = _mask(board, self.player.opposite())
        free = _FULL_MASK & ~(mine | theirs)

        self.positions_evaluated = len(valid_moves)
        return {
            index: self._score_move(mine, theirs, free, index, True)
            for index in valid_moves
        }

    def _score_move(self, mover: int, other: int, free: int, index: int, maximizing: bool) -> int:
        """
        Score the mover playing index, from the searching player's point of view.

        Args:
            mover: Cells held by the player to move.
            other: Cells held by the other player.
            free: Empty cells.
            index: Cell the mover plays.
            maximizing: True if the mover is the searching player.

        Returns:
            WIN_SCORE, LOSS_SCORE or DRAW_SCORE under best play by both sides.
        """
        placed = mover | _BITS[index]
        # The search stops at the first line, so any line here is the new one
        if _HAS_LINE[placed]:
            return EngineConfig.WIN_SCORE if maximizing else EngineConfig.LOSS_SCORE

        remaining = free & ~_BITS[index]
        if not remaining:
            return EngineConfig.DRAW_SCORE

        replies = _FREE_CELLS[remaining]
        self.positions_evaluated += len(replies)
        scores = [
            self._score_move(other, placed, remaining, reply, not maximizing)
            for reply in replies
        ]

        # The reply is made by the other player
        if maximizing:
            return min(scores)
        return max(scores)


def minimax_move(board: Board, side: Player) -> int:
    """Hard difficulty: the optimal move for side."""
    return MinimaxSearch(side).get_best_move(board)
