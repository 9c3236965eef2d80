"""
TicTacToe AI
============
A computer opponent for TicTacToe with three difficulty levels:
easy (random), medium (heuristic) and hard (minimax, never loses).

Boards are immutable values: every move returns a new Board.
"""

from .errors import TicTacToeError, IllegalMoveError, NoLegalMoveError, TurnOrderError
from .board import Board, Player, opponent
from .win_checker import WINNING_LINES, GameStatus, Outcome, WinChecker, evaluate
from .strategies import Difficulty, random_move, heuristic_move, find_winning_move
from .ai_player import MinimaxSearch, minimax_move
from .decision_engine import DecisionEngine, create_engine
from .move_validator import MoveValidator, ValidationResult
from .match import Match, Score
from .config import EngineConfig

__version__ = "1.0.0"
