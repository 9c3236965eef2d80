"""
Board model for the TicTacToe engine.
Holds the 9 cells, the two players and move legality.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

from .errors import IllegalMoveError


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @classmethod
    def parse(cls, value) -> "Player":
        """
        Turn a Player or its letter into a Player.

        Raises:
            ValueError: if the value names no player.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().upper() in ("X", "O"):
            return cls(value.strip().upper())
        raise ValueError(f"Unknown player: {value!r}")


def opponent(player: Player) -> Player:
    """Module-level alias of Player.opposite()."""
    return player.opposite()


# A cell is either empty (None) or holds a player's mark
Cell = Optional[Player]

BOARD_CELLS = 9

_SYMBOLS = {None: ".", Player.X: "X", Player.O: "O"}


@dataclass(frozen=True)
class Board:
    """
    An immutable 3x3 board.

    Cells are stored row-major:

         0 | 1 | 2
         3 | 4 | 5
         6 | 7 | 8

    Every move returns a new Board, the original is never touched.
    """

    cells: Tuple[Cell, ...] = field(default=(None,) * BOARD_CELLS)

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != BOARD_CELLS:
            raise ValueError(f"A board has {BOARD_CELLS} cells, got {len(cells)}")
        for cell in cells:
            if cell is not None and not isinstance(cell, Player):
                raise ValueError(f"Invalid cell value: {cell!r}")
        # frozen dataclass: normalise lists into a tuple
        object.__setattr__(self, "cells", cells)

    @classmethod
    def _from_trusted(cls, cells: Tuple[Cell, ...]) -> "Board":
        """Wrap a 9-tuple already known to be valid, skipping the checks."""
        board = object.__new__(cls)
        object.__setattr__(board, "cells", cells)
        return board

    @classmethod
    def empty(cls) -> "Board":
        """Create a fresh empty board."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from text such as "XX.O.....".

        Whitespace, "|" and "/" are ignored so "XX./O../..." also works.
        "." "_" and "-" mark empty cells.
        """
        cells: List[Cell] = []
        for char in text:
            if char.isspace() or char in "|/":
                continue
            upper = char.upper()
            if upper in ("X", "O"):
                cells.append(Player(upper))
            elif char in "._-":
                cells.append(None)
            else:
                raise ValueError(f"Invalid board character: {char!r}")
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __str__(self) -> str:
        return "".join(_SYMBOLS[cell] for cell in self.cells)

    def is_legal(self, index: int) -> bool:
        """Check that index is on the board and the cell is empty."""
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < BOARD_CELLS and self.cells[index] is None

    def apply(self, index: int, player: Player) -> "Board":
        """
        Place a mark and return the resulting board.

        Args:
            index: Cell index (0-8).
            player: Whose mark to place.

        Returns:
            A new Board with the mark placed.

        Raises:
            IllegalMoveError: if the cell is occupied or off the board.
        """
        if not self.is_legal(index):
            raise IllegalMoveError(index, self)
        if not isinstance(player, Player):
            raise ValueError(f"Invalid player: {player!r}")
        return Board._from_trusted(self.cells[:index] + (player,) + self.cells[index + 1:])

    def empty_indices(self) -> List[int]:
        """Get all empty cell indices, in ascending order."""
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return None not in self.cells

    def count(self, player: Player) -> int:
        """How many marks a player has placed."""
        return self.cells.count(player)

    def side_to_move(self) -> Optional[Player]:
        """
        Work out whose turn it is from the mark counts.

        Returns:
            X when both players have placed the same number of marks,
            O when X is one ahead, None for any other (unreachable) count.
        """
        x_count = self.count(Player.X)
        o_count = self.count(Player.O)
        if x_count == o_count:
            return Player.X
        if x_count == o_count + 1:
            return Player.O
        return None

    def to_grid(self) -> List[List[Cell]]:
        """The board as 3 rows of 3 cells."""
        return [list(self.cells[row * 3:row * 3 + 3]) for row in range(3)]

    def render(self) -> str:
        """Draw the board as a text grid, empty cells show their keypad number."""
        lines = ["┌───┬───┬───┐"]
        for row in range(3):
            row_str = "│"
            for col in range(3):
                index = row * 3 + col
                cell = self.cells[index]
                mark = str(index + 1) if cell is None else cell.value
                row_str += f" {mark} │"
            lines.append(row_str)
            if row < 2:
                lines.append("├───┼───┼───┤")
        lines.append("└───┴───┴───┘")
        return "\n".join(lines)
