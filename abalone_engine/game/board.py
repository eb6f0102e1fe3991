"""Board state for Abalone."""

from typing import List, Optional, Union
import numpy as np
import logging

from .constants import NUM_CELLS, ROW_LETTERS, Occupant, Player
from .hex_grid import HexGrid, get_grid
from .notation import notation_to_index

# Setup logger
logger = logging.getLogger(__name__)


class Board:
    """Occupancy of the 61 cells plus the side to move next."""

    def __init__(self, grid: Optional[HexGrid] = None, next_to_move: Player = Player.BLACK):
        self.grid = grid or get_grid()
        self.occupants: List[Occupant] = [Occupant.EMPTY] * NUM_CELLS
        self.next_to_move = next_to_move

    @classmethod
    def from_layout(cls, name: str, next_to_move: Player = Player.BLACK) -> 'Board':
        """Create a board holding one of the named starting layouts."""
        from .layouts import apply_layout
        board = cls(next_to_move=next_to_move)
        apply_layout(board, name)
        return board

    @classmethod
    def from_file(cls, path: str) -> 'Board':
        """Load a board from a two-line board description file."""
        from .loaders import load_board
        return load_board(path)

    def copy(self) -> 'Board':
        """Create an independent copy sharing only the grid."""
        new_board = Board(self.grid, self.next_to_move)
        new_board.occupants = self.occupants.copy()
        return new_board

    def get_occupant(self, index: int) -> Occupant:
        """Get the occupant of a cell; out-of-range indices read as EMPTY."""
        if not self.grid.is_valid_index(index):
            return Occupant.EMPTY
        return self.occupants[index]

    def set_occupant(self, cell: Union[int, str], occupant: Occupant) -> bool:
        """Set a cell by index or notation.

        Bad input is logged and ignored so that best-effort loaders can keep
        going; the return value says whether the board changed.
        """
        if isinstance(cell, str):
            index = notation_to_index(cell, self.grid)
            if index is None:
                logger.warning(f"Ignoring invalid cell notation: {cell!r}")
                return False
        else:
            index = cell
            if not self.grid.is_valid_index(index):
                logger.warning(f"Ignoring out-of-range cell index: {cell!r}")
                return False

        self.occupants[index] = occupant
        return True

    def clear(self):
        self.occupants = [Occupant.EMPTY] * NUM_CELLS

    def positions(self, player: Player) -> List[int]:
        """Cell indices holding the player's marbles, in index order."""
        marble = player.marble
        return [i for i, occupant in enumerate(self.occupants) if occupant == marble]

    def count(self, player: Player) -> int:
        return self.occupants.count(player.marble)

    def is_empty(self, index: int) -> bool:
        """Check if a cell is on the board and unoccupied."""
        return self.grid.is_valid_index(index) and self.occupants[index] == Occupant.EMPTY

    def to_numpy_array(self) -> np.ndarray:
        """Convert board state to a (3, 9, 9) numpy array."""
        from ..utils.state_conversion import StateConverter
        return StateConverter().board_to_array(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.occupants == other.occupants

    def __hash__(self) -> int:
        return hash(tuple(self.occupants))

    def __repr__(self) -> str:
        return (f"Board(next_to_move={self.next_to_move.name}, "
                f"black={self.count(Player.BLACK)}, white={self.count(Player.WHITE)})")

    def __str__(self) -> str:
        """Return a hex diagram, row I at the top."""
        # Indices run row by row, so each row fills left to right
        rows = {}
        for index in self.grid.indices():
            _, y = self.grid.coord_of(index)
            rows.setdefault(y, []).append(self.occupants[index].value)

        result = []
        for y in sorted(rows, reverse=True):
            cells = rows[y]
            indent = " " * abs(5 - y)
            result.append(f"{ROW_LETTERS[y - 1]} {indent}{' '.join(cells)}")
        result.append(f"Next to move: {self.next_to_move.name}")
        return "\n".join(result)
