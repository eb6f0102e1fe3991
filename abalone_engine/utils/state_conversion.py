"""Utilities for converting between different board representations."""

import numpy as np
from typing import Dict, Optional

from ..game.board import Board
from ..game.constants import Occupant, Player
from ..game.hex_grid import HexGrid, get_grid

GRID_SIZE = 9


class StateConverter:
    """Handles conversion between boards and numpy arrays."""

    # Channel indices for the stacked board array
    CHANNELS: Dict[str, int] = {
        'BLACK': 0,
        'WHITE': 1,
        'VALID_CELLS': 2,
    }

    # Signed values used by the flat vector form
    VECTOR_VALUES: Dict[Occupant, int] = {
        Occupant.EMPTY: 0,
        Occupant.BLACK: 1,
        Occupant.WHITE: -1,
    }

    def __init__(self, grid: Optional[HexGrid] = None):
        self.grid = grid or get_grid()
        self.valid_mask = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.float32)
        for index in self.grid.indices():
            m, y = self.grid.coord_of(index)
            self.valid_mask[y - 1, m - 1] = 1

    def board_to_array(self, board: Board) -> np.ndarray:
        """
        Convert a board to a stacked array.

        Returns:
            np.ndarray of shape (3, 9, 9) containing:
                - Channel 0: Black marbles
                - Channel 1: White marbles
                - Channel 2: Mask of the 61 cells on the board
            Cell (m, y) lives at [y - 1, m - 1].
        """
        state = np.zeros((len(self.CHANNELS), GRID_SIZE, GRID_SIZE), dtype=np.float32)
        for index in self.grid.indices():
            occupant = board.get_occupant(index)
            if occupant == Occupant.EMPTY:
                continue
            m, y = self.grid.coord_of(index)
            state[self.CHANNELS[occupant.name], y - 1, m - 1] = 1
        state[self.CHANNELS['VALID_CELLS']] = self.valid_mask
        return state

    def board_to_vector(self, board: Board) -> np.ndarray:
        """Flat (61,) int8 vector: 1 black, -1 white, 0 empty."""
        return np.array(
            [self.VECTOR_VALUES[board.get_occupant(i)] for i in self.grid.indices()],
            dtype=np.int8,
        )

    def vector_to_board(self, vector: np.ndarray, next_to_move: Player = Player.BLACK) -> Board:
        """Inverse of board_to_vector."""
        if vector.shape != (len(self.grid),):
            raise ValueError(f"Expected vector of shape ({len(self.grid)},), got {vector.shape}")

        by_value = {value: occupant for occupant, value in self.VECTOR_VALUES.items()}
        board = Board(self.grid, next_to_move)
        for index, value in enumerate(vector.tolist()):
            try:
                board.occupants[index] = by_value[value]
            except KeyError:
                raise ValueError(f"Invalid cell value {value} at index {index}") from None
        return board
