"""Game logic package for Abalone."""

from .constants import Player, Occupant, NUM_CELLS, MAX_GROUP_SIZE
from .types import Direction, Group, Move
from .hex_grid import HexGrid, BoardConfigurationError, get_grid
from .board import Board
from .applier import MoveApplier, IllegalMoveError, IllegalMoveReason
from .moves import MoveGenerator
from .notation import (
    NotationError,
    notation_to_index,
    index_to_notation,
    move_to_notation,
    parse_move_notation,
    board_to_string,
)
from .loaders import BoardFileError, load_board, parse_board_text
from .layouts import LAYOUTS, apply_layout

__all__ = [
    'Player',
    'Occupant',
    'NUM_CELLS',
    'MAX_GROUP_SIZE',
    'Direction',
    'Group',
    'Move',
    'HexGrid',
    'BoardConfigurationError',
    'get_grid',
    'Board',
    'MoveApplier',
    'IllegalMoveError',
    'IllegalMoveReason',
    'MoveGenerator',
    'NotationError',
    'notation_to_index',
    'index_to_notation',
    'move_to_notation',
    'parse_move_notation',
    'board_to_string',
    'BoardFileError',
    'load_board',
    'parse_board_text',
    'LAYOUTS',
    'apply_layout',
]
