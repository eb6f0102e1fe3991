"""Loader for two-line board description files.

Line 1 holds the colour to move next (``b`` or ``w``); line 2 lists the
occupied cells as comma-separated ``<cell><colour>`` tokens::

    b
    C5b,D5b,E4b,E5b,E6b,F5b,F6b,F7b,F8b,G6b,H6b,C3w,C4w,D3w,D4w,D6w,E7w,F4w,G5w,G7w,G8w,G9w,H7w,H8w,H9w
"""

import logging
from typing import Optional

from .board import Board
from .constants import Player
from .hex_grid import HexGrid
from .notation import NotationError, parse_board_token

# Setup logger
logger = logging.getLogger(__name__)


class BoardFileError(ValueError):
    """Raised when a board file cannot be used at all."""
    pass


def parse_board_text(text: str, grid: Optional[HexGrid] = None) -> Board:
    """Build a Board from the contents of a board description file."""
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise BoardFileError("Board description is empty")

    try:
        next_to_move = Player.from_char(lines[0])
    except ValueError:
        raise BoardFileError(f"First line must be 'b' or 'w', got {lines[0]!r}") from None

    board = Board(grid, next_to_move)
    if len(lines) < 2:
        logger.warning("Board description has no cell line; board is empty")
        return board

    for token in lines[1].split(','):
        if not token.strip():
            continue
        try:
            index, occupant = parse_board_token(token, board.grid)
        except NotationError as e:
            logger.warning(f"Skipping token: {e}")
            continue
        board.set_occupant(index, occupant)

    logger.debug(f"Loaded board: {board!r}")
    return board


def load_board(path: str, grid: Optional[HexGrid] = None) -> Board:
    """Read and parse a board description file."""
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    try:
        return parse_board_text(text, grid)
    except BoardFileError as e:
        raise BoardFileError(f"{path}: {e}") from e
