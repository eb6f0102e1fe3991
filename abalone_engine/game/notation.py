"""Conversion between human-readable notation and internal board values.

Cells are written as a row letter (A-I, bottom to top) followed by the column
number m, e.g. ``E5``. Moves are written as::

    (b, C7, C6, C5) i → NW

with the mover's colour, the group's cells in descending lexical order, ``i``
for inline or ``s`` for side-step, and the direction name.
"""

import re
import logging
from typing import TYPE_CHECKING, Optional, Tuple

from .constants import ROW_LETTERS, Occupant, Player
from .hex_grid import HexGrid, get_grid
from .types import Direction, Group, Move

if TYPE_CHECKING:
    from .board import Board

# Setup logger
logger = logging.getLogger(__name__)

MOVE_ARROW = "→"

_CELL_PATTERN = re.compile(r"^([A-Za-z])(\d)$")
_MOVE_PATTERN = re.compile(
    r"^\(\s*([bBwW])\s*,(?P<cells>[^)]*)\)\s*(?P<kind>[is])\s*(?:→|->)\s*(?P<dir>[A-Za-z]{1,2})$"
)


class NotationError(ValueError):
    """Raised when a cell, token or move string cannot be parsed."""
    pass


def notation_to_index(notation: str, grid: Optional[HexGrid] = None) -> Optional[int]:
    """Convert 'A1'..'I9' to a cell index, or None if it is not on the board."""
    if not isinstance(notation, str):
        return None
    match = _CELL_PATTERN.match(notation.strip())
    if not match:
        return None

    letter, number = match.groups()
    y = ROW_LETTERS.find(letter.upper()) + 1
    if y == 0:
        return None

    grid = grid or get_grid()
    return grid.index_of(int(number), y)


def index_to_notation(index: int, grid: Optional[HexGrid] = None) -> str:
    """Convert a cell index back to 'A1'..'I9'."""
    grid = grid or get_grid()
    m, y = grid.coord_of(index)
    return f"{ROW_LETTERS[y - 1]}{m}"


def move_to_notation(move: Move, player: Player, grid: Optional[HexGrid] = None) -> str:
    """Format a move as '(b, C7, C6, C5) i → NW'."""
    cells = sorted((index_to_notation(c, grid) for c in move.group.cells), reverse=True)
    kind = "i" if move.is_inline else "s"
    return f"({player.char}, {', '.join(cells)}) {kind} {MOVE_ARROW} {move.direction.name}"


def parse_move_notation(text: str, grid: Optional[HexGrid] = None) -> Tuple[Player, Move]:
    """Parse the output of move_to_notation back into (player, move)."""
    match = _MOVE_PATTERN.match(text.strip())
    if not match:
        raise NotationError(f"Malformed move: {text!r}")

    player = Player.from_char(match.group(1))
    cells = []
    for cell_text in match.group('cells').split(','):
        index = notation_to_index(cell_text, grid)
        if index is None:
            raise NotationError(f"Invalid cell {cell_text.strip()!r} in move {text!r}")
        cells.append(index)

    try:
        group = Group.from_cells(cells, grid)
        direction = Direction.from_name(match.group('dir'))
    except ValueError as e:
        raise NotationError(f"Invalid move {text!r}: {e}") from e

    return player, Move(group, direction, match.group('kind') == 'i')


def parse_board_token(token: str, grid: Optional[HexGrid] = None) -> Tuple[int, Occupant]:
    """Parse a '<cell><b|w>' token such as 'C5b'."""
    token = token.strip()
    if len(token) < 3:
        raise NotationError(f"Token too short: {token!r}")

    try:
        player = Player.from_char(token[-1])
    except ValueError:
        raise NotationError(f"Token {token!r} does not end in b or w") from None

    index = notation_to_index(token[:-1], grid)
    if index is None:
        raise NotationError(f"Invalid cell in token {token!r}")
    return index, player.marble


def board_to_string(board: 'Board') -> str:
    """Serialize occupied cells as 'C5b,C6b,...' in cell index order."""
    tokens = []
    for index in board.grid.indices():
        player = board.get_occupant(index).get_player()
        if player is not None:
            tokens.append(f"{index_to_notation(index, board.grid)}{player.char}")
    return ",".join(tokens)
