"""Standard starting layouts. Black starts on the A-row side."""

from typing import TYPE_CHECKING, Dict, Tuple
import logging

from .constants import Player

if TYPE_CHECKING:
    from .board import Board

# Setup logger
logger = logging.getLogger(__name__)

LAYOUTS: Dict[str, Dict[Player, Tuple[str, ...]]] = {
    'standard': {
        Player.BLACK: (
            'A1', 'A2', 'A3', 'A4', 'A5',
            'B1', 'B2', 'B3', 'B4', 'B5', 'B6',
            'C3', 'C4', 'C5',
        ),
        Player.WHITE: (
            'I5', 'I6', 'I7', 'I8', 'I9',
            'H4', 'H5', 'H6', 'H7', 'H8', 'H9',
            'G5', 'G6', 'G7',
        ),
    },
    'belgian_daisy': {
        Player.BLACK: (
            'A1', 'A2', 'B1', 'B2', 'B3', 'C2', 'C3',
            'G7', 'G8', 'H7', 'H8', 'H9', 'I8', 'I9',
        ),
        Player.WHITE: (
            'A4', 'A5', 'B4', 'B5', 'B6', 'C5', 'C6',
            'G4', 'G5', 'H4', 'H5', 'H6', 'I5', 'I6',
        ),
    },
    'german_daisy': {
        Player.BLACK: (
            'B1', 'B2', 'C1', 'C2', 'C3', 'D2', 'D3',
            'F7', 'F8', 'G7', 'G8', 'G9', 'H8', 'H9',
        ),
        Player.WHITE: (
            'B5', 'B6', 'C5', 'C6', 'C7', 'D6', 'D7',
            'F3', 'F4', 'G3', 'G4', 'G5', 'H4', 'H5',
        ),
    },
}


def apply_layout(board: 'Board', name: str) -> 'Board':
    """Clear `board` and place the named layout on it."""
    try:
        layout = LAYOUTS[name]
    except KeyError:
        raise KeyError(f"Unknown layout {name!r}; choose from {sorted(LAYOUTS)}") from None

    board.clear()
    for player, cells in layout.items():
        for cell in cells:
            board.set_occupant(cell, player.marble)
    logger.debug(f"Applied layout {name}")
    return board
