"""Writers for generated moves and successor boards."""

import logging
from typing import List, Sequence, Tuple

from .board import Board
from .constants import Player
from .notation import board_to_string, move_to_notation
from .types import Move

# Setup logger
logger = logging.getLogger(__name__)


def format_move_lines(successors: Sequence[Tuple[Move, Board]], player: Player) -> List[str]:
    return [move_to_notation(move, player, board.grid) for move, board in successors]


def format_board_lines(successors: Sequence[Tuple[Move, Board]]) -> List[str]:
    return [board_to_string(board) for _, board in successors]


def write_results(successors: Sequence[Tuple[Move, Board]], player: Player,
                  move_path: str, board_path: str):
    """Write one move per line and the matching board on the same line number."""
    with open(move_path, 'w', encoding='utf-8') as f:
        for line in format_move_lines(successors, player):
            f.write(line + "\n")

    with open(board_path, 'w', encoding='utf-8') as f:
        for line in format_board_lines(successors):
            f.write(line + "\n")

    logger.info(f"Wrote {len(successors)} moves to {move_path} and boards to {board_path}")
