"""Constants for Abalone board and move logic."""

from enum import Enum
from typing import Dict, Optional, Tuple
import logging

# Setup logger
logger = logging.getLogger(__name__)


class Player(Enum):
    BLACK = "b"
    WHITE = "w"

    @property
    def opponent(self) -> 'Player':
        """Get the opposing player."""
        return Player.WHITE if self == Player.BLACK else Player.BLACK

    @property
    def marble(self) -> 'Occupant':
        """The occupant value this player's marbles leave on a cell."""
        return Occupant.BLACK if self == Player.BLACK else Occupant.WHITE

    @property
    def char(self) -> str:
        return self.value

    @staticmethod
    def from_char(char: str) -> 'Player':
        """Create Player from 'b'/'w' (any case)."""
        try:
            return Player(char.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown player character: {char!r}") from None


class Occupant(Enum):
    EMPTY = "."
    BLACK = "@"
    WHITE = "O"

    def is_marble(self) -> bool:
        return self != Occupant.EMPTY

    def get_player(self) -> Optional[Player]:
        if self == Occupant.BLACK:
            return Player.BLACK
        elif self == Occupant.WHITE:
            return Player.WHITE
        return None


# Total number of playable cells on the board
NUM_CELLS = 61

# Valid m (column) range for each row y, A=1 .. I=9
ROW_BOUNDS: Dict[int, Tuple[int, int]] = {
    1: (1, 5),  # A1-A5
    2: (1, 6),  # B1-B6
    3: (1, 7),  # C1-C7
    4: (1, 8),  # D1-D8
    5: (1, 9),  # E1-E9
    6: (2, 9),  # F2-F9
    7: (3, 9),  # G3-G9
    8: (4, 9),  # H4-H9
    9: (5, 9),  # I5-I9
}

ROW_LETTERS = "ABCDEFGHI"

# Group constraints
MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 3

# Marbles each side starts with in every standard layout
MARBLES_PER_PLAYER = 14
