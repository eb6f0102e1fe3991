"""Coordinate mapping and neighbor table for the 61-cell hex board."""

import threading
import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .constants import NUM_CELLS, ROW_BOUNDS
from .types import Direction

# Setup logger
logger = logging.getLogger(__name__)


class BoardConfigurationError(Exception):
    """Raised when the layout table does not describe a 61-cell board."""
    pass


class HexGrid:
    """Immutable bijection between axial (m, y) coordinates and cell indices.

    Indices are assigned row by row (y ascending, then m ascending), so A1 is
    0 and I9 is 60. The neighbor table is computed once here and only read
    afterwards; every Board holds a reference to the same instance.
    """

    def __init__(self, row_bounds: Mapping[int, Tuple[int, int]] = ROW_BOUNDS):
        coords = []
        for y in sorted(row_bounds):
            low, high = row_bounds[y]
            for m in range(low, high + 1):
                coords.append((m, y))

        if len(coords) != NUM_CELLS:
            raise BoardConfigurationError(
                f"Layout produced {len(coords)} cells, expected {NUM_CELLS}"
            )

        self._index_to_coord: Tuple[Tuple[int, int], ...] = tuple(coords)
        self._coord_to_index: Dict[Tuple[int, int], int] = {
            coord: idx for idx, coord in enumerate(coords)
        }
        self._neighbors: Tuple[Tuple[Optional[int], ...], ...] = tuple(
            tuple(self._coord_to_index.get((m + d.dm, y + d.dy)) for d in Direction)
            for m, y in coords
        )
        logger.debug(f"Built hex grid with {len(coords)} cells")

    def __len__(self) -> int:
        return len(self._index_to_coord)

    def indices(self) -> Iterator[int]:
        return iter(range(len(self._index_to_coord)))

    def is_valid_index(self, index) -> bool:
        return isinstance(index, int) and 0 <= index < len(self._index_to_coord)

    def index_of(self, m: int, y: int) -> Optional[int]:
        """Cell index for (m, y), or None if the coordinate is off the board."""
        return self._coord_to_index.get((m, y))

    def coord_of(self, index: int) -> Tuple[int, int]:
        """(m, y) for a cell index."""
        return self._index_to_coord[index]

    def row_column_key(self, index: int) -> Tuple[int, int]:
        """Sort key ordering cells by row, then column."""
        m, y = self._index_to_coord[index]
        return y, m

    def neighbor(self, index: int, direction: Direction) -> Optional[int]:
        """Adjacent cell in `direction`, or None when that step leaves the board."""
        return self._neighbors[index][direction.index]

    def neighbors_of(self, index: int) -> Tuple[Optional[int], ...]:
        """Row of the neighbor table, ordered like Direction."""
        return self._neighbors[index]


# Process-wide grid, built on first use
_grid: Optional[HexGrid] = None
_grid_lock = threading.Lock()


def get_grid() -> HexGrid:
    """Return the shared grid, building it exactly once."""
    global _grid
    if _grid is None:
        with _grid_lock:
            if _grid is None:
                _grid = HexGrid()
    return _grid
