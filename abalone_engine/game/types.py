"""Basic type definitions for Abalone moves."""

from enum import Enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple

from .constants import MAX_GROUP_SIZE, MIN_GROUP_SIZE

if TYPE_CHECKING:
    from .hex_grid import HexGrid


class Direction(Enum):
    """The six hex directions as (dm, dy) offsets."""
    W = (-1, 0)
    E = (1, 0)
    NW = (0, 1)
    NE = (1, 1)
    SW = (-1, -1)
    SE = (0, -1)

    @property
    def dm(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> 'Direction':
        return Direction((-self.dm, -self.dy))

    @property
    def index(self) -> int:
        """Column of this direction in the neighbor table."""
        return _DIRECTION_INDEX[self]

    @staticmethod
    def from_name(name: str) -> 'Direction':
        """Look up a direction by its name ('NW', 'e', ...)."""
        try:
            return Direction[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


_DIRECTION_INDEX: Dict[Direction, int] = {d: i for i, d in enumerate(Direction)}

# Steps between consecutive cells of a canonically ordered group
AXIS_DIRECTIONS = (Direction.E, Direction.NW, Direction.NE)


@dataclass(frozen=True)
class Group:
    """1-3 collinear cells in canonical (row, column) order."""
    cells: Tuple[int, ...]
    axis: Optional[Direction] = None

    def __post_init__(self):
        if isinstance(self.cells, list):
            object.__setattr__(self, 'cells', tuple(self.cells))
        if not MIN_GROUP_SIZE <= len(self.cells) <= MAX_GROUP_SIZE:
            raise ValueError(f"Group size must be 1-3, got {len(self.cells)}")
        if (len(self.cells) == 1) != (self.axis is None):
            raise ValueError("Single-marble groups have no axis; larger groups need one")

    @property
    def size(self) -> int:
        return len(self.cells)

    def is_inline(self, direction: Direction) -> bool:
        """True if moving in `direction` runs along this group's axis."""
        if self.axis is None:
            return False
        return direction == self.axis or direction == self.axis.opposite

    def front_to_back(self, direction: Direction) -> Tuple[int, ...]:
        """Cells ordered so the marble furthest along `direction` comes first."""
        if self.axis is not None and direction == self.axis:
            return tuple(reversed(self.cells))
        return self.cells

    def leading(self, direction: Direction) -> int:
        return self.front_to_back(direction)[0]

    @classmethod
    def from_cells(cls, cells: Iterable[int], grid: Optional['HexGrid'] = None) -> 'Group':
        """Canonicalize arbitrary cells into a Group.

        Raises ValueError if the cells are duplicated, off the grid, not in a
        straight line, or not contiguous.
        """
        if grid is None:
            from .hex_grid import get_grid
            grid = get_grid()

        cells = list(cells)
        unique = set(cells)
        if len(unique) != len(cells):
            raise ValueError(f"Duplicate cells in group: {sorted(cells)}")
        for cell in unique:
            if not grid.is_valid_index(cell):
                raise ValueError(f"Cell index out of range: {cell}")

        ordered = tuple(sorted(unique, key=grid.row_column_key))
        if len(ordered) == 1:
            return cls(ordered)
        if not MIN_GROUP_SIZE <= len(ordered) <= MAX_GROUP_SIZE:
            raise ValueError(f"Group size must be 1-3, got {len(ordered)}")

        m0, y0 = grid.coord_of(ordered[0])
        m1, y1 = grid.coord_of(ordered[1])
        step = (m1 - m0, y1 - y0)
        axis = next((d for d in AXIS_DIRECTIONS if d.value == step), None)
        if axis is None:
            raise ValueError(f"Cells {ordered} are not adjacent along one axis")

        for prev, cell in zip(ordered[1:], ordered[2:]):
            if grid.neighbor(prev, axis) != cell:
                raise ValueError(f"Cells {ordered} are not collinear")

        return cls(ordered, axis)


@dataclass(frozen=True)
class Move:
    """A group of marbles stepping one cell in a direction."""
    group: Group
    direction: Direction
    is_inline: bool

    def __str__(self) -> str:
        kind = "inline" if self.is_inline else "side-step"
        return f"{kind} {self.direction.name} cells={list(self.group.cells)}"
