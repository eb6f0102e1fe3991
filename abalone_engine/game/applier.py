"""Move application for Abalone, including sumito pushes."""

from enum import Enum
from typing import List
import logging

from .board import Board
from .constants import Occupant
from .types import Group, Move

# Setup logger
logger = logging.getLogger(__name__)


class IllegalMoveReason(Enum):
    INVALID_GROUP = "invalid_group"
    MOVE_KIND_MISMATCH = "move_kind_mismatch"
    OFF_BOARD = "off_board"
    DESTINATION_OCCUPIED = "destination_occupied"
    PUSH_OUTNUMBERED = "push_outnumbered"
    PUSH_BLOCKED = "push_blocked"


class IllegalMoveError(Exception):
    """Raised when a move breaks a rule; `reason` names the rule."""

    def __init__(self, reason: IllegalMoveReason, message: str):
        super().__init__(message)
        self.reason = reason


class MoveApplier:
    """Applies moves to boards in place.

    Every rule check happens before the first write, so a board is never left
    half-moved when IllegalMoveError is raised.
    """

    @staticmethod
    def apply_move(board: Board, move: Move) -> Board:
        """Apply `move` to `board` and return the same board."""
        marble = MoveApplier._group_marble(board, move.group)

        if move.is_inline != move.group.is_inline(move.direction):
            raise IllegalMoveError(
                IllegalMoveReason.MOVE_KIND_MISMATCH,
                f"Move marked {'inline' if move.is_inline else 'side-step'} "
                f"does not match group axis {move.group.axis} and direction {move.direction.name}"
            )

        if move.is_inline:
            pushed = MoveApplier._check_inline(board, move, marble)
        else:
            MoveApplier._check_side_step(board, move)
            pushed = []

        # Opponent chain first, furthest marble first
        MoveApplier._shift(board, reversed(pushed), move)
        MoveApplier._shift(board, move.group.front_to_back(move.direction), move)
        return board

    @staticmethod
    def _group_marble(board: Board, group: Group) -> Occupant:
        """Colour shared by every marble of the group."""
        if not all(board.grid.is_valid_index(cell) for cell in group.cells):
            raise IllegalMoveError(
                IllegalMoveReason.INVALID_GROUP,
                f"Group {group.cells} has cells off the board"
            )
        for prev, cell in zip(group.cells, group.cells[1:]):
            if board.grid.neighbor(prev, group.axis) != cell:
                raise IllegalMoveError(
                    IllegalMoveReason.INVALID_GROUP,
                    f"Group {group.cells} is not contiguous along {group.axis.name}"
                )

        occupants = {board.get_occupant(cell) for cell in group.cells}
        if len(occupants) != 1:
            raise IllegalMoveError(
                IllegalMoveReason.INVALID_GROUP,
                f"Group {group.cells} mixes occupants {sorted(o.name for o in occupants)}"
            )
        marble = occupants.pop()
        if not marble.is_marble():
            raise IllegalMoveError(
                IllegalMoveReason.INVALID_GROUP,
                f"Group {group.cells} has no marbles"
            )
        return marble

    @staticmethod
    def _check_side_step(board: Board, move: Move):
        for cell in move.group.cells:
            target = board.grid.neighbor(cell, move.direction)
            if target is None:
                raise IllegalMoveError(
                    IllegalMoveReason.OFF_BOARD,
                    f"Side-step {move.direction.name} from {cell} leaves the board"
                )
            if board.get_occupant(target) != Occupant.EMPTY:
                raise IllegalMoveError(
                    IllegalMoveReason.DESTINATION_OCCUPIED,
                    f"Side-step {move.direction.name} from {cell} lands on occupied cell {target}"
                )

    @staticmethod
    def _check_inline(board: Board, move: Move, marble: Occupant) -> List[int]:
        """Validate an inline move and return the opposing chain it pushes."""
        grid = board.grid
        direction = move.direction
        leading = move.group.leading(direction)

        ahead = grid.neighbor(leading, direction)
        if ahead is None:
            raise IllegalMoveError(
                IllegalMoveReason.OFF_BOARD,
                f"Inline {direction.name} would push own marble at {leading} off the board"
            )

        occupant = board.get_occupant(ahead)
        if occupant == Occupant.EMPTY:
            return []
        if occupant == marble:
            raise IllegalMoveError(
                IllegalMoveReason.DESTINATION_OCCUPIED,
                f"Inline {direction.name} is blocked by own marble at {ahead}"
            )

        chain = []
        current = ahead
        while current is not None and board.get_occupant(current) == occupant:
            chain.append(current)
            current = grid.neighbor(current, direction)

        if len(chain) >= move.group.size:
            raise IllegalMoveError(
                IllegalMoveReason.PUSH_OUTNUMBERED,
                f"Group of {move.group.size} cannot push chain of {len(chain)}"
            )
        if current is not None and board.get_occupant(current) != Occupant.EMPTY:
            raise IllegalMoveError(
                IllegalMoveReason.PUSH_BLOCKED,
                f"Push {direction.name} is blocked at {current}"
            )

        if current is None:
            logger.debug(f"Push {direction.name} eliminates marble at {chain[-1]}")
        return chain

    @staticmethod
    def _shift(board: Board, cells, move: Move):
        """Step marbles one cell along the move in the order given.

        A marble with no cell ahead leaves the board.
        """
        for cell in cells:
            occupant = board.occupants[cell]
            target = board.grid.neighbor(cell, move.direction)
            if target is not None:
                board.occupants[target] = occupant
            board.occupants[cell] = Occupant.EMPTY
