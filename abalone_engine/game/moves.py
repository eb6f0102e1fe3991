"""Move generation for Abalone."""

from typing import Dict, Iterator, List, Set, Tuple
import logging

from .applier import IllegalMoveError, MoveApplier
from .board import Board
from .constants import MAX_GROUP_SIZE, Player
from .types import Direction, Group, Move

# Setup logger
logger = logging.getLogger(__name__)


class MoveGenerator:
    """Generates legal moves for one side of a board.

    Legality is decided by applying each candidate to a scratch copy of the
    board; the applier is the only place the rules live.
    """

    @staticmethod
    def generate_legal_moves(board: Board, player: Player) -> List[Move]:
        """Get all legal moves for `player`. Order carries no meaning."""
        moves = [move for move, _ in MoveGenerator._iter_legal(board, player)]
        logger.debug(f"Found {len(moves)} legal moves for {player.name}")
        return moves

    @staticmethod
    def generate_successors(board: Board, player: Player) -> List[Tuple[Move, Board]]:
        """Get each legal move paired with the board it produces.

        The successor boards have the opponent as next to move.
        """
        successors = []
        for move, result in MoveGenerator._iter_legal(board, player):
            result.next_to_move = player.opponent
            successors.append((move, result))
        return successors

    @staticmethod
    def find_groups(board: Board, player: Player) -> List[Group]:
        """Get every movable group of 1-3 collinear marbles, each once."""
        grid = board.grid
        marble = player.marble
        groups: Dict[Tuple[int, ...], Group] = {}
        seen: Set[frozenset] = set()

        def extend(path: List[int]):
            cells = frozenset(path)
            if cells in seen:
                return
            seen.add(cells)

            try:
                group = Group.from_cells(cells, grid)
            except ValueError:
                logger.debug(f"Rejecting bent group {sorted(cells)}")
                group = None
            if group is not None:
                groups.setdefault(group.cells, group)

            if len(path) == MAX_GROUP_SIZE:
                return
            for neighbor in grid.neighbors_of(path[-1]):
                if neighbor is None or neighbor in cells:
                    continue
                if board.get_occupant(neighbor) == marble:
                    extend(path + [neighbor])

        for start in board.positions(player):
            extend([start])

        return [groups[key] for key in sorted(groups)]

    @staticmethod
    def _iter_legal(board: Board, player: Player) -> Iterator[Tuple[Move, Board]]:
        seen: Set[Move] = set()
        for group in MoveGenerator.find_groups(board, player):
            for direction in Direction:
                move = Move(group, direction, group.is_inline(direction))
                if move in seen:
                    continue
                seen.add(move)

                scratch = board.copy()
                try:
                    MoveApplier.apply_move(scratch, move)
                except IllegalMoveError as e:
                    logger.debug(f"Rejected {move}: {e.reason.value}")
                    continue
                yield move, scratch
