"""Comparison of generated board files against an expected set.

Board lines are compared as sets after normalizing each line (tokens stripped
and sorted), so token order and line order do not matter.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

logger = logging.getLogger(__name__)


@dataclass
class BoardComparison:
    """Result of comparing actual board lines against expected ones."""
    legal: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    # (1-based line number in the actual file, normalized board, move line or None)
    illegal: List[Tuple[int, str, Optional[str]]] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return not self.missing and not self.illegal


def normalize_board_line(line: str) -> str:
    """Split on commas, strip, drop empty tokens, sort and rejoin."""
    tokens = [token.strip() for token in line.split(',')]
    return ",".join(sorted(token for token in tokens if token))


def read_lines(path: str) -> List[str]:
    """Read stripped lines; a missing file reads as empty."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return [line.strip() for line in f]
    except OSError as e:
        logger.error(f"Could not open file {path}: {e}")
        return []


def compare_board_lines(expected_lines: List[str], actual_lines: List[str],
                        move_lines: Optional[List[str]] = None) -> BoardComparison:
    move_lines = move_lines or []
    expected: Set[str] = {normalize_board_line(line) for line in expected_lines}
    expected.discard("")
    normalized_actual = [normalize_board_line(line) for line in actual_lines]
    actual = set(normalized_actual)
    actual.discard("")

    result = BoardComparison(
        legal=sorted(expected & actual),
        missing=sorted(expected - actual),
    )

    extra = actual - expected
    for i, board in enumerate(normalized_actual):
        if board in extra:
            move = move_lines[i] if i < len(move_lines) else None
            result.illegal.append((i + 1, board, move))

    logger.debug(f"Compared boards: {len(result.legal)} legal, "
                 f"{len(result.missing)} missing, {len(result.illegal)} illegal")
    return result


def compare_board_files(expected_path: str, actual_path: str,
                        moves_path: Optional[str] = None) -> BoardComparison:
    """Compare an expected .board file with a generated one."""
    return compare_board_lines(
        read_lines(expected_path),
        read_lines(actual_path),
        read_lines(moves_path) if moves_path else None,
    )
