"""Utility functions and classes."""

from .state_conversion import StateConverter
from .compare import BoardComparison, compare_board_files, normalize_board_line

__all__ = ['StateConverter', 'BoardComparison', 'compare_board_files', 'normalize_board_line']
