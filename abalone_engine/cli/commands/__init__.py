"""
Command modules for the abalone-moves CLI.

This package contains the individual command implementations for the CLI.
"""

from . import generate
from . import compare
from . import show

__all__ = ['generate', 'compare', 'show']
