"""
CLI interface for the Abalone move generator.

Provides command-line tools for:
- Generating legal moves and successor boards from board files
- Comparing generated boards with expected results
- Printing boards and starting layouts
"""

__version__ = "0.1.0"

__all__ = ['cli']

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == 'cli':
        from .main import cli
        return cli
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
