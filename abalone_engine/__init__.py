"""Board and move engine for Abalone."""

__version__ = "0.1.0"
