"""
Utility functions for the abalone-moves CLI.

Provides progress bars, colour handling, output path resolution and error display.
"""

import os
from typing import Any, Dict, Optional, Tuple
import click

from .config import get_config


def show_progress(iterable, length=None, label="Processing", show_eta=True):
    """Show a progress bar for long-running operations."""
    config = get_config()
    if config.get('quiet', False):
        # Context manager yielding the iterable unchanged
        return _NullProgress(iterable)

    return click.progressbar(
        iterable,
        length=length,
        label=label,
        show_eta=show_eta,
        show_percent=True,
        show_pos=True
    )


class _NullProgress:
    def __init__(self, iterable):
        self._iterable = iterable

    def __enter__(self):
        return self._iterable

    def __exit__(self, *exc):
        return False


def style(text: str, **kwargs) -> str:
    """Apply click styling unless colour output is disabled."""
    if not get_config().get('color_output', True):
        return text
    return click.style(text, **kwargs)


def output_paths(input_path: str, output_dir: Optional[str] = None) -> Tuple[str, str]:
    """Move and board file paths for an input file.

    'dir/Test1.input' becomes 'dir/Test1.move' and 'dir/Test1.board'.
    """
    config = get_config()
    stem, ext = os.path.splitext(os.path.basename(input_path))
    if ext != config.get('input_suffix', '.input'):
        stem = os.path.basename(input_path)
    directory = output_dir or config.get('output_dir') or os.path.dirname(input_path)
    return (
        os.path.join(directory, stem + config.get('move_suffix', '.move')),
        os.path.join(directory, stem + config.get('board_suffix', '.board')),
    )


def handle_error(error: Exception, verbose: bool = False, context: str = None) -> None:
    """Display an error with a hint for the common cases."""
    error_msg = str(error).lower()
    suggestions = []

    if "no such file or directory" in error_msg or "file not found" in error_msg:
        suggestions.append("• Check if the file path is correct")
    elif "permission denied" in error_msg:
        suggestions.append("• Check file/directory permissions")
    elif "first line" in error_msg:
        suggestions.append("• The first line of a board file must be 'b' or 'w'")

    click.echo(style(f"✗ Error: {error}", fg='red'), err=True)

    if context:
        click.echo(f"  Context: {context}", err=True)

    if suggestions:
        click.echo(style("\nSuggestions:", fg='yellow'), err=True)
        for suggestion in suggestions:
            click.echo(f"  {suggestion}", err=True)

    if verbose:
        click.echo(style("\nDetailed traceback:", fg='cyan'), err=True)
        import traceback
        click.echo(traceback.format_exc(), err=True)


def format_success_message(message: str, details: Dict[str, Any] = None) -> str:
    """Format a consistent success message with optional details."""
    lines = [style(f"✓ {message}", fg='green')]

    if details:
        for key, value in details.items():
            if value is not None:
                lines.append(f"  {key}: {value}")

    return "\n".join(lines)


def verbose_echo(message: str, **kwargs):
    """Echo message only in verbose mode."""
    config = get_config()
    if config.get('verbose', False):
        click.echo(message, **kwargs)


def quiet_echo(message: str, **kwargs):
    """Echo message unless in quiet mode."""
    config = get_config()
    if not config.get('quiet', False):
        click.echo(message, **kwargs)
