"""
Generate command: legal moves and successor boards for board files.
"""

import os
import logging
import click
from typing import List, Optional

from ...game.loaders import BoardFileError, load_board
from ...game.moves import MoveGenerator
from ...game.writers import write_results
from ..utils import (
    format_success_message, handle_error, output_paths, quiet_echo, show_progress, verbose_echo,
)

logger = logging.getLogger(__name__)


@click.command()
@click.argument('input_files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False))
@click.option('--output-dir', '-o', type=click.Path(file_okay=False),
              help='Directory for .move and .board files (default: next to each input)')
@click.pass_context
def generate(ctx, input_files: List[str], output_dir: Optional[str]):
    """
    Generate every legal move for the side to move in each board file.

    For each INPUT file (e.g. Test1.input) two files are written: Test1.move
    with one move per line and Test1.board with the resulting board on the
    same line number.

    \b
    Examples:
        abalone-moves generate Test1.input
        abalone-moves generate tests/*.input --output-dir out/
    """
    verbose = ctx.obj.get('verbose', False) if ctx.obj else False
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    failures = 0
    with show_progress(input_files, label='Generating moves') as files:
        for input_file in files:
            try:
                board = load_board(input_file)
            except (BoardFileError, OSError) as e:
                failures += 1
                handle_error(e, verbose, context=input_file)
                continue

            player = board.next_to_move
            successors = MoveGenerator.generate_successors(board, player)
            move_path, board_path = output_paths(input_file, output_dir)
            write_results(successors, player, move_path, board_path)
            logger.debug(f"{input_file}: {len(successors)} moves for {player.name}")
            verbose_echo(f"\n{input_file}: {len(successors)} moves for {player.name.lower()}")

            if len(input_files) == 1:
                quiet_echo(format_success_message(
                    f"Generated {len(successors)} moves for {player.name.lower()}",
                    {'moves': move_path, 'boards': board_path},
                ))

    if failures:
        raise click.ClickException(f"{failures} of {len(input_files)} input files could not be read")
