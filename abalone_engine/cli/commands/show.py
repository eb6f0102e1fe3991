"""
Show command for printing a board.
"""

import click
from typing import Optional

from ...game.board import Board
from ...game.constants import Player
from ...game.layouts import LAYOUTS
from ...game.loaders import BoardFileError, load_board
from ...game.moves import MoveGenerator
from ...game.notation import board_to_string, move_to_notation
from ..config import get_config


@click.command()
@click.argument('input_file', required=False, type=click.Path(exists=True, dir_okay=False))
@click.option('--layout', '-l', type=click.Choice(sorted(LAYOUTS)),
              help='Show a starting layout instead of a file')
@click.option('--moves', 'list_moves', is_flag=True,
              help='Also list the legal moves for the side to move')
def show(input_file: Optional[str], layout: Optional[str], list_moves: bool):
    """
    Print a board as a hex diagram followed by its serialized form.

    \b
    Examples:
        abalone-moves show Test1.input
        abalone-moves show --layout belgian_daisy --moves
    """
    if input_file and layout:
        raise click.UsageError("Give either INPUT_FILE or --layout, not both")

    if input_file:
        try:
            board = load_board(input_file)
        except (BoardFileError, OSError) as e:
            raise click.ClickException(str(e))
    else:
        board = Board.from_layout(layout or get_config().get('default_layout', 'standard'),
                                  next_to_move=Player.BLACK)

    click.echo(str(board))
    click.echo(board_to_string(board))

    if list_moves:
        player = board.next_to_move
        moves = MoveGenerator.generate_legal_moves(board, player)
        click.echo(f"\n{len(moves)} legal moves for {player.name.lower()}:")
        for move in moves:
            click.echo(move_to_notation(move, player, board.grid))
