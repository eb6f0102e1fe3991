"""
Compare command for checking generated boards against expected ones.
"""

import click
from typing import Optional

from ...utils.compare import compare_board_files
from ..utils import style


def _section(title: str):
    click.echo(style(f"\n=== {title} ===", bold=True))


@click.command()
@click.argument('expected', type=click.Path(exists=True, dir_okay=False))
@click.argument('actual', type=click.Path(exists=True, dir_okay=False))
@click.argument('moves', required=False, type=click.Path(dir_okay=False))
@click.option('--summary', is_flag=True, help='Only print the counts')
@click.pass_context
def compare(ctx, expected: str, actual: str, moves: Optional[str], summary: bool):
    """
    Compare an expected .board file with a generated one.

    Boards are matched regardless of token order or line order. Boards in
    ACTUAL that are not expected are reported with their line number and,
    when MOVES is given, the move on the same line.

    Exits with status 1 when anything is missing or illegal.

    \b
    Examples:
        abalone-moves compare Test1.board.expected Test1.board
        abalone-moves compare Test1.board.expected Test1.board Test1.move
    """
    result = compare_board_files(expected, actual, moves)

    if not summary:
        _section("Legal Board Configurations (present in both files)")
        for line in result.legal or ["None"]:
            click.echo(line)

        _section("Missing Board Configurations (in expected but not in actual)")
        for line in result.missing or ["None"]:
            click.echo(line)

        _section("Illegal Board Configurations (in actual but not in expected)")
        if not result.illegal:
            click.echo("None")
        for line_number, board, move in result.illegal:
            click.echo(f"Line {line_number} illegal board: {board}")
            click.echo(f"  Corresponding move: {move}" if move else "  (No corresponding move found)")

    counts = (f"{len(result.legal)} legal, {len(result.missing)} missing, "
              f"{len(result.illegal)} illegal")
    if result.is_match:
        click.echo(style(f"\n✓ Boards match: {counts}", fg='green'))
    else:
        click.echo(style(f"\n✗ Boards differ: {counts}", fg='red'))
        ctx.exit(1)
