"""
Main CLI entry point for the Abalone move generator.

This module provides the main command-line interface for the abalone-moves tool.
"""

import logging
import click
from typing import Optional

from .config import get_config, set_config, CLIConfig
from .commands import generate, compare, show


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group(name='abalone-moves', invoke_without_command=True)
@click.option('--config', '-c',
              help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.option('--no-color', is_flag=True,
              help='Disable colored output')
@click.version_option(version='0.1.0', prog_name='abalone-moves')
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool, quiet: bool, no_color: bool):
    """
    Abalone move generator

    Reads board description files, generates every legal move for the side
    to move, and checks generated boards against expected results.

    Examples:
        abalone-moves generate Test1.input
        abalone-moves compare Test1.board.expected Test1.board Test1.move
        abalone-moves show --layout german_daisy
    """
    # If no command is provided, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    # Load configuration
    if config:
        cli_config = CLIConfig(config_file=config)
    else:
        cli_config = get_config()

    # Override config with command line options
    overrides = {}
    if verbose:
        overrides['verbose'] = True
    if quiet:
        overrides['quiet'] = True
    if no_color:
        overrides['color_output'] = False
    cli_config.update(overrides)

    set_config(cli_config)
    setup_logging(cli_config.get('verbose', False), cli_config.get('quiet', False))

    ctx.ensure_object(dict)
    ctx.obj['config'] = cli_config
    ctx.obj['verbose'] = cli_config.get('verbose', False)


# Register commands
cli.add_command(generate.generate)
cli.add_command(compare.compare)
cli.add_command(show.show)


@cli.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""
    config_obj = ctx.obj['config']

    click.echo("Current configuration:")
    click.echo("=" * 50)

    for key, value in config_obj.to_dict().items():
        click.echo(f"{key:<25}: {value}")

    if config_obj._config_file:
        click.echo(f"\nLoaded from: {config_obj._config_file}")
    else:
        click.echo("\nUsing default configuration (no config file found)")


if __name__ == '__main__':
    cli()
