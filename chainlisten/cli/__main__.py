# chainlisten/cli/__main__.py

"""
Chain listener CLI

Usage: python -m chainlisten.cli [command] [options]
"""

import click

from ..core.logging import ChainListenLogger
from .context import CLIContext
from .commands.blocks import block, block_range
from .commands.height import extend_height, height


@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help='Path to the listener configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """Chain listener - extract cross-chain bridge records from NEO blocks"""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    log_level = "DEBUG" if verbose else "INFO"
    ChainListenLogger.configure(
        log_level=log_level,
        console_enabled=True,
        file_enabled=False,
        structured_format=True,
        force=True
    )

    ctx.obj['cli_context'] = CLIContext(config_path)


cli.add_command(height)
cli.add_command(extend_height)
cli.add_command(block)
cli.add_command(block_range)


if __name__ == '__main__':
    cli()
