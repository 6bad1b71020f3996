# chainlisten/cli/commands/height.py

import click

from ...clients.extend_height import ExtendHeightError
from ...clients.neo_rpc import NeoRpcError


@click.command()
@click.pass_context
def height(ctx):
    """Show the latest height reported by the node"""
    listener = ctx.obj['cli_context'].listener
    try:
        click.echo(listener.get_latest_height())
    except NeoRpcError as e:
        raise click.ClickException(str(e))


@click.command('extend-height')
@click.pass_context
def extend_height(ctx):
    """Show the latest height reported by the extended height endpoint"""
    listener = ctx.obj['cli_context'].listener
    try:
        click.echo(listener.get_extend_latest_height())
    except ExtendHeightError as e:
        raise click.ClickException(str(e))
