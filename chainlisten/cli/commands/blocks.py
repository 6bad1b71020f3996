# chainlisten/cli/commands/blocks.py

"""
Block extraction CLI Commands

Run the extractor over one block or a range and print the records as JSON.
"""

import click
import msgspec

from ...clients.neo_rpc import NeoRpcError
from ...types import BlockRecords


def records_to_json(height: int, records: BlockRecords) -> str:
    document = {"height": height, **records._asdict()}
    return msgspec.json.encode(document).decode()


@click.command()
@click.argument('height', type=int)
@click.pass_context
def block(ctx, height):
    """Extract bridge records from a single block"""
    listener = ctx.obj['cli_context'].listener
    try:
        records = listener.handle_new_block(height)
    except NeoRpcError as e:
        raise click.ClickException(str(e))
    click.echo(records_to_json(height, records))


@click.command('range')
@click.argument('start_height', type=int)
@click.argument('end_height', type=int)
@click.option('--skip-empty', is_flag=True, help='Omit blocks without bridge records')
@click.pass_context
def block_range(ctx, start_height, end_height, skip_empty):
    """Extract bridge records from an inclusive range of blocks, one JSON line per block"""
    if end_height < start_height:
        raise click.BadParameter("end height must not be below start height")

    listener = ctx.obj['cli_context'].listener
    for height in range(start_height, end_height + 1):
        try:
            records = listener.handle_new_block(height)
        except NeoRpcError as e:
            raise click.ClickException(f"block {height}: {e}")
        if skip_empty and records.is_empty():
            continue
        click.echo(records_to_json(height, records))
