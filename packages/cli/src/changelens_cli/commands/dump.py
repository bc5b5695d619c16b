"""dump command — print parsed records in their transport form."""

from __future__ import annotations

import json

import click

from changelens_cli.input import read_records
from changelens_core.codec import record_to_dict


@click.command("dump")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--indent", default=2, show_default=True, help="JSON indentation.")
@click.pass_context
def dump_cmd(ctx, source, indent: int):
    """Print a JSON array with one transport record per change in SOURCE."""
    records = read_records(source, ctx.obj["context"])
    click.echo(json.dumps([record_to_dict(r) for r in records], indent=indent))
