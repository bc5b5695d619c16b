"""CLI entry point for changelens.

Commands:
  show  — render saved Gerrit change JSON as a detail view or summary table
  dump  — print parsed records in their transport (JSON) form

Input is an already-fetched REST response (a file or stdin); changelens never
talks to the Gerrit server itself.
"""

from __future__ import annotations

import logging

import click

from changelens_cli.commands.dump import dump_cmd
from changelens_cli.commands.show import show_cmd


@click.group()
@click.version_option(package_name="changelens", prog_name="changelens")
@click.option(
    "--config",
    "config_path",
    default=".changelens.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="CHANGELENS_CONFIG",
)
@click.option("--gerrit-url", default=None, help="Gerrit base URL used for web links. Overrides config file.")
@click.option("--verbose", "-v", is_flag=True, help="Log why parts of a change could not be read.")
@click.pass_context
def main(ctx: click.Context, config_path: str, gerrit_url: str | None, verbose: bool):
    """Inspect Gerrit change documents."""
    from changelens_core.config import build_context, load_config

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)

    config = load_config(config_path, cli_overrides={"gerrit_url": gerrit_url})
    try:
        context = build_context(config)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    ctx.obj["config"] = config
    ctx.obj["context"] = context


main.add_command(show_cmd)
main.add_command(dump_cmd)
