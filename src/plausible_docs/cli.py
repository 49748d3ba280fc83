"""Root CLI group for plausible-docs with global flags and command registration."""

from __future__ import annotations

import click

from plausible_docs import __version__
from plausible_docs.commands import register_commands
from plausible_docs.commands._context import AppContext
from plausible_docs.config.settings import DocsSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="plausible-docs")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """plausible-docs — Plausible Analytics for generated documentation."""
    settings = DocsSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
