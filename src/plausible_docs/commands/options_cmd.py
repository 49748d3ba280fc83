"""Command: list the declared options and their resolved values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plausible_docs.commands._options import site_options
from plausible_docs.output.console import render_options

if TYPE_CHECKING:
    from plausible_docs.commands._context import AppContext


@click.command("options")
@site_options
@click.pass_obj
def options_cmd(app: AppContext, site_domain: str | None, site_origin: str | None) -> None:
    """Show declared options, defaults, and configured values."""
    with app.build_errors():
        injector = app.injector(site_domain=site_domain, site_origin=site_origin)
    click.echo(render_options(injector.options), nl=False)
