"""Command: print the head markup for the current configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plausible_docs.commands._options import site_options

if TYPE_CHECKING:
    from plausible_docs.commands._context import AppContext


@click.command()
@site_options
@click.option("--page", default="index.html", help="Page path passed to the hooks.")
@click.pass_obj
def snippet(
    app: AppContext,
    site_domain: str | None,
    site_origin: str | None,
    page: str,
) -> None:
    """Print the markup inserted at the end of each page head."""
    with app.build_errors():
        markup = app.injector(site_domain=site_domain, site_origin=site_origin).render_head(page)
    if markup:
        click.echo(markup)
    else:
        click.echo("Tracking disabled: plausibleSiteDomain is not set.", err=True)
