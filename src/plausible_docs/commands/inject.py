"""Command: inject head markup into a built documentation site."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from plausible_docs.commands._options import site_options

if TYPE_CHECKING:
    from plausible_docs.commands._context import AppContext


@click.command()
@click.argument(
    "site_dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@site_options
@click.option("--dry-run", is_flag=True, help="Report pages that would change without writing.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.pass_obj
def inject(
    app: AppContext,
    site_dir: Path,
    site_domain: str | None,
    site_origin: str | None,
    dry_run: bool,
    json_output: bool,
) -> None:
    """Insert the tracking script before </head> in every page of SITE_DIR."""
    with app.build_errors():
        injector = app.injector(site_domain=site_domain, site_origin=site_origin)
        report = injector.inject_site(site_dir, dry_run=dry_run)

    if json_output:
        click.echo(json.dumps({**report.as_dict(), "dry_run": dry_run}, indent=2))
        return
    verb = "Would update" if dry_run else "Updated"
    click.echo(f"{verb} {len(report.changed)} of {report.scanned} pages in {site_dir}")
    for page in report.changed:
        click.echo(f"  {page}")
