"""Subcommand modules for plausible-docs.

Provides register_commands() which uses deferred imports to keep
``plausible-docs --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from plausible_docs.commands.inject import inject
    from plausible_docs.commands.options_cmd import options_cmd
    from plausible_docs.commands.snippet import snippet

    cli.add_command(snippet)
    cli.add_command(inject)
    cli.add_command(options_cmd)
