"""Rich Console factory and theme for plausible-docs output.

Creates Console instances that render to a StringIO buffer so commands
can hand the text to ``click.echo``. In non-TTY environments (tests,
pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from plausible_docs.options import OptionStore

DOCS_THEME = Theme(
    {
        "docs.option": "bold cyan",
        "docs.default": "dim",
        "docs.value": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DOCS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_options(options: OptionStore, *, no_color: bool = False) -> str:
    """Table of declared options with their default and resolved values."""
    table = Table(title="Declared options")
    table.add_column("Option", style="docs.option", no_wrap=True)
    table.add_column("Default", style="docs.default", no_wrap=True)
    table.add_column("Value", style="docs.value")
    table.add_column("Help")
    for declaration in options.declarations():
        value = options.get_value(declaration.name)
        shown = repr(value) if options.is_set(declaration.name) else "(default)"
        table.add_row(
            declaration.name,
            repr(declaration.resolved_default()),
            shown,
            declaration.help,
        )
    console = create_console(no_color=no_color)
    console.print(table)
    return get_output(console)
