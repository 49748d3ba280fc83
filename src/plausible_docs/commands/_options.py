"""Click options shared by commands that render head markup."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click


def site_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--site-domain`` and ``--site-origin`` overrides to a command."""
    func = click.option(
        "--site-origin",
        default=None,
        help="Override plausibleSiteOrigin (everything except the trailing script.js).",
    )(func)
    func = click.option(
        "--site-domain",
        default=None,
        help="Override plausibleSiteDomain. An empty value disables tracking.",
    )(func)
    return func
