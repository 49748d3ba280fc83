"""Head markup for the Plausible tracking script.

``page_head_end()`` is the per-page callback: it reads the two resolved
options and returns either an empty :class:`Fragment` or a single
``<script>`` :class:`Element`. It holds no state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from markupsafe import escape

from plausible_docs.errors import ConfigurationTypeError
from plausible_docs.options import SITE_DOMAIN_OPTION, SITE_ORIGIN_OPTION, ResolvedOptions

SCRIPT_NAME = "script.js"


@dataclass(frozen=True)
class Fragment:
    """Markup node that renders to nothing."""

    def render(self) -> str:
        return ""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Element:
    """A single HTML element with ordered attributes and no children.

    ``True`` attributes render as bare names; ``False`` and ``None`` are
    dropped. Other values are escaped as attribute text.
    """

    tag: str
    attributes: dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        parts = [self.tag]
        for name, value in self.attributes.items():
            if value is True:
                parts.append(name)
            elif value is False or value is None:
                continue
            else:
                parts.append(f'{name}="{escape(str(value))}"')
        return f"<{' '.join(parts)}></{self.tag}>"


MarkupNode = Fragment | Element


def normalize_origin(origin: str) -> str:
    """Append a trailing ``/`` to *origin* unless it already has one."""
    if origin.endswith("/"):
        return origin
    return origin + "/"


def script_source(origin: str) -> str:
    """Full URL of the tracking script served from *origin*."""
    return f"https://{normalize_origin(origin)}{SCRIPT_NAME}"


def _read_string(options: ResolvedOptions, name: str) -> str:
    value = options.get_value(name)
    if not isinstance(value, str):
        raise ConfigurationTypeError(name, value)
    return value


def page_head_end(options: ResolvedOptions) -> MarkupNode:
    """Build the markup inserted at the end of every page head."""
    site_domain = _read_string(options, SITE_DOMAIN_OPTION)
    site_origin = _read_string(options, SITE_ORIGIN_OPTION)
    if site_domain == "":
        # Tracking disabled.
        return Fragment()

    return Element(
        "script",
        {
            "defer": True,
            "data-domain": site_domain,
            "src": script_source(site_origin),
        },
    )
