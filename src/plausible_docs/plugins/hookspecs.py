"""Pluggy hook specifications for documentation build extensions.

One setup-time hook declares options; one per-page hook contributes
markup to the end of the page head.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from plausible_docs.host import PageContext
    from plausible_docs.markup import MarkupNode
    from plausible_docs.options import OptionStore

hookspec = pluggy.HookspecMarker("plausible_docs")


class DocsHookSpec:
    """Hook specifications for the plausible_docs plugin system."""

    @hookspec
    def declare_options(self, options: OptionStore) -> None:
        """Called once per build, before user configuration is applied."""

    @hookspec
    def page_head_end(self, context: PageContext) -> MarkupNode | None:
        """Return markup to insert just before the closing head tag."""
