"""Built-in Plausible Analytics plugin.

Declares the site domain and origin options and contributes the
tracking script to every page head.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

from plausible_docs.markup import MarkupNode, page_head_end
from plausible_docs.options import register

if TYPE_CHECKING:
    from plausible_docs.host import PageContext
    from plausible_docs.options import OptionStore
    from plausible_docs.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("plausible_docs")

PLUGIN_NAME = "plausible"


class PlausiblePlugin:
    """Plausible tracking script injection."""

    @hookimpl
    def declare_options(self, options: OptionStore) -> None:
        register(options)

    @hookimpl
    def page_head_end(self, context: PageContext) -> MarkupNode:
        return page_head_end(context.options)


def load(manager: PluginManager) -> None:
    """Attach the plugin to *manager* unless it is already registered."""
    if PLUGIN_NAME in manager.list_plugin_names():
        return
    manager.register_plugin(PlausiblePlugin(), name=PLUGIN_NAME)
