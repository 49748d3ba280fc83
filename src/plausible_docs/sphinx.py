"""Sphinx extension: add ``"plausible_docs.sphinx"`` to ``extensions``.

The options are declared as Sphinx config values under the same names
(``plausibleSiteDomain``, ``plausibleSiteOrigin``) and the markup is
appended to the ``metatags`` context variable, which the basic theme
renders inside ``<head>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from plausible_docs import __version__
from plausible_docs.markup import page_head_end
from plausible_docs.options import OptionDeclaration, register

if TYPE_CHECKING:
    from sphinx.application import Sphinx
    from sphinx.config import Config


class SphinxOptionStore:
    """``add_declaration`` on top of ``Sphinx.add_config_value``."""

    def __init__(self, app: Sphinx) -> None:
        self._app = app

    def add_declaration(self, declaration: OptionDeclaration) -> None:
        self._app.add_config_value(
            declaration.name,
            declaration.resolved_default(),
            "html",
            types=[str],
        )


class SphinxResolvedOptions:
    """Read resolved options from a Sphinx ``Config``."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def get_value(self, name: str) -> object:
        return getattr(self._config, name)


def add_tracking_script(
    app: Sphinx,
    pagename: str,
    templatename: str,
    context: dict[str, Any],
    doctree: Any,
) -> None:
    markup = page_head_end(SphinxResolvedOptions(app.config)).render()
    if markup:
        context["metatags"] = context.get("metatags", "") + markup


def setup(app: Sphinx) -> dict[str, Any]:
    register(SphinxOptionStore(app))
    app.connect("html-page-context", add_tracking_script)

    return {
        "version": __version__,
        "parallel_read_safe": True,
        "parallel_write_safe": True,
    }
