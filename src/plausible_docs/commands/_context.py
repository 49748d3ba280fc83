"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Plugin discovery is deferred until a command needs
head markup so ``--help`` and ``--version`` never import plugins.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from plausible_docs.errors import PlausibleDocsError
from plausible_docs.host import HeadInjector

if TYPE_CHECKING:
    from plausible_docs.config.settings import DocsSettings
    from plausible_docs.plugins.manager import PluginManager

LOCAL_PLUGIN_DIR = (".plausible-docs", "plugins")


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DocsSettings) -> None:
        self.settings = settings
        self._plugin_manager: PluginManager | None = None

        from plausible_docs.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugin_manager(self) -> PluginManager:
        """Entry-point and project-local plugins plus the built-in one."""
        if self._plugin_manager is None:
            from plausible_docs.plugins.builtins.plausible import load
            from plausible_docs.plugins.manager import PluginManager

            pm = PluginManager()
            pm.discover_and_load(local_dir=self.settings.project_root.joinpath(*LOCAL_PLUGIN_DIR))
            load(pm)
            self._plugin_manager = pm
        return self._plugin_manager

    def injector(
        self,
        *,
        site_domain: str | None = None,
        site_origin: str | None = None,
    ) -> HeadInjector:
        """HeadInjector over the configured options plus command overrides."""
        values = self.settings.option_values(site_domain=site_domain, site_origin=site_origin)
        return HeadInjector(values, plugin_manager=self.plugin_manager)

    @contextmanager
    def build_errors(self) -> Iterator[None]:
        """Turn plausible-docs errors into a ClickException (exit code 1)."""
        try:
            yield
        except PlausibleDocsError as exc:
            raise click.ClickException(str(exc)) from exc
