"""Head injection for already-built HTML documentation.

``HeadInjector`` plays the host's part of the contract: it declares the
plugin options on a fresh :class:`OptionStore`, applies the user's values,
then asks every plugin for head markup page by page and writes it just
before ``</head>``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from plausible_docs.options import OptionStore, ResolvedOptions
from plausible_docs.plugins.builtins.plausible import load as load_plausible
from plausible_docs.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)
HTML_SUFFIXES = (".html", ".htm")


@dataclass(frozen=True)
class PageContext:
    """What a ``page_head_end`` hook sees for one page."""

    page: str
    options: ResolvedOptions


@dataclass
class InjectionReport:
    """Counts from one :meth:`HeadInjector.inject_site` run."""

    scanned: int = 0
    changed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "scanned": self.scanned,
            "changed": len(self.changed),
            "skipped": self.skipped,
        }


class HeadInjector:
    """Collect plugin head markup and insert it into rendered pages.

    Parameters:
        values: User option values, typically the merged config file and
            CLI overrides. Undeclared keys are ignored.
        plugin_manager: Manager to dispatch hooks on. A fresh one with the
            built-in Plausible plugin is created when omitted.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        *,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        if plugin_manager is None:
            plugin_manager = PluginManager()
            load_plausible(plugin_manager)
        self._pm = plugin_manager
        self.options = OptionStore()
        self._pm.hook.declare_options(options=self.options)
        ignored = self.options.set_values(values or {})
        if ignored:
            logger.debug("Ignored undeclared options: %s", ", ".join(ignored))

    def render_head(self, page: str) -> str:
        """Rendered markup every plugin contributes to *page*'s head."""
        context = PageContext(page=page, options=self.options)
        # pluggy returns results in LIFO registration order
        nodes = reversed(self._pm.hook.page_head_end(context=context))
        return "".join(node.render() for node in nodes if node is not None)

    def inject(self, html: str, page: str) -> str:
        """Return *html* with the head markup inserted before ``</head>``.

        A head that already contains the same markup is left as is, so
        running the injection twice over a site is a no-op.
        """
        markup = self.render_head(page)
        if not markup:
            return html
        match = HEAD_CLOSE_RE.search(html)
        if match is None:
            logger.warning("No closing head tag in %s", page)
            return html
        idx = match.start()
        if markup in html[:idx]:
            return html
        return html[:idx] + markup + html[idx:]

    def inject_site(self, site_dir: Path, *, dry_run: bool = False) -> InjectionReport:
        """Inject head markup into every HTML page below *site_dir*.

        Pages are read as bytes and decoded as strict UTF-8, which keeps
        line endings intact. Undecodable pages are skipped with a warning.
        Every page is rendered before the first write, so a type fault in
        the options leaves the site untouched.
        """
        report = InjectionReport()
        pending: list[tuple[Path, bytes]] = []
        for path in sorted(site_dir.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in HTML_SUFFIXES:
                continue
            page = path.relative_to(site_dir).as_posix()
            report.scanned += 1
            try:
                original = path.read_bytes().decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.warning("Skipping %s: not valid UTF-8 (%s)", page, exc.reason)
                report.skipped.append(page)
                continue
            updated = self.inject(original, page)
            if updated == original:
                report.skipped.append(page)
                continue
            report.changed.append(page)
            pending.append((path, updated.encode("utf-8")))

        if not dry_run:
            for path, data in pending:
                path.write_bytes(data)
                logger.debug("Injected head markup into %s", path)
        return report
