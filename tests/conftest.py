"""Shared pytest fixtures and test helpers for plausible-docs tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

# Pages of a small generated documentation site.
PAGE_NAMES = ("index.html", "modules.html", "functions/func.html")

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body><h1>{title}</h1></body>
</html>
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("plausible_docs")
    pkg_level = pkg.level
    pkg_handlers = pkg.handlers[:]
    pkg_propagate = pkg.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.handlers = pkg_handlers
    pkg.setLevel(pkg_level)
    pkg.propagate = pkg_propagate


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of config discovery."""
    monkeypatch.delenv("PLAUSIBLE_DOCS_CONFIG", raising=False)
    monkeypatch.delenv("PLAUSIBLE_DOCS_PLAUSIBLE__SITE_DOMAIN", raising=False)
    monkeypatch.delenv("PLAUSIBLE_DOCS_PLAUSIBLE__SITE_ORIGIN", raising=False)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory used as CWD."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def docs_site(project_root: Path) -> Path:
    """A built documentation site with a few HTML pages and one asset."""
    site = project_root / "docs"
    for name in PAGE_NAMES:
        page = site / name
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text(PAGE_TEMPLATE.format(title=name), encoding="utf-8")
    (site / "assets").mkdir()
    (site / "assets" / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    return site


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_config(root: Path, **values: Any) -> Path:
    """Write a docs.json into *root* with *values* and return its path."""
    path = root / "docs.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    return path


def read_pages(site: Path) -> dict[str, str]:
    """Return page name -> HTML for every generated page."""
    return {name: (site / name).read_text(encoding="utf-8") for name in PAGE_NAMES}
