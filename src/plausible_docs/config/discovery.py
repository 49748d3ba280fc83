"""Config file discovery and loading.

Walk-up finder locates docs.json, similar to how git finds .git/.
Supports PLAUSIBLE_DOCS_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import click

from plausible_docs.config.models import PlausibleOptions

CONFIG_FILENAME = "docs.json"
CONFIG_ENV_VAR = "PLAUSIBLE_DOCS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for docs.json.

    Returns the path to the config file, or None if not found.
    Checks PLAUSIBLE_DOCS_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def read_json_config(path: Path) -> dict[str, Any]:
    """Parse *path* as a JSON object, raising ClickException when invalid."""
    raw = path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise click.ClickException(msg) from exc
    if not isinstance(data, dict):
        msg = f"Invalid config in {path}: top level must be a JSON object"
        raise click.ClickException(msg)
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> PlausibleOptions:
    """Load the Plausible options from a JSON config file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns empty PlausibleOptions if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return PlausibleOptions()

    return PlausibleOptions.model_validate(read_json_config(path))
