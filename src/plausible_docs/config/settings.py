"""Unified settings — CLI flags, env vars, and JSON config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PLAUSIBLE_DOCS_*`` prefix
  3. JSON file    — ``docs.json`` discovered via walk-up
  4. Option defaults — declared by the registrar

Uses Pydantic Settings v2 with a custom :class:`JsonSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`plausible_docs.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from plausible_docs.config.discovery import find_config, read_json_config
from plausible_docs.config.models import PlausibleOptions


class JsonSettingsSource(PydanticBaseSettingsSource):
    """Read the Plausible keys from a ``docs.json`` file."""

    def __init__(self, settings_cls: type[BaseSettings], json_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if json_path and json_path.is_file():
            options = PlausibleOptions.model_validate(read_json_config(json_path))
            # Field names, so env vars and CLI overrides merge onto the same keys.
            self._data = {"plausible": options.model_dump(exclude_none=True)}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for JSON path during construction.
_tls = threading.local()


class DocsSettings(BaseSettings):
    """Settings for the plausible-docs CLI.

    Attributes:
        project_root: Directory holding ``docs.json`` (or CWD if none found).
        config_path: The config file actually read, if any.
        plausible: Site domain and origin as configured by the user.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PLAUSIBLE_DOCS_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False

    plausible: PlausibleOptions = Field(default_factory=PlausibleOptions)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert JSON source between env vars and defaults."""
        json_path = getattr(_tls, "json_path", None)
        return (
            init_settings,
            env_settings,
            JsonSettingsSource(settings_cls, json_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> DocsSettings:
        """Construct settings from CLI invocation.

        Discovers ``docs.json`` via walk-up, or reads the explicit
        *config_path*, which must exist (ClickException otherwise). Then
        resolves *project_root* from the config file's parent directory
        and merges CLI flags as highest-priority overrides.
        """
        json_path: Path | None = None
        if config_path:
            json_path = Path(config_path)
            if not json_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            json_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = json_path.parent if json_path else Path.cwd()

        _tls.json_path = json_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=json_path,
                **cli_flags,
            )
        finally:
            _tls.json_path = None

    def option_values(
        self,
        *,
        site_domain: str | None = None,
        site_origin: str | None = None,
    ) -> dict[str, Any]:
        """Option-name keyed values with per-command overrides applied."""
        return self.plausible.with_overrides(
            site_domain=site_domain, site_origin=site_origin
        ).as_option_values()
