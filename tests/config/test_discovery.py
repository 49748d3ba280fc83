"""Tests for docs.json discovery and loading."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from plausible_docs.config.discovery import (
    CONFIG_ENV_VAR,
    find_config,
    load_config,
    read_json_config,
)
from tests.conftest import write_config


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, plausibleSiteDomain="a.com")
        assert find_config(tmp_path) == path

    def test_walks_up(self, tmp_path: Path) -> None:
        path = write_config(tmp_path)
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == path

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_config(tmp_path)
        other = tmp_path / "other.json"
        other.write_text("{}", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_config(tmp_path)
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.json"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_no_file_gives_empty_options(self, project_root: Path) -> None:
        options = load_config(cwd=project_root)
        assert options.as_option_values() == {}

    def test_reads_plausible_keys_only(self, tmp_path: Path) -> None:
        path = write_config(
            tmp_path,
            entryPoints=["./index.ts"],
            plausibleSiteDomain="sub.example.com",
            plausibleSiteOrigin="my.owndomain.com/js/",
        )
        options = load_config(path)
        assert options.as_option_values() == {
            "plausibleSiteDomain": "sub.example.com",
            "plausibleSiteOrigin": "my.owndomain.com/js/",
        }

    def test_wrong_types_kept_as_is(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, plausibleSiteDomain=5)
        assert load_config(path).site_domain == 5

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid JSON"):
            read_json_config(path)

    def test_top_level_must_be_object(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(click.ClickException, match="JSON object"):
            read_json_config(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "docs.json"
        path.write_text("", encoding="utf-8")
        assert read_json_config(path) == {}
