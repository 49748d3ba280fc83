"""Tests for the root plausible-docs CLI."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from plausible_docs import __version__
from plausible_docs.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "plausible-docs" in result.output
    for command in ("snippet", "inject", "options"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner, project_root: Path) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--log-json", "--version"])
    assert result.exit_code == 0


def test_invalid_config_json_fails(cli_runner: CliRunner, project_root: Path) -> None:
    (project_root / "docs.json").write_text("{oops", encoding="utf-8")
    result = cli_runner.invoke(cli, ["snippet"])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_missing_config_flag_fails(cli_runner: CliRunner, project_root: Path) -> None:
    result = cli_runner.invoke(cli, ["-c", str(project_root / "tyop.json"), "snippet"])
    assert result.exit_code == 1
    assert "Config file not found" in result.stderr
