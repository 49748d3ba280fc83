"""Tests for the rich console helpers."""

from __future__ import annotations

import pytest
from rich.table import Table

from plausible_docs.options import OptionStore, register
from plausible_docs.output import console as console_module
from plausible_docs.output.console import DOCS_THEME, create_console, get_output, render_options


def _store() -> OptionStore:
    store = OptionStore()
    register(store)
    return store


class TestConsole:
    def test_output_goes_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_no_color_has_no_escapes(self) -> None:
        assert "\x1b[" not in render_options(_store(), no_color=True)


class TestTheme:
    def test_every_docs_style_is_used(self, monkeypatch: pytest.MonkeyPatch) -> None:
        used: set[str] = set()

        class RecordingTable(Table):
            def add_column(self, *args, style=None, **kwargs):  # type: ignore[override]
                if style:
                    used.add(str(style))
                return super().add_column(*args, style=style, **kwargs)

        monkeypatch.setattr(console_module, "Table", RecordingTable)
        render_options(_store(), no_color=True)

        declared = {name for name in DOCS_THEME.styles if name.startswith("docs.")}
        assert declared == used
