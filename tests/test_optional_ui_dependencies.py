"""Regression tests for the optional Rich dependency.

Output must be identical whether it goes through Rich or through the
plain ``print`` fallback used when Rich cannot be imported.
"""

from __future__ import annotations

import io
import sys

import pytest

from subcmd import Application
from subcmd.cli import exit_codes
from subcmd.cli.console import ConsoleProxy, get_rich_console
from subcmd.exceptions import EnvironmentError
from subcmd.infra.flagset import FlagSet


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    app = Application("myapp", "0.0.1")

    with pytest.raises(SystemExit) as exc_info:
        app.run(["version"])

    assert exc_info.value.code == exit_codes.SUCCESS
    assert capsys.readouterr().out == "myapp v0.0.1\n"


def test_usage_identical_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    app = Application("myapp", "0.0.1")
    with pytest.raises(SystemExit):
        app.run(["help"])
    with_rich = capsys.readouterr().err

    _hide_rich(monkeypatch)
    with pytest.raises(SystemExit):
        app.run(["help"])
    without_rich = capsys.readouterr().err

    assert with_rich == without_rich == app.format_usage()


class TabbedCommand:
    def flags(self, flags: FlagSet) -> None:
        flags.add_string("sep", "", "field\tseparator")

    def run(self) -> None: ...

    def __str__(self) -> str:
        return "Split\tfields."


def test_tabs_written_verbatim_with_and_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    app = Application("myapp", "0.0.1")
    app.rule(TabbedCommand(), "split")

    with pytest.raises(SystemExit):
        app.run(["help"])
    with_rich = capsys.readouterr().err

    _hide_rich(monkeypatch)
    with pytest.raises(SystemExit):
        app.run(["help"])
    without_rich = capsys.readouterr().err

    assert "field\tseparator" in with_rich
    assert "Split\tfields." in with_rich
    assert with_rich == without_rich == app.format_usage()


def test_console_proxy_keeps_control_text() -> None:
    buffer = io.StringIO()
    ConsoleProxy(file=buffer).write("a\tb [options] :smile:\n")
    assert buffer.getvalue() == "a\tb [options] :smile:\n"
