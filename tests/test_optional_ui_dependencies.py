"""Regression tests for running without the optional Rich UI package."""

from __future__ import annotations

import logging
import sys
from unittest.mock import patch

import pytest

from conftest import make_release
from helm_cli.cli import exit_codes
from helm_cli.cli.app import main
from helm_cli.cli.console import configure_logging, console, escape_markup
from helm_cli.core.models import InstallResponse


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain message")
    assert capsys.readouterr().err == "plain message\n"


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    handler = configure_logging(verbose=True)
    assert type(handler) is logging.StreamHandler
    assert logging.getLogger("helm_cli").level == logging.DEBUG


def test_configure_logging_replaces_previous_handler() -> None:
    configure_logging()
    handler = configure_logging()
    assert logging.getLogger("helm_cli").handlers == [handler]
    assert logging.getLogger("helm_cli").level == logging.WARNING


def test_install_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    with patch("helm_cli.infra.tiller_client.TillerHttpInstaller") as mock_cls:
        mock_cls.return_value.install_release.return_value = InstallResponse(
            release=make_release(),
        )
        assert main(["install", "mychart"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "myapp\n"


def test_escape_markup_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert escape_markup("invalid path [/etc/x]") == "invalid path [/etc/x]"
