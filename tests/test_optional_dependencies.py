"""Regression tests for optional runtime dependencies (rich/requests).

Bootstrap commands must keep working when either package is missing,
while the paths that actually need them fail cleanly with a typed
environment error.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from termchat.cli import exit_codes
from termchat.cli.app import main
from termchat.exceptions import EnvironmentError
from termchat.infra.credentials import TOKEN_ENV_VAR
from termchat.infra.http_transport import RequestsTransport


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.table", "rich.markdown"):
        monkeypatch.setitem(sys.modules, name, None)


def _hide_requests(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "requests", None)


def test_help_works_without_rich_or_requests(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_requests(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, isolated_home: Path,
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setenv(TOKEN_ENV_VAR, "sk-test")

    assert main(["doctor"]) == exit_codes.SUCCESS


def test_doctor_fails_without_requests(
    monkeypatch: pytest.MonkeyPatch, isolated_home: Path,
) -> None:
    _hide_requests(monkeypatch)
    monkeypatch.setenv(TOKEN_ENV_VAR, "sk-test")

    assert main(["doctor"]) == exit_codes.GENERAL_ERROR


def test_transport_raises_environment_error_without_requests(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_requests(monkeypatch)

    with pytest.raises(EnvironmentError, match="requests is not installed"):
        RequestsTransport("sk-test").post(b"{}")


def test_render_raises_environment_error_without_rich(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from termchat.cli.render import render_markdown

    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        render_markdown("**hi**")
