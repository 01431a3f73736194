"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from termchat import __version__
from termchat.cli import exit_codes
from termchat.cli.app import main
from termchat.exceptions import (
    ApiError,
    CredentialNotFoundError,
    EnvironmentError,
    RequestBuildError,
    RequestEncodingError,
    ResponseDecodeError,
    ResponseReadError,
    TermchatError,
    TransportError,
    TurnError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

TURN_ERRORS = [
    RequestEncodingError,
    RequestBuildError,
    TransportError,
    ResponseReadError,
    ResponseDecodeError,
    ApiError,
]


class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [CredentialNotFoundError, EnvironmentError, TurnError, *TURN_ERRORS],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TermchatError]
    ) -> None:
        assert issubclass(exc_class, TermchatError)

    @pytest.mark.parametrize("exc_class", TURN_ERRORS)
    def test_turn_errors_share_turn_base(self, exc_class: type[TurnError]) -> None:
        assert issubclass(exc_class, TurnError)

    def test_credential_error_is_not_a_turn_error(self) -> None:
        assert not issubclass(CredentialNotFoundError, TurnError)

    def test_turn_error_labels_are_distinct(self) -> None:
        labels = {exc_class.label for exc_class in TURN_ERRORS}
        assert len(labels) == len(TURN_ERRORS)

    def test_hint_is_stored(self) -> None:
        err = TermchatError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert TermchatError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_command_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["chat-now"])
        assert exc_info.value.code == 2

    @patch("termchat.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_routes_to_run_doctor(self, _mock_doc: object) -> None:
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_no_args_routes_to_chat(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from termchat.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_chat", lambda: exit_codes.SUCCESS)
        assert main([]) == exit_codes.SUCCESS
