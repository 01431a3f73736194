"""Tests for API token lookup (infra/credentials.py).

Environment and home directory are injected — the real ones are never
read.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from termchat.exceptions import CredentialNotFoundError
from termchat.infra.credentials import (
    SOURCE_ENVIRONMENT,
    SOURCE_FILE,
    TOKEN_ENV_VAR,
    Credential,
    find_credential,
    require_credential,
    token_file_path,
)


def _write_token(home: Path, text: str) -> Path:
    path = home / ".openai" / "token"
    path.parent.mkdir(parents=True)
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# find_credential
# ---------------------------------------------------------------------------

class TestFindCredential:
    def test_environment_variable(self, tmp_path: Path) -> None:
        cred = find_credential({TOKEN_ENV_VAR: "sk-env"}, tmp_path)
        assert cred == Credential(token="sk-env", source=SOURCE_ENVIRONMENT)

    def test_environment_preferred_over_file(self, tmp_path: Path) -> None:
        _write_token(tmp_path, "sk-file")
        cred = find_credential({TOKEN_ENV_VAR: "sk-env"}, tmp_path)
        assert cred is not None
        assert cred.token == "sk-env"

    def test_file_fallback_is_trimmed(self, tmp_path: Path) -> None:
        _write_token(tmp_path, "  sk-file\n\n")
        cred = find_credential({}, tmp_path)
        assert cred == Credential(token="sk-file", source=SOURCE_FILE)

    def test_empty_environment_value_falls_back_to_file(self, tmp_path: Path) -> None:
        _write_token(tmp_path, "sk-file")
        cred = find_credential({TOKEN_ENV_VAR: ""}, tmp_path)
        assert cred is not None
        assert cred.source == SOURCE_FILE

    def test_nothing_available(self, tmp_path: Path) -> None:
        assert find_credential({}, tmp_path) is None

    def test_blank_file_counts_as_missing(self, tmp_path: Path) -> None:
        _write_token(tmp_path, "   \n")
        assert find_credential({}, tmp_path) is None

    def test_defaults_to_process_environment(
        self, isolated_home: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv(TOKEN_ENV_VAR, "sk-process")
        cred = find_credential()
        assert cred is not None
        assert cred.token == "sk-process"

    def test_defaults_to_home_directory(self, isolated_home: Path) -> None:
        _write_token(isolated_home, "sk-home")
        cred = find_credential()
        assert cred is not None
        assert cred.token == "sk-home"


# ---------------------------------------------------------------------------
# require_credential
# ---------------------------------------------------------------------------

class TestRequireCredential:
    def test_returns_credential(self, tmp_path: Path) -> None:
        assert require_credential({TOKEN_ENV_VAR: "sk"}, tmp_path).token == "sk"

    def test_missing_raises_with_guidance(self, tmp_path: Path) -> None:
        with pytest.raises(CredentialNotFoundError) as exc_info:
            require_credential({}, tmp_path)
        hint = exc_info.value.hint
        assert hint is not None
        assert TOKEN_ENV_VAR in hint
        assert "~/.openai/token" in hint


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------

class TestCredentialMisc:
    def test_repr_hides_token(self) -> None:
        assert "sk-secret" not in repr(Credential(token="sk-secret", source=SOURCE_FILE))

    def test_token_file_path(self, tmp_path: Path) -> None:
        assert token_file_path(tmp_path) == tmp_path / ".openai" / "token"
