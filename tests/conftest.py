"""Shared pytest fixtures and configuration for the termchat test suite.

Guidelines
----------
* No internet access in any test.
* The HTTP stack is mocked at the transport boundary.
* Tests must not depend on the real environment or home directory.
"""

from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import Any

import pytest

from termchat.infra.credentials import TOKEN_ENV_VAR


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at an empty directory and unset the token env var."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv(TOKEN_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def quiet_spinner() -> Any:
    """Spinner factory that draws nothing."""
    return lambda _stream: nullcontext()
