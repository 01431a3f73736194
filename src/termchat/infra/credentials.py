"""Infrastructure: API token lookup.

The token comes from the ``OPENAI_API_TOKEN`` environment variable or,
when that is unset or empty, from ``~/.openai/token``.

Rules
-----
* Read-only — nothing is ever written to disk.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from termchat.exceptions import CredentialNotFoundError

TOKEN_ENV_VAR: str = "OPENAI_API_TOKEN"
TOKEN_FILE: Path = Path(".openai") / "token"

SOURCE_ENVIRONMENT: str = "environment"
SOURCE_FILE: str = "file"


@dataclass(frozen=True, slots=True)
class Credential:
    """A resolved bearer token and where it was found."""

    token: str
    source: str

    def __repr__(self) -> str:
        return f"Credential(token='***', source={self.source!r})"


def token_file_path(home: Path | None = None) -> Path:
    """Return the fallback token file location under *home*."""
    return (home if home is not None else Path.home()) / TOKEN_FILE


def find_credential(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Credential | None:
    """Look up the token, preferring the environment over the file.

    Returns ``None`` when neither source yields a non-empty token.
    """
    env = os.environ if environ is None else environ

    token = env.get(TOKEN_ENV_VAR, "")
    if token:
        return Credential(token=token, source=SOURCE_ENVIRONMENT)

    try:
        token = token_file_path(home).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None

    if not token:
        return None
    return Credential(token=token, source=SOURCE_FILE)


def require_credential(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Credential:
    """Locate the token or raise :class:`CredentialNotFoundError`."""
    credential = find_credential(environ, home)
    if credential is None:
        raise CredentialNotFoundError(
            "No API token found.",
            hint=(
                f"Please set either the {TOKEN_ENV_VAR} environment variable "
                "or create the ~/.openai/token file"
            ),
        )
    return credential
