"""Infrastructure layer — external system integration.

This layer wraps all interaction with the HTTP stack and the local
filesystem.  Every raw third-party exception must be caught here and
re-raised as a :class:`~termchat.exceptions.TermchatError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from termchat.infra.credentials import Credential, find_credential, require_credential
from termchat.infra.http_transport import COMPLETIONS_URL, RequestsTransport

__all__: list[str] = [
    "COMPLETIONS_URL",
    "Credential",
    "RequestsTransport",
    "find_credential",
    "require_credential",
]
