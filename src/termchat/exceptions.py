"""Custom exception hierarchy for termchat.

All exceptions that cross layer boundaries must inherit from
:class:`TermchatError`.  Raw third-party exceptions (e.g. from requests
or the JSON decoder) must NEVER propagate beyond the layer that called
the library — they are caught and re-raised as a typed subclass
defined here.

Hierarchy
---------
TermchatError
├── CredentialNotFoundError
├── EnvironmentError
└── TurnError
    ├── RequestEncodingError
    ├── RequestBuildError
    ├── TransportError
    ├── ResponseReadError
    ├── ResponseDecodeError
    └── ApiError
"""

from __future__ import annotations


class TermchatError(Exception):
    """Base exception for all termchat errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Startup ---------------------------------------------------------------

class CredentialNotFoundError(TermchatError):
    """Raised when no API token is available from env or disk."""


class EnvironmentError(TermchatError):
    """Raised when a required runtime dependency is not available."""


# --- Per-turn failures -----------------------------------------------------

class TurnError(TermchatError):
    """Base for failures that abandon a single turn but not the session.

    Subclasses set :attr:`label`, the diagnostic prefix the chat session
    prints in front of the message.
    """

    label: str = "Error:"


class RequestEncodingError(TurnError):
    """Raised when the conversation cannot be serialized to JSON."""

    label = "Error marshaling request:"


class RequestBuildError(TurnError):
    """Raised when the HTTP request cannot be constructed."""

    label = "Error creating request:"


class TransportError(TurnError):
    """Raised when the request cannot be sent or no response arrives."""

    label = "Error sending request:"


class ResponseReadError(TurnError):
    """Raised when the response body cannot be read to completion."""

    label = "Error reading response:"


class ResponseDecodeError(TurnError):
    """Raised when the response body is not a valid completion payload."""

    label = "Error unmarshaling response:"


class ApiError(TurnError):
    """Raised when the service answers with an error payload."""

    label = "API error:"
