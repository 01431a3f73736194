"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol

from termchat.core.models import RawResponse


class CompletionTransport(Protocol):
    """Contract for chat-completion HTTP backends.

    Any object that implements :meth:`post` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def post(self, body: bytes) -> RawResponse:
        """Send *body* (a serialized JSON request) and return the reply.

        Implementations must read the whole response body, release the
        underlying connection on every exit path, and map all backend
        exceptions to :class:`~termchat.exceptions.TurnError` subclasses.

        Raises
        ------
        RequestBuildError
            When the HTTP request cannot be constructed.
        TransportError
            When sending fails or no response is received.
        ResponseReadError
            When the body cannot be read to completion.
        """
        ...  # pragma: no cover
