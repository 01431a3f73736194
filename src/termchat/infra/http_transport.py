"""requests-backed implementation of :class:`~termchat.core.protocols.CompletionTransport`.

This module is the **only** place in the codebase that imports
``requests``.  Every requests exception is caught here and re-raised as
a typed :class:`~termchat.exceptions.TurnError` subclass — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from typing import Any

from termchat.core.models import RawResponse
from termchat.exceptions import (
    EnvironmentError,
    RequestBuildError,
    ResponseReadError,
    TransportError,
)

COMPLETIONS_URL: str = "https://api.openai.com/v1/chat/completions"


def _import_requests() -> Any:
    """Import requests lazily so ``--help``/``doctor`` work without it."""
    try:
        import requests
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "requests is not installed. Install with: pip install requests",
        ) from exc
    return requests


class RequestsTransport:
    """Concrete :class:`CompletionTransport` backed by a requests session.

    Usage::

        transport = RequestsTransport(token)
        raw = transport.post(b'{"model": "...", "messages": [...]}')

    No timeout is applied and nothing is retried; a call blocks until
    the service answers or the connection fails.
    """

    def __init__(self, token: str, url: str = COMPLETIONS_URL) -> None:
        self._token: str = token
        self.url: str = url
        self._session: Any = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections (idempotent)."""
        if self._session is not None:
            self._session.close()
            self._session = None

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    def post(self, body: bytes) -> RawResponse:
        """POST *body* to the completions endpoint.

        Raises
        ------
        RequestBuildError
            When requests rejects the URL or headers.
        TransportError
            When the connection fails before a response arrives.
        ResponseReadError
            When the body stream breaks while being read.
        """
        requests = _import_requests()
        if self._session is None:
            self._session = requests.Session()
        session = self._session

        try:
            prepared = session.prepare_request(
                requests.Request("POST", self.url, data=body, headers=self.build_headers()),
            )
        except (requests.RequestException, ValueError) as exc:
            raise RequestBuildError(str(exc)) from exc

        try:
            settings = session.merge_environment_settings(
                prepared.url, {}, True, None, None,
            )
            response = session.send(prepared, **settings)
        except requests.RequestException as exc:
            raise TransportError(
                str(exc),
                hint="Check your network connection and try again.",
            ) from exc

        try:
            try:
                content = response.content
            except (requests.RequestException, OSError) as exc:
                raise ResponseReadError(str(exc)) from exc
            return RawResponse(status_code=response.status_code, body=content)
        finally:
            response.close()
