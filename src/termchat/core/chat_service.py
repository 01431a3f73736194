"""Core chat service — encodes requests and decodes completions.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~termchat.core.protocols.CompletionTransport`
injected at construction time, keeping the core free of any HTTP
library imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~termchat.exceptions.TermchatError` subclasses escape.
* The conversation passed in is never mutated here.
"""

from __future__ import annotations

import json
from typing import Any

from termchat.core.conversation import Conversation
from termchat.core.models import (
    ChatMessage,
    Choice,
    CompletionRequest,
    CompletionResponse,
    RawResponse,
    Role,
    Usage,
)
from termchat.core.protocols import CompletionTransport
from termchat.exceptions import (
    ApiError,
    RequestEncodingError,
    ResponseDecodeError,
    TermchatError,
    TransportError,
)

DEFAULT_MODEL: str = "gpt-3.5-turbo-0301"


class ChatService:
    """Stateless service that turns a conversation into one completion.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`CompletionTransport` protocol.
    model:
        Model identifier sent with every request.
    """

    def __init__(
        self,
        transport: CompletionTransport,
        model: str = DEFAULT_MODEL,
    ) -> None:
        self._transport: CompletionTransport = transport
        self.model: str = model

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def complete(self, conversation: Conversation) -> ChatMessage | None:
        """Send the whole *conversation* and return the first reply.

        Returns ``None`` when the service answers without a usable first
        choice; that is not an error.

        Raises
        ------
        RequestEncodingError
            If the request cannot be serialized.
        RequestBuildError, TransportError, ResponseReadError
            Propagated from the transport.
        ApiError
            If the service answers with a non-success status.
        ResponseDecodeError
            If the response body is not a completion payload.
        """
        request = CompletionRequest(model=self.model, messages=conversation.messages)
        body = self.encode_request(request)
        raw = self._post(body)
        if not raw.ok:
            raise self._api_error(raw)
        return self.decode_response(raw.body).first_message

    # ------------------------------------------------------------------
    # Transport delegation (safe boundary)
    # ------------------------------------------------------------------

    def _post(self, body: bytes) -> RawResponse:
        """Call the transport and ensure only our exceptions escape."""
        try:
            return self._transport.post(body)
        except TermchatError:
            raise
        except Exception as exc:
            raise TransportError(f"Unexpected transport error: {exc}") from exc

    # ------------------------------------------------------------------
    # Wire codec (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def encode_request(request: CompletionRequest) -> bytes:
        """Serialize *request* to UTF-8 JSON."""
        try:
            return json.dumps(request.to_dict(), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise RequestEncodingError(str(exc)) from exc

    @classmethod
    def decode_response(cls, body: bytes) -> CompletionResponse:
        """Parse a chat-completion JSON body.

        Missing fields fall back to defaults; fields present with the
        wrong type are rejected.
        """
        payload = cls._load_json(body)
        if not isinstance(payload, dict):
            raise ResponseDecodeError("Expected a JSON object at the top level.")

        try:
            raw_choices = payload.get("choices") or []
            if not isinstance(raw_choices, list):
                raise TypeError("'choices' must be a list")
            return CompletionResponse(
                choices=tuple(cls._parse_choice(entry) for entry in raw_choices),
                usage=cls._parse_usage(payload.get("usage")),
                id=str(payload.get("id") or ""),
                model=str(payload.get("model") or ""),
                object=str(payload.get("object") or ""),
                created=int(payload.get("created") or 0),
            )
        except (TypeError, ValueError) as exc:
            raise ResponseDecodeError(str(exc)) from exc

    @staticmethod
    def _load_json(body: bytes) -> Any:
        try:
            return json.loads(body)
        except (UnicodeDecodeError, ValueError) as exc:
            raise ResponseDecodeError(str(exc)) from exc

    @staticmethod
    def _parse_message(raw: object) -> ChatMessage | None:
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise TypeError("'message' must be an object")
        content = raw.get("content")
        return ChatMessage(
            role=Role(raw.get("role") or Role.ASSISTANT.value),
            content="" if content is None else str(content),
        )

    @classmethod
    def _parse_choice(cls, raw: object) -> Choice:
        if not isinstance(raw, dict):
            raise TypeError("each choice must be an object")
        return Choice(
            index=int(raw.get("index") or 0),
            finish_reason=str(raw.get("finish_reason") or ""),
            message=cls._parse_message(raw.get("message")),
        )

    @staticmethod
    def _parse_usage(raw: object) -> Usage:
        if raw is None:
            return Usage()
        if not isinstance(raw, dict):
            raise TypeError("'usage' must be an object")
        return Usage(
            prompt_tokens=int(raw.get("prompt_tokens") or 0),
            completion_tokens=int(raw.get("completion_tokens") or 0),
            total_tokens=int(raw.get("total_tokens") or 0),
        )

    # ------------------------------------------------------------------
    # Error payloads
    # ------------------------------------------------------------------

    @staticmethod
    def _api_error(raw: RawResponse) -> ApiError:
        """Build an :class:`ApiError` from a non-success response."""
        message = f"HTTP {raw.status_code}"
        try:
            payload = json.loads(raw.body)
        except (UnicodeDecodeError, ValueError):
            payload = None

        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            detail = payload["error"].get("message")
            if detail:
                message = f"{message}: {detail}"

        hint = None
        if raw.status_code == 401:
            hint = "Check the token in OPENAI_API_TOKEN or ~/.openai/token."
        return ApiError(message, hint=hint)
