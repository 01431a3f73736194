"""Append-only conversation transcript."""

from __future__ import annotations

from collections.abc import Iterator

from termchat.core.models import ChatMessage, Role

SYSTEM_PREAMBLE: str = "You are a helpful assistant."


class Conversation:
    """Ordered transcript sent as context on every request.

    The first entry is always the system preamble.  Entries are only
    ever appended; nothing is truncated, summarized or replaced.
    """

    def __init__(self, preamble: str = SYSTEM_PREAMBLE) -> None:
        self._messages: list[ChatMessage] = [
            ChatMessage(role=Role.SYSTEM, content=preamble),
        ]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self._messages)

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Immutable snapshot of the transcript."""
        return tuple(self._messages)

    @property
    def last(self) -> ChatMessage:
        return self._messages[-1]

    def append(self, message: ChatMessage) -> None:
        self._messages.append(message)

    def add_user(self, content: str) -> ChatMessage:
        """Append and return a user message carrying *content*."""
        message = ChatMessage(role=Role.USER, content=content)
        self.append(message)
        return message
