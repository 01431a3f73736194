"""Domain models for termchat.

Messages and response pieces are **frozen** dataclasses — immutable
value objects with no behaviour beyond data access and their JSON
shape.  They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(str, Enum):
    """Author of a :class:`ChatMessage`."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


# ---------------------------------------------------------------------------
# Conversation messages
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ChatMessage:
    """A single entry of the conversation transcript."""

    role: Role
    """Who wrote the message."""

    content: str
    """Raw message text (markdown for assistant replies)."""

    def to_dict(self) -> dict[str, str]:
        """Return the wire representation ``{"role": ..., "content": ...}``."""
        return {"role": self.role.value, "content": self.content}


# ---------------------------------------------------------------------------
# Outbound request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """Snapshot of the conversation addressed to one model."""

    model: str
    messages: tuple[ChatMessage, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
        }


# ---------------------------------------------------------------------------
# Inbound response
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Usage:
    """Token accounting reported by the service."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class Choice:
    """One candidate answer.  ``message`` is ``None`` when absent or null."""

    index: int = 0
    finish_reason: str = ""
    message: ChatMessage | None = None


@dataclass(frozen=True, slots=True)
class CompletionResponse:
    """Parsed chat-completion response.

    Only the first choice is consumed by the chat session; the other
    fields are kept for completeness.
    """

    choices: tuple[Choice, ...] = ()
    usage: Usage = field(default_factory=Usage)
    id: str = ""
    model: str = ""
    object: str = ""
    created: int = 0

    @property
    def first_message(self) -> ChatMessage | None:
        """The first choice's message, or ``None`` when there is none."""
        if not self.choices:
            return None
        return self.choices[0].message


# ---------------------------------------------------------------------------
# Transport envelope
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RawResponse:
    """HTTP status and fully-read body handed back by a transport."""

    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
