"""Core / service layer — conversation state and the wire codec.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from termchat.core.chat_service import DEFAULT_MODEL, ChatService
from termchat.core.conversation import SYSTEM_PREAMBLE, Conversation
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

__all__: list[str] = [
    "DEFAULT_MODEL",
    "SYSTEM_PREAMBLE",
    "ChatMessage",
    "ChatService",
    "Choice",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionTransport",
    "Conversation",
    "RawResponse",
    "Role",
    "Usage",
]
