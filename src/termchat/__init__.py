"""termchat — multi-line terminal chat client for chat-completion APIs.

Built on requests and Rich with a strict layered architecture.
"""

from termchat.version import __version__

__all__: list[str] = ["__version__"]
