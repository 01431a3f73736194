"""Interactive chat loop: read a block, ask the service, print the reply.

The session owns the conversation.  Nothing else mutates it, and the
spinner thread never touches it.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from termchat.cli import exit_codes
from termchat.cli.input_reader import read_input_block
from termchat.cli.render import render_markdown
from termchat.cli.spinner import Spinner
from termchat.core.chat_service import ChatService
from termchat.core.conversation import Conversation
from termchat.core.models import ChatMessage
from termchat.exceptions import TurnError

PROMPT: str = "> "
REPLY_PREFIX: str = "# "


class ChatSession:
    """Runs turns until the input stream is exhausted.

    Parameters
    ----------
    service:
        Chat service used for every turn.
    conversation:
        Transcript to continue; a fresh one (system preamble only) when
        omitted.
    stdin, stdout:
        Text streams; default to the process streams.
    spinner_factory:
        Callable building a context manager around the blocking call.
    render:
        Markdown-to-terminal renderer applied to replies.
    """

    def __init__(
        self,
        service: ChatService,
        *,
        conversation: Conversation | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        spinner_factory: Callable[[TextIO], Any] = Spinner,
        render: Callable[[str], str] = render_markdown,
    ) -> None:
        self._service = service
        self.conversation: Conversation = conversation if conversation is not None else Conversation()
        self._stdin: TextIO = stdin if stdin is not None else sys.stdin
        self._stdout: TextIO = stdout if stdout is not None else sys.stdout
        self._spinner_factory = spinner_factory
        self._render = render

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Read and answer input blocks until end of input."""
        self._write(PROMPT)
        while True:
            block = read_input_block(self._stdin)
            if block.is_empty:
                if block.at_eof:
                    self._write("\n")
                    return exit_codes.SUCCESS
                self._write(PROMPT)
                continue

            self.run_turn(block.text)
            self._write("\n" + PROMPT)

    # ------------------------------------------------------------------
    # Single turn
    # ------------------------------------------------------------------

    def run_turn(self, text: str) -> ChatMessage | None:
        """Ask about *text* and print the reply.

        The user message is appended before the request is made and
        stays even when the turn fails.  Returns the appended assistant
        message, or ``None`` when nothing was appended.
        """
        self.conversation.add_user(text)

        failure: TurnError | None = None
        reply: ChatMessage | None = None
        with self._spinner_factory(self._stdout):
            try:
                reply = self._service.complete(self.conversation)
            except TurnError as exc:
                failure = exc

        if failure is not None:
            self._report(failure)
            return None
        if reply is None:
            return None

        self._write(f"\r{REPLY_PREFIX}{self._render(reply.content)}")
        self.conversation.append(reply)
        return reply

    def _report(self, exc: TurnError) -> None:
        self._write(f"\r{exc.label} {exc}")
        if exc.hint:
            self._write(f"\n{exc.hint}")
