"""CLI application entry point and command routing for termchat.

This module is the **sole error boundary** for the entire application.
It catches :class:`~termchat.exceptions.TermchatError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Per-turn failures never reach this boundary; the chat session reports
them and keeps going.  Only startup problems (no API token, missing
dependencies) end the process here.
"""

from __future__ import annotations

import argparse
import sys

from termchat.cli import exit_codes
from termchat.cli.console import console
from termchat.exceptions import TermchatError
from termchat.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``termchat``           — interactive chat (blocks end with ``END``)
    * ``termchat doctor``    — environment diagnostics
    * ``termchat --version``
    """
    parser = argparse.ArgumentParser(
        prog="termchat",
        description=(
            "Chat with a completion model from the terminal. "
            "Type a message over one or more lines and finish it with a "
            "line containing only END."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=["doctor"],
        help="Run 'doctor' to check the environment instead of chatting.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_chat() -> int:
    """Resolve the token, wire the service, and run the chat loop.

    The token is resolved before anything else, so a missing token
    never reaches the network or the input loop.
    """
    from termchat.cli.session import ChatSession
    from termchat.core.chat_service import ChatService
    from termchat.infra.credentials import require_credential
    from termchat.infra.http_transport import RequestsTransport

    credential = require_credential()

    with RequestsTransport(credential.token) as transport:
        session = ChatSession(ChatService(transport))
        return session.run()


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from termchat.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the termchat CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_chat()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a
    raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TermchatError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
