"""Render assistant replies from markdown to ANSI-styled terminal text."""

from __future__ import annotations

import io
from typing import Any

from termchat.exceptions import EnvironmentError

RENDER_WIDTH: int = 80


def _import_rich_markdown() -> tuple[type[Any], type[Any]]:
    """Import Rich's console and markdown classes lazily."""
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console, Markdown


def render_markdown(content: str, width: int = RENDER_WIDTH) -> str:
    """Return *content* rendered as terminal text wrapped to *width* columns.

    Styling is always emitted as ANSI escape sequences, whether or not
    the real stdout is a terminal.  The trailing newline is stripped.
    """
    console_class, markdown_class = _import_rich_markdown()
    console = console_class(
        file=io.StringIO(),
        width=width,
        force_terminal=True,
        color_system="standard",
        legacy_windows=False,
    )
    with console.capture() as capture:
        console.print(markdown_class(content))
    return capture.get().rstrip("\n")
