"""Allow ``python -m termchat`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m termchat`` behaves identically to the ``termchat`` console
script.
"""

from __future__ import annotations

from termchat.cli.app import cli

if __name__ == "__main__":
    cli()
