"""Cosmetic block-glyph spinner shown while a request is in flight.

Design
------
* A daemon thread redraws the current line every :data:`INTERVAL`
  seconds until its stop event is set.
* :meth:`Spinner.stop` joins the thread, so nothing is drawn after it
  returns.
* The thread only reads the constant glyph table and writes to the
  stream; it shares no other state with the caller.
"""

from __future__ import annotations

import sys
import threading
from typing import TextIO

GLYPHS: tuple[str, ...] = (
    "▁", "▃", "▄", "▅", "▆", "▇", "█", "▇", "▆", "▅", "▄", "▃",
)
INTERVAL: float = 0.1


class Spinner:
    """Background ticker writing ``\\r<glyph>`` to *stream*.

    Usage::

        with Spinner(sys.stdout):
            reply = service.complete(conversation)
    """

    def __init__(self, stream: TextIO | None = None, interval: float = INTERVAL) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdout
        self._interval: float = interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._thread is not None

    def start(self) -> None:
        """Start animating (no-op when already running)."""
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._spin, name="termchat-spinner", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop animating and wait for the thread to exit (idempotent)."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None

    # ------------------------------------------------------------------
    # Worker
    # ------------------------------------------------------------------

    def _spin(self) -> None:
        i = 0
        while not self._stop_event.is_set():
            self._stream.write(f"\r{GLYPHS[i]}")
            self._stream.flush()
            i = (i + 1) % len(GLYPHS)
            self._stop_event.wait(self._interval)
