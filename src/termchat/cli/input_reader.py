"""Multi-line input blocks terminated by a sentinel line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

TERMINATOR: str = "END"


@dataclass(frozen=True, slots=True)
class InputBlock:
    """Lines typed before the terminator (or end of stream)."""

    lines: tuple[str, ...]

    at_eof: bool
    """``True`` when the stream ended before a terminator was seen."""

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


def _strip_line_ending(raw: str) -> str:
    return raw.removesuffix("\n").removesuffix("\r")


def read_input_block(stream: TextIO) -> InputBlock:
    """Read lines from *stream* until a line equal to ``END`` or EOF.

    The terminator must match the whole line exactly; ``" END"`` or
    ``"end"`` are ordinary input.
    """
    lines: list[str] = []
    for raw in iter(stream.readline, ""):
        line = _strip_line_ending(raw)
        if line == TERMINATOR:
            return InputBlock(lines=tuple(lines), at_eof=False)
        lines.append(line)
    return InputBlock(lines=tuple(lines), at_eof=True)
