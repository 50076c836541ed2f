"""Line index over a source file with whole-file character offsets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

UNAVAILABLE_ANCHOR = "unavailable"


@dataclass(frozen=True, slots=True)
class SourceLine:
    text: str
    start_offset: int

    @property
    def stripped(self) -> str:
        """Line text without its terminator."""
        return strip_terminator(self.text)


def strip_terminator(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def decode_source(data: bytes) -> str:
    # surrogateescape keeps one code point per invalid byte and round-trips on encode
    return data.decode("utf-8", errors="surrogateescape")


def build_line_index(text: str) -> list[SourceLine]:
    """Split *text* on newlines, recording each line's code-point offset.

    Only ``"\\n"`` terminates a line; a final unterminated line is kept.
    """
    lines: list[SourceLine] = []
    offset = 0
    start = 0
    length = len(text)
    while start < length:
        end = text.find("\n", start)
        end = length if end == -1 else end + 1
        chunk = text[start:end]
        lines.append(SourceLine(text=chunk, start_offset=offset))
        offset += len(chunk)
        start = end
    return lines


def read_line_index(path: Path | str) -> list[SourceLine]:
    return build_line_index(decode_source(Path(path).read_bytes()))


def lookup_line(lines: Sequence[SourceLine], line: int) -> SourceLine | None:
    """Return the 1-based *line*, or None when it is outside the index."""
    if line < 1 or line > len(lines):
        return None
    return lines[line - 1]
