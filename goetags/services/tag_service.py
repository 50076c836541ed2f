"""Formatting of declarations into etags records and per-file blocks."""

from __future__ import annotations

import errno
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from .go_parser import Declaration, DeclarationKind, parse_declarations
from .source_service import (
    UNAVAILABLE_ANCHOR,
    SourceLine,
    build_line_index,
    decode_source,
    lookup_line,
    strip_terminator,
)

NAME_SEPARATOR = "\x7f"
LINE_SEPARATOR = "\x01"
BLOCK_START = "\f\n"
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


@dataclass(frozen=True, slots=True)
class TagRecord:
    anchor_text: str
    qualified_name: str
    line: int
    byte_offset: int

    def serialize(self) -> str:
        return (
            f"{self.anchor_text}{NAME_SEPARATOR}{self.qualified_name}"
            f"{LINE_SEPARATOR}{self.line},{self.byte_offset}\n"
        )


@dataclass(slots=True)
class FileTagBlock:
    """All tag records of one file, preceded by a ``\\f`` header on output."""

    file_path: str
    records: list[TagRecord] = field(default_factory=list)

    def records_bytes(self) -> bytes:
        return "".join(record.serialize() for record in self.records).encode(
            ENCODING, errors=ENCODING_ERRORS
        )

    @property
    def byte_length(self) -> int:
        return len(self.records_bytes())

    def header(self, byte_length: int | None = None) -> bytes:
        size = self.byte_length if byte_length is None else byte_length
        return f"{BLOCK_START}{self.file_path},{size}\n".encode(
            ENCODING, errors=ENCODING_ERRORS
        )

    def to_bytes(self) -> bytes:
        body = self.records_bytes()
        return self.header(len(body)) + body


def locate_anchor(line: SourceLine, identifier: str) -> str:
    """Return the line prefix ending one character past *identifier*.

    Falls back to the whole line when the identifier text is not on it.
    """
    position = line.text.find(identifier) if identifier else -1
    if position == -1:
        return line.stripped
    return strip_terminator(line.text[: position + len(identifier) + 1])


def qualify_name(declaration: Declaration, *, full_tag: bool = False) -> str:
    if declaration.kind is DeclarationKind.METHOD and declaration.receiver_type:
        if full_tag:
            return f"{declaration.package_name}.{declaration.receiver_type}.{declaration.name}"
        return f"{declaration.receiver_type}.{declaration.name}"
    return f"{declaration.package_name}.{declaration.name}"


def format_tag(
    declaration: Declaration,
    lines: Sequence[SourceLine],
    *,
    full_tag: bool = False,
) -> TagRecord:
    qualified = qualify_name(declaration, full_tag=full_tag)
    source_line = lookup_line(lines, declaration.line)
    if source_line is None:
        # declaration line past the end of the indexed text
        return TagRecord(UNAVAILABLE_ANCHOR, qualified, declaration.line, 0)
    return TagRecord(
        anchor_text=locate_anchor(source_line, declaration.name),
        qualified_name=qualified,
        line=declaration.line,
        byte_offset=source_line.start_offset,
    )


def build_file_block(
    file_path: Path | str,
    declarations: Sequence[Declaration],
    lines: Sequence[SourceLine],
    *,
    full_tag: bool = False,
) -> FileTagBlock:
    return FileTagBlock(
        file_path=str(file_path),
        records=[format_tag(decl, lines, full_tag=full_tag) for decl in declarations],
    )


def tag_source(
    file_path: Path | str,
    source: bytes,
    *,
    full_tag: bool = False,
) -> FileTagBlock:
    declarations = parse_declarations(source, file_path)
    lines = build_line_index(decode_source(source))
    return build_file_block(file_path, declarations, lines, full_tag=full_tag)


def tag_file(file_path: Path | str, *, full_tag: bool = False) -> FileTagBlock:
    """Read, parse and format one file; OSError and parse errors propagate.

    A name the OS cannot open at all (an embedded NUL byte) is reported as an
    OSError like any other unreadable file.
    """
    try:
        source = Path(file_path).read_bytes()
    except ValueError as exc:
        raise OSError(errno.EINVAL, str(exc), str(file_path)) from exc
    return tag_source(file_path, source, full_tag=full_tag)
