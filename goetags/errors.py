"""Exception types raised by goetags."""

from __future__ import annotations


class GoetagsError(RuntimeError):
    """Base class for goetags failures."""


class SourceParseError(GoetagsError):
    """Raised when a source file does not parse cleanly."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class ReceiverShapeError(GoetagsError):
    """Raised when a method receiver is neither ``T`` nor ``*T``."""

    def __init__(self, method: str, shape: str, *, line: int | None = None) -> None:
        super().__init__(
            f"unexpected receiver type {shape!r} on method {method}"
            + (f" at line {line}" if line is not None else "")
        )
        self.method = method
        self.shape = shape
        self.line = line


class TagStoreError(GoetagsError):
    """Raised when the destination tag file cannot be written."""
