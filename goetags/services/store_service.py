"""Writing tag blocks to the destination TAGS file."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..errors import TagStoreError
from ..text import Messages
from .tag_service import FileTagBlock


def serialize_blocks(blocks: Sequence[FileTagBlock]) -> bytes:
    return b"".join(block.to_bytes() for block in blocks)


def write_tag_store(
    path: Path | str,
    blocks: Sequence[FileTagBlock],
    *,
    append: bool = False,
) -> int:
    """Write *blocks* to *path* in one pass and return the bytes written.

    Append mode never truncates. Blocks for a path already in the file are
    not deduplicated.
    """
    target = Path(path)
    if not blocks:
        raise TagStoreError(Messages.ERROR_STORE_EMPTY.format(path=target))
    payload = serialize_blocks(blocks)
    mode = "ab" if append else "wb"
    try:
        handle = target.open(mode)
    except OSError as exc:
        raise TagStoreError(
            Messages.ERROR_STORE_OPEN.format(path=target, reason=exc.strerror or exc)
        ) from exc
    try:
        with handle:
            handle.write(payload)
    except OSError as exc:
        raise TagStoreError(
            Messages.ERROR_STORE_WRITE.format(path=target, reason=exc.strerror or exc)
        ) from exc
    return len(payload)
