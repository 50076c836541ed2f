"""Concurrent tagging of many files with input-ordered results."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from ..config import DEFAULT_WORKERS
from ..errors import ReceiverShapeError, SourceParseError
from .tag_service import FileTagBlock, tag_file

_RECOVERABLE_ERRORS = (OSError, SourceParseError, ReceiverShapeError)


@dataclass(frozen=True, slots=True)
class FileFailure:
    path: str
    reason: str


@dataclass(slots=True)
class PipelineResult:
    blocks: list[FileTagBlock] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.blocks


def _resolve_workers(value: int | None) -> int:
    return max(int(value or DEFAULT_WORKERS), 1)


def _describe_failure(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__


def generate_file_blocks(
    paths: Sequence[Path | str],
    *,
    full_tag: bool = False,
    workers: int | None = DEFAULT_WORKERS,
    tagger: Callable[..., FileTagBlock] = tag_file,
) -> PipelineResult:
    """Tag every path on a fixed worker pool and return blocks in input order.

    Files that cannot be read or parsed are reported in ``failures`` and
    contribute no block; they never abort the batch.
    """
    if not paths:
        return PipelineResult()
    max_workers = min(_resolve_workers(workers), len(paths))
    blocks_by_index: list[FileTagBlock | None] = [None] * len(paths)
    failures_by_index: list[FileFailure | None] = [None] * len(paths)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_map = {
            executor.submit(tagger, str(path), full_tag=full_tag): idx
            for idx, path in enumerate(paths)
        }
        for future in as_completed(future_map):
            idx = future_map[future]
            try:
                blocks_by_index[idx] = future.result()
            except _RECOVERABLE_ERRORS as exc:
                failures_by_index[idx] = FileFailure(
                    path=str(paths[idx]),
                    reason=_describe_failure(exc),
                )
    return PipelineResult(
        blocks=[block for block in blocks_by_index if block is not None],
        failures=[failure for failure in failures_by_index if failure is not None],
    )
