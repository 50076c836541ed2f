"""Public Python API for goetags."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from .config import Config, load_config
from .errors import GoetagsError
from .services.pipeline_service import FileFailure, generate_file_blocks
from .services.store_service import write_tag_store
from .text import Messages
from .utils import collect_paths, resolve_output_path


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    output_path: Path
    workers: int
    full_tag: bool
    append: bool


@dataclass(slots=True)
class TagsResult:
    output_path: Path
    blocks_written: int = 0
    bytes_written: int = 0
    failures: list[FileFailure] = field(default_factory=list)
    appended: bool = False

    @property
    def written(self) -> bool:
        return self.blocks_written > 0


def generate_tags(
    paths: Sequence[Path | str] = (),
    *,
    file_list: Path | str | None = None,
    output: str | None = None,
    directory: Path | str | None = None,
    full_tag: bool | None = None,
    append: bool | None = None,
    workers: int | None = None,
    config: Config | None = None,
) -> TagsResult:
    """Tag *paths* (after any files listed in *file_list*) and write the tag file.

    Options left as None fall back to the stored configuration. When no file
    parses, nothing is written and the result reports every failure.
    """
    try:
        files = collect_paths(paths, file_list=file_list)
    except OSError as exc:
        raise GoetagsError(
            Messages.ERROR_FILE_LIST.format(path=file_list, reason=exc.strerror or exc)
        ) from exc
    if not files:
        raise GoetagsError(Messages.ERROR_NO_FILES)
    settings = _resolve_settings(
        config if config is not None else load_config(),
        output=output,
        directory=directory,
        full_tag=full_tag,
        append=append,
        workers=workers,
    )
    pipeline = generate_file_blocks(
        files,
        full_tag=settings.full_tag,
        workers=settings.workers,
    )
    result = TagsResult(
        output_path=settings.output_path,
        failures=list(pipeline.failures),
        appended=settings.append,
    )
    if pipeline.is_empty:
        return result
    result.bytes_written = write_tag_store(
        settings.output_path,
        pipeline.blocks,
        append=settings.append,
    )
    result.blocks_written = len(pipeline.blocks)
    return result


def _resolve_settings(
    config: Config,
    *,
    output: str | None,
    directory: Path | str | None,
    full_tag: bool | None,
    append: bool | None,
    workers: int | None,
) -> RuntimeSettings:
    output_name = (output if output is not None else config.output or "").strip()
    if not output_name:
        raise GoetagsError(Messages.ERROR_OUTPUT_EMPTY)
    worker_count = workers if workers is not None else config.workers
    if worker_count < 1:
        raise GoetagsError(Messages.ERROR_WORKERS_INVALID)
    target_dir = directory if directory is not None else config.directory
    try:
        output_path = resolve_output_path(output_name, target_dir)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise GoetagsError(str(exc)) from exc
    return RuntimeSettings(
        output_path=output_path,
        workers=worker_count,
        full_tag=config.full_tag if full_tag is None else full_tag,
        append=config.append if append is None else append,
    )
