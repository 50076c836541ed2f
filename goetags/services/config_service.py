"""Logic helpers for the `goetags config` command."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import (
    Config,
    load_config,
    set_append,
    set_directory,
    set_full_tag,
    set_output,
    set_workers,
)


@dataclass(slots=True)
class ConfigUpdateResult:
    output_set: bool = False
    directory_set: bool = False
    directory_cleared: bool = False
    workers_set: bool = False
    full_tag_set: bool = False
    append_set: bool = False

    @property
    def changed(self) -> bool:
        return any(
            (
                self.output_set,
                self.directory_set,
                self.directory_cleared,
                self.workers_set,
                self.full_tag_set,
                self.append_set,
            )
        )


def apply_config_updates(
    *,
    output: str | None = None,
    directory: str | None = None,
    clear_directory: bool = False,
    workers: int | None = None,
    full_tag: bool | None = None,
    append: bool | None = None,
) -> ConfigUpdateResult:
    """Apply config mutations and report which fields were updated."""

    result = ConfigUpdateResult()
    if output is not None:
        set_output(output)
        result.output_set = True
    if directory is not None:
        set_directory(directory)
        result.directory_set = True
    if clear_directory:
        set_directory(None)
        result.directory_cleared = True
    if workers is not None:
        set_workers(workers)
        result.workers_set = True
    if full_tag is not None:
        set_full_tag(full_tag)
        result.full_tag_set = True
    if append is not None:
        set_append(append)
        result.append_set = True
    return result


def get_config_snapshot() -> Config:
    """Return the current configuration dataclass."""

    return load_config()
