"""Utility helpers for filesystem access and path handling."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence


def resolve_directory(path: Path | str) -> Path:
    """Resolve and validate a user supplied directory path."""
    dir_path = Path(path).expanduser().resolve()
    if not dir_path.exists():
        raise FileNotFoundError(f"Directory does not exist: {dir_path}")
    if not dir_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {dir_path}")
    return dir_path


def read_file_list(path: Path | str) -> list[str]:
    """Return the file names listed one per line in *path*.

    Blank lines are skipped; names are otherwise kept verbatim.
    """
    text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    return [line.rstrip("\r") for line in text.split("\n") if line.rstrip("\r")]


def collect_paths(
    paths: Iterable[Path | str] | None,
    *,
    file_list: Path | str | None = None,
) -> list[str]:
    """Combine the listed files and explicit paths; the list file comes first."""
    collected: list[str] = []
    if file_list is not None:
        collected.extend(read_file_list(file_list))
    if paths:
        collected.extend(str(path) for path in paths)
    return collected


def resolve_output_path(output: str, directory: Path | str | None = None) -> Path:
    """Return the tag file location for *output* inside *directory*."""
    target = Path(output).expanduser()
    if directory is None or target.is_absolute():
        return target
    return resolve_directory(directory) / target


def format_count(count: int, words: Sequence[str] = ("", "s")) -> str:
    """Return the plural suffix matching *count*."""
    return words[0] if count == 1 else words[1]
