"""Global configuration management for goetags."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from contextlib import contextmanager
from contextvars import ContextVar
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict

from .text import Messages

DEFAULT_CONFIG_DIR = Path(os.path.expanduser("~")) / ".goetags"
CONFIG_DIR = DEFAULT_CONFIG_DIR
CONFIG_FILE = CONFIG_DIR / "config.json"
_CONFIG_DIR_OVERRIDE: ContextVar[Path | None] = ContextVar(
    "goetags_config_dir_override",
    default=None,
)
DEFAULT_OUTPUT = "TAGS"
DEFAULT_WORKERS = 8


@dataclass
class Config:
    output: str = DEFAULT_OUTPUT
    directory: str | None = None
    workers: int = DEFAULT_WORKERS
    full_tag: bool = False
    append: bool = False


def _resolve_config_dir() -> Path:
    override = _CONFIG_DIR_OVERRIDE.get()
    return override if override is not None else CONFIG_DIR


def _resolve_config_file() -> Path:
    override = _CONFIG_DIR_OVERRIDE.get()
    if override is not None:
        return override / "config.json"
    return CONFIG_FILE


@contextmanager
def config_dir_context(path: Path | str | None):
    """Temporarily override the config directory for the current context."""

    if path is None:
        yield
        return
    dir_path = Path(path).expanduser().resolve()
    if dir_path.exists() and not dir_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {dir_path}")
    token = _CONFIG_DIR_OVERRIDE.set(dir_path)
    try:
        yield
    finally:
        _CONFIG_DIR_OVERRIDE.reset(token)


def load_config() -> Config:
    config_file = _resolve_config_file()
    if not config_file.exists():
        return Config()
    raw = json.loads(config_file.read_text(encoding="utf-8"))
    if not isinstance(raw, Mapping):
        raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID)
    config = Config()
    _apply_config_payload(config, raw)
    return config


def save_config(config: Config) -> None:
    config_dir = _resolve_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    data: Dict[str, Any] = {}
    if config.output:
        data["output"] = config.output
    if config.directory:
        data["directory"] = config.directory
    data["workers"] = config.workers
    data["full_tag"] = bool(config.full_tag)
    data["append"] = bool(config.append)
    config_file = _resolve_config_file()
    config_file.write_text(
        json.dumps(data, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def set_config_dir(path: Path | str | None) -> None:
    global CONFIG_DIR, CONFIG_FILE
    if path is None:
        CONFIG_DIR = DEFAULT_CONFIG_DIR
    else:
        dir_path = Path(path).expanduser().resolve()
        if dir_path.exists() and not dir_path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {dir_path}")
        CONFIG_DIR = dir_path
    CONFIG_FILE = CONFIG_DIR / "config.json"


def config_from_json(
    payload: str | Mapping[str, object], *, base: Config | None = None
) -> Config:
    """Return a Config from a JSON string or mapping without saving it."""
    data = _coerce_config_payload(payload)
    config = Config() if base is None else _clone_config(base)
    _apply_config_payload(config, data)
    return config


def set_output(value: str) -> None:
    config = load_config()
    config.output = _coerce_required_str(value, "output", DEFAULT_OUTPUT)
    save_config(config)


def set_directory(value: str | None) -> None:
    config = load_config()
    config.directory = _coerce_optional_str(value, "directory")
    save_config(config)


def set_workers(value: int) -> None:
    config = load_config()
    config.workers = _coerce_workers(value)
    save_config(config)


def set_full_tag(value: bool) -> None:
    config = load_config()
    config.full_tag = value
    save_config(config)


def set_append(value: bool) -> None:
    config = load_config()
    config.append = value
    save_config(config)


def _coerce_config_payload(payload: str | Mapping[str, object]) -> Mapping[str, object]:
    if isinstance(payload, str):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID) from exc
    elif isinstance(payload, Mapping):
        data = dict(payload)
    else:
        raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID)
    if not isinstance(data, Mapping):
        raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID)
    return data


def _clone_config(config: Config) -> Config:
    return Config(
        output=config.output,
        directory=config.directory,
        workers=config.workers,
        full_tag=config.full_tag,
        append=config.append,
    )


def _apply_config_payload(config: Config, payload: Mapping[str, object]) -> None:
    if "output" in payload:
        config.output = _coerce_required_str(payload["output"], "output", DEFAULT_OUTPUT)
    if "directory" in payload:
        config.directory = _coerce_optional_str(payload["directory"], "directory")
    if "workers" in payload:
        config.workers = _coerce_workers(payload["workers"])
    if "full_tag" in payload:
        config.full_tag = _coerce_bool(payload["full_tag"], "full_tag")
    if "append" in payload:
        config.append = _coerce_bool(payload["append"], "append")


def _coerce_optional_str(value: object, field: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        cleaned = value.strip()
        return cleaned or None
    raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))


def _coerce_required_str(value: object, field: str, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        cleaned = value.strip()
        return cleaned or default
    raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))


def _coerce_int(value: object, field: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return default
        try:
            return int(cleaned)
        except ValueError as exc:
            raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field)) from exc
    raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))


def _coerce_workers(value: object) -> int:
    workers = _coerce_int(value, "workers", DEFAULT_WORKERS)
    if workers < 1:
        raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field="workers"))
    return workers


def _coerce_bool(value: object, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in {"true", "1", "yes", "on"}:
            return True
        if cleaned in {"false", "0", "no", "off"}:
            return False
    raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))
