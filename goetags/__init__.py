"""goetags package initialization."""

from __future__ import annotations

from .api import TagsResult, generate_tags
from .config import config_dir_context, set_config_dir
from .errors import GoetagsError, ReceiverShapeError, SourceParseError, TagStoreError

__all__ = [
    "__version__",
    "GoetagsError",
    "ReceiverShapeError",
    "SourceParseError",
    "TagStoreError",
    "TagsResult",
    "config_dir_context",
    "generate_tags",
    "get_version",
    "set_config_dir",
]

__version__ = "1.0.0"


def get_version() -> str:
    """Return the current package version."""
    return __version__
