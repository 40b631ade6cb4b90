"""Token grouping and path collection."""

from __future__ import annotations

from treegen.core.collector import PathSet, collect_paths, is_dir_like
from treegen.core.tokens import ASCEND, SEPARATOR, group_tokens

__all__ = [
    "ASCEND",
    "SEPARATOR",
    "PathSet",
    "collect_paths",
    "group_tokens",
    "is_dir_like",
]
