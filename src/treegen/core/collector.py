"""Turn grouped tokens into an ancestor-closed, ordered set of paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path, PurePath

from treegen.core.tokens import ASCEND

__all__ = ["PathSet", "collect_paths", "is_dir_like"]


def is_dir_like(name: str | PurePath) -> bool:
    """Return True if a path segment names a directory.

    A segment is directory-like when it has no extension and is not a
    dotfile, i.e. it contains no ``.`` at all. Only the final segment is
    inspected, so ``v1.2`` is file-like wherever it appears.
    """
    if isinstance(name, PurePath):
        name = name.name
    return "." not in name


class PathSet:
    """Unique paths under a base directory, iterated in component order.

    Every member except the base has its parent in the set. Iteration is
    sorted by path components, so a directory always precedes its contents.
    """

    def __init__(self, base: Path) -> None:
        self._base = base
        self._paths: set[Path] = set()

    @property
    def base(self) -> Path:
        return self._base

    def add_segments(self, segments: Sequence[str]) -> None:
        """Insert the base-relative path ``segments`` and every ancestor."""
        for depth in range(len(segments) + 1):
            self._paths.add(self._base.joinpath(*segments[:depth]))

    def entries(self) -> list[Path]:
        """Members in order, excluding the base directory."""
        return [path for path in self if path != self._base]

    def is_empty(self) -> bool:
        return not any(path != self._base for path in self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[Path]:
        return iter(sorted(self._paths, key=lambda path: path.parts))

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"PathSet(base={self._base!r}, paths={[str(p) for p in self]!r})"


def collect_paths(base: Path | str, groups: Iterable[Sequence[str]]) -> PathSet:
    """Resolve each group against ``base`` and collect the resulting paths.

    Each group starts with its cursor at ``base``. ``..`` moves the cursor up
    one level (never above ``base``); any other token is joined onto the
    cursor and, when directory-like, becomes the new cursor.

    Args:
        base: Directory every path is resolved under
        groups: Token groups as produced by ``group_tokens``

    Returns:
        PathSet containing every resolved path and its ancestors
    """
    paths = PathSet(Path(base))

    for group in groups:
        cursor: list[str] = []

        for token in group:
            if token == ASCEND:
                if cursor:
                    cursor.pop()
                continue

            segments = _resolve_token(cursor, token)
            if not segments:
                continue

            paths.add_segments(segments)
            if is_dir_like(segments[-1]):
                cursor = segments

    return paths


def _resolve_token(cursor: Sequence[str], token: str) -> list[str]:
    """Join ``token`` onto ``cursor`` as base-relative segments.

    Anchors and ``.`` segments are dropped and ``..`` segments are clamped at
    the base, so the result never leaves it. Blank tokens resolve to ``[]``.
    """
    if not token.strip():
        return []

    token_path = PurePath(token)
    parts = token_path.parts[1:] if token_path.anchor else token_path.parts

    segments = list(cursor)
    for part in parts:
        if part == ASCEND:
            if segments:
                segments.pop()
        elif part not in ("", "."):
            segments.append(part)
    return segments
