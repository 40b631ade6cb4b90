"""Split a flat token stream into independent path chains."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["ASCEND", "SEPARATOR", "group_tokens"]

SEPARATOR = ":"
ASCEND = ".."


def group_tokens(tokens: Iterable[str]) -> list[list[str]]:
    """Group tokens on the separator marker.

    Separators are dropped and never produce empty groups, so
    ``["src", "main.rs", ":", "README.md"]`` becomes
    ``[["src", "main.rs"], ["README.md"]]``.
    """
    groups: list[list[str]] = []
    current: list[str] = []

    for token in tokens:
        if token == SEPARATOR:
            if current:
                groups.append(current)
                current = []
        else:
            current.append(token)

    if current:
        groups.append(current)
    return groups
