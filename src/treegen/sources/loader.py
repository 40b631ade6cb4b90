"""Select and read the token source for a scaffold run."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from treegen.core.tokens import group_tokens
from treegen.errors import (
    StructureFileError,
    TemplateNotFoundError,
    UnknownDefaultError,
    UsageError,
)
from treegen.sources.defaults import default_structure

__all__ = [
    "SourceKind",
    "StructureSource",
    "list_templates",
    "read_structure_file",
    "resolve_source",
    "template_path",
]

SourceKind = Literal["template", "file", "default", "args"]


@dataclass(frozen=True, slots=True)
class StructureSource:
    """Token groups together with where they came from."""

    kind: SourceKind
    label: str
    groups: list[list[str]]


def template_path(name: str, template_dir: Path) -> Path:
    """Return the file a named template is stored in."""
    return template_dir / f"{name}.txt"


def list_templates(template_dir: Path) -> list[str]:
    """Return the names of saved templates, sorted."""
    if not template_dir.is_dir():
        return []
    return sorted(path.stem for path in template_dir.glob("*.txt") if path.is_file())


def read_structure_file(path: Path) -> list[str]:
    """Read a line-oriented structure file.

    Each non-blank line, trimmed, is one token.

    Raises:
        StructureFileError: If the file is missing, unreadable, or has no
            non-blank lines.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StructureFileError(f"Cannot read file '{path}': {e}") from e

    lines = [line.strip() for line in content.splitlines()]
    tokens = [line for line in lines if line]
    if not tokens:
        raise StructureFileError(f"template or structure file '{path}' is empty.")
    return tokens


def resolve_source(
    *,
    tokens: Sequence[str] = (),
    from_file: Path | None = None,
    template: str | None = None,
    default: str | None = None,
    template_dir: Path,
) -> StructureSource:
    """Pick one input source by priority: template > file > default > args.

    File, template and default sources form a single implicit group; literal
    tokens are split on the group separator.

    Raises:
        UsageError: If no source was given at all.
        TemplateNotFoundError: If the named template does not exist.
        StructureFileError: If a template or structure file is unusable.
        UnknownDefaultError: If the language id has no built-in structure.
    """
    if not tokens and from_file is None and template is None and default is None:
        raise UsageError(
            "No input provided. Use arguments, --from, --template, or --default."
        )

    if template is not None:
        path = template_path(template, template_dir)
        if not path.exists():
            raise TemplateNotFoundError(f"template not found {path}")
        return StructureSource("template", str(path), [read_structure_file(path)])

    if from_file is not None:
        return StructureSource(
            "file", str(from_file), [read_structure_file(from_file)]
        )

    if default is not None:
        structure = default_structure(default)
        if not structure:
            raise UnknownDefaultError(f"unknown default template '{default}'")
        return StructureSource("default", default, [structure])

    return StructureSource("args", "arguments", group_tokens(tokens))
