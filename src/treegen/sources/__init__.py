"""Input sources: templates, structure files, built-in defaults, and args."""

from __future__ import annotations

from treegen.sources.defaults import DEFAULT_STRUCTURES, default_structure
from treegen.sources.loader import (
    StructureSource,
    list_templates,
    read_structure_file,
    resolve_source,
    template_path,
)

__all__ = [
    "DEFAULT_STRUCTURES",
    "StructureSource",
    "default_structure",
    "list_templates",
    "read_structure_file",
    "resolve_source",
    "template_path",
]
