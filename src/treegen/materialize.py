"""Create collected paths on disk, best-effort."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from treegen.core.collector import PathSet, is_dir_like
from treegen.logger import ScaffoldLogger

__all__ = ["MaterializeReport", "create_path", "materialize"]


@dataclass(slots=True)
class MaterializeReport:
    """Outcome of a materialization pass."""

    created: list[Path] = field(default_factory=list)
    existing: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, OSError]] = field(default_factory=list)


def create_path(path: Path) -> bool:
    """Create ``path`` as an empty directory or file.

    Parent directories are created as needed. Existing directories and files
    are left untouched; an existing file keeps its content.

    Returns:
        True if something was created, False if the path already existed.

    Raises:
        OSError: If the path or one of its parents cannot be created.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if is_dir_like(path):
        if path.is_dir():
            return False
        path.mkdir()
        return True

    if path.exists():
        if path.is_dir():
            raise IsADirectoryError(f"Expected a file but found a directory: '{path}'")
        return False
    path.touch()
    return True


def materialize(
    paths: PathSet,
    *,
    log: ScaffoldLogger | None = None,
) -> MaterializeReport:
    """Create every path in order, collecting failures instead of raising.

    The base directory itself is skipped.
    """
    log = log or ScaffoldLogger()
    report = MaterializeReport()

    for path in paths.entries():
        try:
            created = create_path(path)
        except OSError as e:
            report.failures.append((path, e))
            log.path_failed(path, e)
            continue

        if created:
            report.created.append(path)
            log.path_created(path, "directory" if is_dir_like(path) else "file")
        else:
            report.existing.append(path)
            log.path_exists(path)

    log.materialize_complete(len(report.created), len(report.failures))
    return report
