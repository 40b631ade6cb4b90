"""Logging for scaffold runs.

Keeps log calls out of the collection and materialization code.
"""

from __future__ import annotations

from pathlib import Path
import sys

import loguru
from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}"


def _stderr_sink(message: str) -> None:
    # sys.stderr is looked up on every write.
    sys.stderr.write(message)


def configure_logging(level: str) -> None:
    """Route loguru output to a single stderr sink at ``level``."""
    logger.remove()
    logger.add(_stderr_sink, format=LOG_FORMAT, level=level)


class ScaffoldLogger:
    """Handles all logging for a scaffold run."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        self._logger = logger_instance

    def source_resolved(self, kind: str, label: str, group_count: int) -> None:
        """Log which input source was selected."""
        self._logger.bind(source=kind, label=label, groups=group_count).info(
            "Using {} source {} ({} groups)", kind, label, group_count
        )

    def paths_collected(self, base: Path, count: int) -> None:
        """Log the size of the collected path set."""
        self._logger.bind(base=str(base), count=count).info(
            "Collected {} paths under {}", count, base
        )

    def preview_declined(self) -> None:
        """Log that the user declined the preview."""
        self._logger.info("Preview declined, nothing created")

    def path_created(self, path: Path, kind: str) -> None:
        """Log a single created path."""
        self._logger.bind(path=str(path), kind=kind).debug("Created {} {}", kind, path)

    def path_exists(self, path: Path) -> None:
        """Log a path that was already on disk."""
        self._logger.bind(path=str(path)).debug("Skipping existing {}", path)

    def path_failed(self, path: Path, error: OSError) -> None:
        """Log a per-path creation failure.

        The user-facing ``Error:`` line is printed by the runner, so this stays
        at DEBUG and only shows up with ``--verbose``.
        """
        self._logger.bind(path=str(path)).debug("Failed to create {}: {}", path, error)

    def materialize_complete(self, created: int, failed: int) -> None:
        """Log the materialization summary."""
        self._logger.bind(created=created, failed=failed).info(
            "Materialization complete: {} created, {} failed", created, failed
        )
