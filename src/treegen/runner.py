"""Scaffold runner: source -> paths -> preview -> materialize."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from treegen.core.collector import PathSet, collect_paths
from treegen.errors import EmptyStructureError
from treegen.logger import ScaffoldLogger
from treegen.materialize import MaterializeReport, materialize
from treegen.sources.loader import StructureSource
from treegen.ui.preview import Confirm, print_tree

CONFIRM_PROMPT = "Would you like to create this structure? (y/n): "


@dataclass
class ScaffoldResult:
    """Result of a scaffold run."""

    paths: PathSet
    confirmed: bool
    report: MaterializeReport | None


class ScaffoldRunner:
    """Turns a resolved source into files on disk."""

    def __init__(
        self,
        out: Console,
        err: Console,
        confirm: Confirm,
        log: ScaffoldLogger | None = None,
        plain: bool = False,
    ) -> None:
        """Initialize the runner.

        Args:
            out: Console for preview and progress output
            err: Console for error output
            confirm: Yes/no prompt used before creating a previewed tree
            log: Logger for run events
            plain: Preview without icons or styling
        """
        self._out = out
        self._err = err
        self._confirm = confirm
        self._log = log or ScaffoldLogger()
        self._plain = plain

    def collect(self, source: StructureSource, output: Path) -> PathSet:
        """Collect the source's paths under ``output``.

        Raises:
            EmptyStructureError: If no paths were produced.
        """
        self._log.source_resolved(source.kind, source.label, len(source.groups))
        paths = collect_paths(output, source.groups)
        if paths.is_empty():
            raise EmptyStructureError("No valid paths to generate.")
        self._log.paths_collected(output, len(paths.entries()))
        return paths

    def run(
        self, source: StructureSource, output: Path, *, dry: bool
    ) -> ScaffoldResult:
        """Collect, optionally preview, and create the structure.

        A declined preview is not an error: nothing is created and the result
        has ``confirmed=False``. Per-path failures are printed and recorded on
        the report; they never abort the run.
        """
        paths = self.collect(source, output)

        if dry:
            self._out.print("\nProject structure preview:\n")
            print_tree(paths, self._out, plain=self._plain)
            self._out.print("\n(No files created yet)\n")

            if not self._confirm(CONFIRM_PROMPT):
                self._out.print("[red]Structure not created.[/red]")
                self._log.preview_declined()
                return ScaffoldResult(paths=paths, confirmed=False, report=None)

            self._out.print("Proceeding to create directories and files...\n")

        report = materialize(paths, log=self._log)
        for path, error in report.failures:
            self._err.print(
                f"[red]Error:[/red] {escape(str(error))}, failed to create "
                f"{escape(str(path))}"
            )

        self._out.print("Structure created successfully!!")
        return ScaffoldResult(paths=paths, confirmed=True, report=report)
