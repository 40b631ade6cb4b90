from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
import typer

from treegen import __version__
from treegen.config import TreegenConfig, load_config_from_env
from treegen.errors import TreegenError
from treegen.logger import configure_logging
from treegen.runner import ScaffoldRunner
from treegen.sources.loader import list_templates, resolve_source
from treegen.ui.preview import make_console, prompt_confirm

# Load environment variables from .env
load_dotenv()

app = typer.Typer(
    help="Generate directory and file structures easily.",
    add_completion=False,
)


def _fail(err: Console, message: str) -> typer.Exit:
    err.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"treegen {__version__}")
        raise typer.Exit()


def _print_templates(out: Console, config: TreegenConfig) -> None:
    names = list_templates(config.template_dir)
    if not names:
        out.print(f"No templates found in {escape(str(config.template_dir))}")
        return
    for name in names:
        out.print(escape(name))


@app.command()
def main(
    paths: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help="Path tokens. ':' starts a new group, '..' goes up one directory.",
        show_default=False,
    ),
    output: Path = typer.Option(  # noqa: B008
        Path("."),
        "--output",
        "-o",
        help="Base output directory",
    ),
    dry: bool = typer.Option(
        False,
        "--dry",
        help="Preview the tree and ask before creating anything.",
    ),
    from_file: Path | None = typer.Option(  # noqa: B008
        None,
        "--from",
        help="Load tree from a text file, one path per line.",
    ),
    template: str | None = typer.Option(
        None,
        "--template",
        help="Load tree from a saved template in the template directory.",
    ),
    default: str | None = typer.Option(
        None,
        "--default",
        help="Create the default structure for a language (py, rs, web).",
    ),
    show_templates: bool = typer.Option(
        False,
        "--list-templates",
        help="List saved templates and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every step to stderr.",
    ),
    version: bool = typer.Option(  # noqa: ARG001
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    Generate directory and file structures.

    Tokens without an extension are directories and later tokens go inside
    them; tokens with an extension or a leading dot are files.

        treegen src main.rs : README.md
    """
    err = make_console(stderr=True)
    try:
        config = load_config_from_env()
    except ValueError as e:
        raise _fail(err, str(e)) from None

    out = make_console(plain=config.plain_text)
    err = make_console(stderr=True, plain=config.plain_text)
    configure_logging("DEBUG" if verbose else config.log_level)

    if show_templates:
        _print_templates(out, config)
        return

    runner = ScaffoldRunner(
        out=out,
        err=err,
        confirm=lambda prompt: prompt_confirm(prompt, out),
        plain=config.plain_text,
    )
    try:
        source = resolve_source(
            tokens=paths or [],
            from_file=from_file,
            template=template,
            default=default,
            template_dir=config.template_dir,
        )
        runner.run(source, output, dry=dry)
    except TreegenError as e:
        raise _fail(err, str(e)) from None


if __name__ == "__main__":
    app()
