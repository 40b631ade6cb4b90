"""Tree preview and the confirmation prompt shown before creating files."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from treegen.core.collector import PathSet, is_dir_like

__all__ = [
    "AFFIRMATIVE",
    "Confirm",
    "make_console",
    "print_tree",
    "prompt_confirm",
    "render_tree",
]

Confirm = Callable[[str], bool]

AFFIRMATIVE = frozenset({"y", "yes"})

FOLDER_ICON = "📁"
DEFAULT_FILE_ICON = "📄"

EXTENSION_ICONS = {
    "rs": "🦀",
    "py": "🐍",
    "js": "🧩",
    "ts": "🧩",
    "toml": "📝",
    "md": "📘",
    "html": "🌐",
    "css": "🎨",
}

SPECIAL_FILE_ICONS = {
    "Dockerfile": "🐳",
    "Makefile": "🛠",
}


def make_console(*, stderr: bool = False, plain: bool = False) -> Console:
    """Build a console; ``plain`` drops color for NO_COLOR-style output.

    Icons are handled separately by ``render_tree(plain=...)``.
    """
    return Console(stderr=stderr, no_color=plain, highlight=False, soft_wrap=True)


def file_icon(name: str) -> str:
    if name in SPECIAL_FILE_ICONS:
        return SPECIAL_FILE_ICONS[name]
    _, dot, extension = name.rpartition(".")
    if not dot:
        return DEFAULT_FILE_ICON
    return EXTENSION_ICONS.get(extension, DEFAULT_FILE_ICON)


def render_tree(paths: PathSet, *, plain: bool = False) -> list[str]:
    """Render the set as indented markup lines, one per path below the base.

    With ``plain`` the icons are left out and names carry no styling.
    """
    lines: list[str] = []
    for path in paths.entries():
        relative = path.relative_to(paths.base)
        indent = "  " * (len(relative.parts) - 1)
        name = relative.name

        if plain:
            lines.append(f"{indent}{escape(name)}")
        elif is_dir_like(name):
            lines.append(f"{indent}{FOLDER_ICON} [bold blue]{escape(name)}[/bold blue]")
        else:
            lines.append(f"{indent}{file_icon(name)} [green]{escape(name)}[/green]")
    return lines


def print_tree(paths: PathSet, console: Console, *, plain: bool = False) -> None:
    if plain:
        console.print("Project Structure:")
    else:
        console.print("[bold cyan]📦 Project Structure:[/bold cyan]")
    for line in render_tree(paths, plain=plain):
        console.print(line)


def prompt_confirm(prompt: str, console: Console | None = None) -> bool:
    """Ask a yes/no question on the terminal.

    Only ``y`` or ``yes`` (any case) counts as yes; end of input is a no.
    """
    console = console or make_console()
    try:
        answer = console.input(prompt)
    except EOFError:
        return False
    return answer.strip().lower() in AFFIRMATIVE
