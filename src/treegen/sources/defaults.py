from __future__ import annotations

_PYTHON = [
    "src/__init__.py",
    "src/main.py",
    ".gitignore",
    "requirements.txt",
    "README.md",
]

_RUST = [
    "src/main.rs",
    "Cargo.toml",
    ".gitignore",
    "README.md",
]

_WEB = [
    "src/index.js",
    "src/style.css",
    "public/index.html",
    ".gitignore",
    "package.json",
    "README.md",
]

DEFAULT_STRUCTURES: dict[str, list[str]] = {
    "py": _PYTHON,
    "python": _PYTHON,
    "rs": _RUST,
    "rust": _RUST,
    "web": _WEB,
    "js": _WEB,
    "ts": _WEB,
}


def default_structure(lang: str) -> list[str]:
    """Return the built-in token list for a language id, or [] if unknown."""
    return list(DEFAULT_STRUCTURES.get(lang, []))
