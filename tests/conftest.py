"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the template directory at a temp dir and drop color/log overrides.

    Keeps tests from reading templates in the real ~/.config or inheriting
    settings from the developer's shell.
    """
    template_dir = tmp_path / "templates"
    monkeypatch.setenv("TREEGEN_TEMPLATE_DIR", str(template_dir))
    monkeypatch.delenv("TREEGEN_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TREEGEN_PLAIN_TEXT", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return template_dir


@pytest.fixture
def template_dir(_isolate_env: Path) -> Path:
    """Existing template directory used by the CLI under test."""
    _isolate_env.mkdir(parents=True, exist_ok=True)
    return _isolate_env
