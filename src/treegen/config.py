from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

DEFAULT_TEMPLATE_DIR = "~/.config/treegen/templates"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class TreegenConfig:
    """Process-wide settings loaded at startup."""

    template_dir: Path
    log_level: str = "WARNING"
    plain_text: bool = False


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


def load_config_from_env() -> TreegenConfig:
    """Load config from env and validate it."""
    template_dir_value = (
        os.environ.get("TREEGEN_TEMPLATE_DIR", "").strip() or DEFAULT_TEMPLATE_DIR
    )
    template_dir = Path(template_dir_value).expanduser()

    log_level = os.environ.get("TREEGEN_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"TREEGEN_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

    # Any non-empty NO_COLOR disables color.
    plain_text = bool(os.environ.get("NO_COLOR")) or _env_flag("TREEGEN_PLAIN_TEXT")

    return TreegenConfig(
        template_dir=template_dir,
        log_level=log_level,
        plain_text=plain_text,
    )
