"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_pacman_conf() -> Path:
    return Path(os.environ.get("UCOM_PACMAN_CONF", "") or "/etc/pacman.conf")


def _default_repo_priority() -> list[str]:
    """Read UCOM_REPO_PRIORITY as a comma-separated list of repository names."""
    raw = os.environ.get("UCOM_REPO_PRIORITY", "")
    return [name.strip() for name in raw.split(",") if name.strip()]


@dataclass
class Settings:
    pacman_conf: Path = field(default_factory=_default_pacman_conf)
    repo_priority: list[str] = field(default_factory=_default_repo_priority)
    default_output: str = "table"
    output_formats: tuple[str, ...] = ("table", "json", "yaml")


# Global singleton
settings = Settings()
