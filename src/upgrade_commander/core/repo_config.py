"""Repository priority resolution."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from upgrade_commander.config.settings import settings

logger = logging.getLogger(__name__)

_SECTION_RE = re.compile(r"^\s*\[([^\]]+)\]\s*$")


def load_pacman_repos(path: Path | None = None) -> list[str]:
    """Return repository names in the order pacman searches them.

    Every ``[section]`` of the configuration except ``[options]`` is a
    repository. A missing or unreadable file yields an empty list.
    """
    conf = path or settings.pacman_conf
    if not conf.exists():
        logger.debug("No pacman configuration at %s", conf)
        return []
    try:
        text = conf.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Failed to read %s", conf, exc_info=True)
        return []

    repos: list[str] = []
    for line in text.splitlines():
        m = _SECTION_RE.match(line)
        if m and m.group(1).strip() != "options":
            repos.append(m.group(1).strip())
    return repos


def resolve_repo_priority(*candidates: list[str] | None) -> list[str]:
    """Pick the first non-empty priority list.

    ``candidates`` are tried in order, then the UCOM_REPO_PRIORITY setting,
    then the pacman configuration.
    """
    for i, candidate in enumerate(candidates):
        if candidate:
            logger.debug("Using repository priority from candidate %d: %s", i, candidate)
            return list(candidate)
    if settings.repo_priority:
        logger.debug("Using repository priority from UCOM_REPO_PRIORITY")
        return list(settings.repo_priority)
    repos = load_pacman_repos()
    logger.debug("Using repository priority from %s: %s", settings.pacman_conf, repos)
    return repos
