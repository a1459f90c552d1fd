"""Load upgrade lists from JSON or YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from upgrade_commander.models.upgrade import Upgrade, UpgradeList

logger = logging.getLogger(__name__)

# Base loader keeps every scalar a string, so "1.10" is not read as a float.
_YamlLoader = getattr(yaml, "CBaseLoader", yaml.BaseLoader)


class UpgradeFileError(ValueError):
    """Raised when an upgrade document cannot be read or understood."""


def parse_upgrades(data: Any, source: str = "<data>") -> UpgradeList:
    """Build an UpgradeList from decoded JSON/YAML data.

    Accepts either a list of records or a mapping with an ``upgrades``
    list and an optional ``repos`` list.
    """
    repos: list[str] = []
    if isinstance(data, dict):
        records = data.get("upgrades") or []
        raw_repos = data.get("repos") or []
        if not isinstance(raw_repos, list):
            raise UpgradeFileError(f"{source}: 'repos' must be a list")
        repos = [str(r) for r in raw_repos]
    elif isinstance(data, list):
        records = data
    elif data is None:
        records = []
    else:
        raise UpgradeFileError(f"{source}: expected a list or mapping, got {type(data).__name__}")

    if not isinstance(records, list):
        raise UpgradeFileError(f"{source}: 'upgrades' must be a list")

    upgrades: list[Upgrade] = []
    for i, record in enumerate(records):
        if not isinstance(record, dict) or record.get("name") in (None, ""):
            raise UpgradeFileError(f"{source}: record {i} has no package name")
        upgrades.append(Upgrade.from_dict(record))

    logger.debug("Loaded %d upgrade(s) from %s", len(upgrades), source)
    return UpgradeList(upgrades=upgrades, repos=repos)


def load_upgrades(path: Path) -> UpgradeList:
    """Read an upgrade file; ``.json`` is parsed as JSON, anything else as YAML."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise UpgradeFileError(f"{path}: {exc}") from exc
    return loads_upgrades(text, source=str(path), as_json=path.suffix == ".json")


def loads_upgrades(text: str, source: str = "<stdin>", as_json: bool = False) -> UpgradeList:
    try:
        data = json.loads(text) if as_json else yaml.load(text, Loader=_YamlLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise UpgradeFileError(f"{source}: {exc}") from exc
    return parse_upgrades(data, source=source)
