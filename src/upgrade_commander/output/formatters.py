"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from upgrade_commander.models.upgrade import Upgrade

console = Console()


def _upgrade_to_dict(u: Upgrade) -> dict[str, Any]:
    return u.to_dict()


def output_upgrades(upgrades: list[Upgrade], fmt: str, out: Console | None = None) -> None:
    out = out or console
    if fmt == "json":
        data = [_upgrade_to_dict(u) for u in upgrades]
        out.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_upgrade_to_dict(u) for u in upgrades]
        out.print(yaml.dump(data, default_flow_style=False, sort_keys=False), markup=False, end="")
    else:
        from upgrade_commander.output.tables import upgrade_list_text
        out.print(upgrade_list_text(upgrades), highlight=False)
