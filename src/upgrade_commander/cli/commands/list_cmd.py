"""ucom list <file> - Show pending upgrades in priority order."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from upgrade_commander.cli.options import NoColorOption, OutputOption
from upgrade_commander.config.settings import settings
from upgrade_commander.core.ordering import filter_upgrades, name_filter, order_upgrades, repo_filter
from upgrade_commander.core.repo_config import resolve_repo_priority
from upgrade_commander.core.upgrade_loader import UpgradeFileError, load_upgrades, loads_upgrades
from upgrade_commander.output.formatters import output_upgrades


def list_upgrades(
    file: Path = typer.Argument(..., help="Upgrade list (JSON or YAML); '-' reads YAML/JSON from stdin"),
    output: str = OutputOption,
    repo: Optional[list[str]] = typer.Option(
        None, "--repo", "-r", help="Repository priority, highest first (repeatable)",
    ),
    filter: Optional[str] = typer.Option(None, "--filter", "-f", help="Regex filter on package name"),
    only_repo: Optional[list[str]] = typer.Option(
        None, "--only-repo", help="Only show upgrades from these repositories (repeatable)",
    ),
    no_color: bool = NoColorOption,
) -> None:
    """List pending upgrades ordered by repository priority and name."""
    if output not in settings.output_formats:
        raise typer.BadParameter(f"unknown format '{output}'", param_hint="--output")

    try:
        if str(file) == "-":
            upgrade_list = loads_upgrades(sys.stdin.read())
        else:
            upgrade_list = load_upgrades(file)
    except UpgradeFileError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    filters = []
    if filter:
        try:
            filters.append(name_filter(filter))
        except re.error as exc:
            raise typer.BadParameter(str(exc), param_hint="--filter")
    if only_repo:
        filters.append(repo_filter(only_repo))
    if filters:
        upgrade_list = filter_upgrades(upgrade_list, *filters)

    upgrade_list.repos = resolve_repo_priority(repo, upgrade_list.repos)
    upgrades = order_upgrades(upgrade_list)

    console = Console(no_color=no_color, highlight=False)
    if not upgrades and output == "table":
        console.print("[dim]No upgrades found.[/dim]")
        return
    output_upgrades(upgrades, output, out=console)
