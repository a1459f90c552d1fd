"""Shared CLI options."""

from __future__ import annotations

import typer

from upgrade_commander.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
NoColorOption = typer.Option(False, "--no-color", help="Disable colored output")
