"""ucom diff <old> <new> - Highlight what changed between two versions."""

from __future__ import annotations

import json

import typer
from rich.console import Console

from upgrade_commander.cli.options import NoColorOption
from upgrade_commander.core.version_diff import version_diff_segments
from upgrade_commander.output.tables import segments_text


def diff(
    old_version: str = typer.Argument(help="Installed version"),
    new_version: str = typer.Argument(help="Available version"),
    json_output: bool = typer.Option(False, "--json", help="Print the segments as JSON"),
    no_color: bool = NoColorOption,
) -> None:
    """Show OLD -> NEW with the changed components highlighted."""
    left, right = version_diff_segments(old_version, new_version)
    console = Console(no_color=no_color, highlight=False)

    if json_output:
        data = {
            side: [{"text": s.text, "role": s.role.value if s.role else None} for s in segs]
            for side, segs in (("old", left), ("new", right))
        }
        console.print_json(json.dumps(data))
        return

    line = segments_text(left)
    line.append(" -> ")
    line.append_text(segments_text(right))
    console.print(line)
