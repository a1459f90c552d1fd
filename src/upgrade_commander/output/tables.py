"""Rich renderables for upgrade lists and version diffs."""

from __future__ import annotations

from rich.cells import cell_len
from rich.text import Text

from upgrade_commander.core.version_diff import version_diff_segments
from upgrade_commander.models import DiffSegment
from upgrade_commander.models.upgrade import Upgrade
from upgrade_commander.output.themes import NUMBER_COLOR, ROLE_COLORS, repo_color


def stylized_name(upgrade: Upgrade) -> Text:
    """``repo/name`` with the repository colored by name and both parts bold."""
    return Text.assemble(
        (upgrade.repository, f"bold {repo_color(upgrade.repository)}"),
        "/",
        (upgrade.name, "bold"),
    )


def segments_text(segments: list[DiffSegment]) -> Text:
    text = Text()
    for seg in segments:
        if seg.role is None:
            text.append(seg.text)
        else:
            text.append(seg.text, style=ROLE_COLORS[seg.role])
    return text


def version_diff_text(old_version: str, new_version: str) -> tuple[Text, Text]:
    left, right = version_diff_segments(old_version, new_version)
    return segments_text(left), segments_text(right)


def upgrade_list_text(upgrades: list[Upgrade]) -> Text:
    """Numbered, aligned ``repo/name  old -> new`` lines.

    Numbers count down so the last line printed is 1.
    """
    names = [stylized_name(u) for u in upgrades]
    longest_name = max((n.cell_len for n in names), default=0)
    longest_version = max((cell_len(u.local_version) for u in upgrades), default=0)
    number_width = len(str(len(upgrades)))

    lines: list[Text] = []
    for k, (upgrade, name) in enumerate(zip(upgrades, names)):
        left, right = version_diff_text(upgrade.local_version, upgrade.remote_version)
        line = Text()
        line.append(f"{len(upgrades) - k:>{number_width}}  ", style=NUMBER_COLOR)
        line.append_text(name)
        line.append(" " * (longest_name - name.cell_len) + "  ")
        line.append_text(left)
        line.append(" " * (longest_version - cell_len(upgrade.local_version)))
        line.append(" -> ")
        line.append_text(right)
        lines.append(line)
    return Text("\n").join(lines)
