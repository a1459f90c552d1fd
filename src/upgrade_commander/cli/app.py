"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="ucom",
    help="Upgrade Commander - Review pending package upgrades.",
    no_args_is_help=True,
)


@app.callback()
def root(
    debug: bool = typer.Option(False, "--debug", help="Log debug output to stderr"),
) -> None:
    if debug:
        from rich.console import Console
        from rich.logging import RichHandler

        logger = logging.getLogger("upgrade_commander")
        logger.setLevel(logging.DEBUG)
        if not any(isinstance(h, RichHandler) for h in logger.handlers):
            logger.addHandler(RichHandler(console=Console(stderr=True), show_time=False, show_path=False))


def _register_commands() -> None:
    # Plain commands, so options may follow the positional arguments.
    from upgrade_commander.cli.commands.list_cmd import list_upgrades
    from upgrade_commander.cli.commands.diff_cmd import diff

    app.command(name="list", help="List pending upgrades")(list_upgrades)
    app.command(name="diff", help="Highlight the difference between two versions")(diff)


_register_commands()


def main() -> None:
    app()
