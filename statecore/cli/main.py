#!/usr/bin/env python3
"""
statecore CLI

Main entrypoint for the statecore command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..logging_config import setup_logging
from .commands import check, replay

app = typer.Typer(
    name="statecore",
    help="Reducer composition tools",
    add_completion=False,
)

console = Console()

app.command(name="check")(check.check_command)
app.command(name="replay")(replay.replay_command)


@app.callback()
def _configure() -> None:
    setup_logging()


@app.command()
def version():
    """Show version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]statecore[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
