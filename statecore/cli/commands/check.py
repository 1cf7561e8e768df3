"""
Check command: run reducer shape probes
"""

import json
import typer
from rich.console import Console
from rich.table import Table

from ...core.combine import CombinedReducer
from ..loader import load_reducer

console = Console()


def check_command(
    reducers: str = typer.Option(..., "--reducers", "-r", help="Reducer reference (module:attribute)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Probe every reducer with the INIT and unknown-action tokens.

    Examples:
        statecore check --reducers app.reducers:ROOT
        statecore check -r app.reducers:ROOT --json
    """
    try:
        reducer = load_reducer(reducers)
    except (ImportError, ValueError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if not isinstance(reducer, CombinedReducer):
        if json_output:
            print(json.dumps({"ok": True, "keys": [], "error": None}))
        else:
            console.print("[yellow]Single reducer: nothing to probe[/yellow]")
        raise typer.Exit(0)

    error = reducer.shape_check.error
    if json_output:
        print(json.dumps({
            "ok": error is None,
            "keys": list(reducer.keys),
            "error": str(error) if error else None,
        }, indent=2))
    else:
        table = Table(title=f"Reducers: {reducers}")
        table.add_column("Key", style="green")
        for key in reducer.keys:
            table.add_row(key)
        console.print(table)

        if error is None:
            console.print(f"[green]✓ {len(reducer.keys)} reducers passed shape probes[/green]")
        else:
            console.print(f"[red]✗ Shape probe failed:[/red] {error}")

    raise typer.Exit(0 if error is None else 1)
