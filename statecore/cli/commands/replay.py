"""
Replay command: fold an action log through a reducer
"""

import json
import typer
from typing import Dict
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ...core.canonical import canonicalize
from ...replay import compute_state_hash, read_actions, replay
from ..loader import load_reducer

console = Console()


def replay_command(
    reducers: str = typer.Option(..., "--reducers", "-r", help="Reducer reference (module:attribute)"),
    log_path: str = typer.Option(..., "--log", "-l", help="Path to JSON-lines action log"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an action log and report the resulting state.

    Examples:
        statecore replay -r app.reducers:ROOT -l actions.jsonl
        statecore replay -r app.reducers:ROOT -l actions.jsonl --show-state
        statecore replay -r app.reducers:ROOT -l actions.jsonl --json
    """
    try:
        reducer = load_reducer(reducers)
        actions = list(read_actions(log_path))

        if not json_output:
            console.print("[bold]Replaying action log...[/bold]")

        result = replay(reducer, actions)
        state_hash = compute_state_hash(result.state)
    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Log file not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except Exception as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    action_counts: Dict[str, int] = {}
    for action in actions:
        key = str(action.type)
        action_counts[key] = action_counts.get(key, 0) + 1

    if json_output:
        output = {
            "success": True,
            "actions_replayed": result.applied,
            "state_changes": result.changes,
            "state_hash": state_hash,
            "action_counts": action_counts,
        }
        if show_state:
            output["state"] = canonicalize(result.state)
        print(json.dumps(output, indent=2))
    else:
        console.print(f"[green]✓ Replayed {result.applied} actions successfully[/green]")
        console.print(f"  State changes: [cyan]{result.changes}[/cyan]")
        console.print(f"  State hash: [yellow]{state_hash}[/yellow]")

        table = Table(title="Action Counts")
        table.add_column("Action Type", style="green")
        table.add_column("Count", style="cyan", justify="right")
        for action_type in sorted(action_counts):
            table.add_row(action_type, str(action_counts[action_type]))
        console.print(table)

        if show_state:
            console.print("\n[bold]Final State:[/bold]")
            console.print(Syntax(json.dumps(canonicalize(result.state), indent=2), "json", theme="monokai"))

    raise typer.Exit(0)
