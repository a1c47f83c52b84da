"""Config command: show, set, and reset persisted defaults."""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ...core.config import get_config, get_config_path, reset_config, set_config_value
from ...core.errors import ConfigError
from ..app import app, console


def _show() -> None:
    config = get_config()

    table = Table(title="Simulation", show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Value", justify="right")
    for field, value in config.simulation.model_dump().items():
        table.add_row(f"simulation.{field}", str(value))
    console.print(table)

    table = Table(title="Bands", show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Value", justify="right")
    table.add_row("bands.edges", ", ".join(f"{e:g}" for e in config.bands.edges))
    console.print(table)

    console.print(f"[dim]Config file: {get_config_path()}[/dim]")


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show, set, or reset"),
    key: Optional[str] = typer.Argument(None, help="Key to set, e.g. simulation.seed"),
    value: Optional[str] = typer.Argument(None, help="New value"),
) -> None:
    """Show or edit persisted simulation defaults."""
    if action == "show":
        try:
            _show()
        except ConfigError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        return

    if action == "set":
        if key is None or value is None:
            console.print("[red]Error:[/red] Usage: salarysim config set KEY VALUE")
            raise typer.Exit(1)
        try:
            set_config_value(key, value)
        except ConfigError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] {key} = {value}")
        return

    if action == "reset":
        path = reset_config()
        console.print(f"[green]✓[/green] Config reset ({path})")
        return

    console.print(f"[red]Error:[/red] Unknown action: {action}. Use show, set, or reset.")
    raise typer.Exit(1)
