"""Validate command."""

from pathlib import Path

import typer
from rich.markup import escape

from ...core.errors import ScenarioFileError
from ...core.models import SalaryScenario
from ..app import app, console


@app.command()
def validate(
    scenario_file: Path = typer.Argument(..., help="Scenario YAML file to check."),
) -> None:
    """Check that a scenario file loads and validates."""
    try:
        scenario = SalaryScenario.from_yaml(scenario_file)
    except ScenarioFileError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] {scenario.name}: {scenario.headcount} employees, "
        f"budget {scenario.total_budget:,.2f}, "
        f"{len(scenario.band_edges) - 1} bands"
    )
