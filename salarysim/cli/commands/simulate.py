"""Simulate and bands commands."""

import logging
from typing import Optional
from pathlib import Path

import typer
from rich.markup import escape
from pydantic import ValidationError

from ...core.config import get_config
from ...core.errors import InvalidParameterError, SalarySimError
from ...core.models import SalaryScenario
from ...pipeline import run_scenario
from ...population import build_bands, derive_parameters
from ..app import app, console
from ..display import bands_table, inequality_table, parameters_table, summary_table

logger = logging.getLogger(__name__)


def _parse_edges(raw: str | None) -> tuple[float, ...] | None:
    if raw is None:
        return None
    try:
        return tuple(float(part) for part in raw.split(",") if part.strip())
    except ValueError:
        raise typer.BadParameter(
            f"{raw!r} is not a comma-separated list of numbers", param_hint="--edges"
        ) from None


def resolve_scenario(
    scenario_file: Path | None,
    budget: float | None,
    headcount: int | None,
    cv: float | None,
    mean: float | None,
    seed: int | None,
    edges: str | None,
) -> SalaryScenario:
    """Merge config defaults, an optional scenario file, and CLI flags.

    Later sources win: flags override the file, the file overrides config.
    """
    if scenario_file is not None:
        base = SalaryScenario.from_yaml(scenario_file).model_dump()
    else:
        config = get_config()
        base = {
            "name": "cli",
            "total_budget": config.simulation.total_budget,
            "headcount": config.simulation.headcount,
            "coefficient_of_variation": config.simulation.coefficient_of_variation,
            "seed": config.simulation.seed,
            "band_edges": tuple(config.bands.edges),
        }

    overrides = {
        "total_budget": budget,
        "headcount": headcount,
        "coefficient_of_variation": cv,
        "mean_salary": mean,
        "seed": seed,
        "band_edges": _parse_edges(edges),
    }
    base.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SalaryScenario.model_validate(base)
    except ValidationError as e:
        raise InvalidParameterError(f"Invalid scenario:\n{e}") from e


_SCENARIO_ARG = typer.Argument(None, help="Scenario YAML file (optional).")
_BUDGET_OPT = typer.Option(None, "--budget", "-b", help="Total monthly budget.")
_HEADCOUNT_OPT = typer.Option(None, "--headcount", "-n", help="Number of employees.")
_CV_OPT = typer.Option(None, "--cv", help="Coefficient of variation of salaries.")
_MEAN_OPT = typer.Option(None, "--mean", help="Mean salary (default budget / headcount).")
_SEED_OPT = typer.Option(None, "--seed", "-s", help="Random seed.")
_EDGES_OPT = typer.Option(None, "--edges", help="Comma-separated quantile edges.")


@app.command()
def simulate(
    scenario_file: Optional[Path] = _SCENARIO_ARG,
    budget: Optional[float] = _BUDGET_OPT,
    headcount: Optional[int] = _HEADCOUNT_OPT,
    cv: Optional[float] = _CV_OPT,
    mean: Optional[float] = _MEAN_OPT,
    seed: Optional[int] = _SEED_OPT,
    edges: Optional[str] = _EDGES_OPT,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the full report as JSON."
    ),
) -> None:
    """Run the full pipeline and print parameters, bands, and inequality."""
    try:
        scenario = resolve_scenario(
            scenario_file, budget, headcount, cv, mean, seed, edges
        )
        report = run_scenario(scenario)
    except SalarySimError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(parameters_table(report.parameters))
    console.print(bands_table(report.bands))
    console.print(summary_table(report.summary))
    console.print(inequality_table(report.inequality))

    if output is not None:
        report.to_json(output)
        console.print(f"[green]✓[/green] Report written to {output}")


@app.command()
def bands(
    scenario_file: Optional[Path] = _SCENARIO_ARG,
    budget: Optional[float] = _BUDGET_OPT,
    headcount: Optional[int] = _HEADCOUNT_OPT,
    cv: Optional[float] = _CV_OPT,
    mean: Optional[float] = _MEAN_OPT,
    edges: Optional[str] = _EDGES_OPT,
) -> None:
    """Print percentile bands of the fitted distribution only."""
    try:
        scenario = resolve_scenario(
            scenario_file, budget, headcount, cv, mean, None, edges
        )
        params = derive_parameters(
            scenario.effective_mean_salary, scenario.coefficient_of_variation
        )
        result = build_bands(
            params, scenario.band_edges, scenario.headcount, scenario.total_budget
        )
    except SalarySimError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(parameters_table(params))
    console.print(bands_table(result))
