"""Rich table rendering for pipeline results."""

import math

from rich.table import Table

from ..core.models import (
    DistributionParameters,
    InequalityResult,
    PercentileBand,
    SalarySummary,
)


def _money(value: float) -> str:
    if math.isinf(value):
        return "∞"
    return f"{value:,.2f}"


def parameters_table(params: DistributionParameters) -> Table:
    table = Table(title="Fitted log-normal", show_header=True, header_style="bold")
    table.add_column("Parameter")
    table.add_column("Value", justify="right")
    table.add_row("location (mu)", f"{params.location:.4f}")
    table.add_row("scale (sigma)", f"{params.scale:.4f}")
    table.add_row("mean", _money(params.mean))
    table.add_row("median", _money(params.median))
    table.add_row("std", _money(params.std))
    return table


def bands_table(bands: list[PercentileBand] | tuple[PercentileBand, ...]) -> Table:
    table = Table(title="Percentile bands", show_header=True, header_style="bold")
    table.add_column("Band")
    table.add_column("Lower", justify="right")
    table.add_column("Upper", justify="right")
    table.add_column("Employees", justify="right")
    table.add_column("Budget share", justify="right")
    for band in bands:
        table.add_row(
            band.label,
            _money(band.lower_salary),
            _money(band.upper_salary),
            str(band.employee_count),
            f"{band.budget_share:.1%}",
        )
    table.caption = "Counts are rounded per band; shares use band midpoints."
    return table


def summary_table(summary: SalarySummary) -> Table:
    table = Table(title="Simulated salaries", show_header=True, header_style="bold")
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    table.add_row("employees", str(summary.count))
    table.add_row("total", _money(summary.total))
    for name in ("mean", "median", "std", "min", "p10", "p25", "p75", "p90", "max"):
        table.add_row(name, _money(getattr(summary, name)))
    return table


def inequality_table(result: InequalityResult) -> Table:
    table = Table(title="Inequality", show_header=True, header_style="bold")
    table.add_column("Measure")
    table.add_column("Value", justify="right")
    table.add_row("Gini index", f"{result.gini_index:.4f}")
    table.add_row("bottom 50% share", f"{result.bottom_share(0.5):.1%}")
    table.add_row("top 10% share", f"{result.top_share(0.1):.1%}")
    table.add_row("top 1% share", f"{result.top_share(0.01):.1%}")
    return table
