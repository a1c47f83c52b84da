"""Percentile banding of a fitted salary distribution."""

import logging
import math
from typing import Sequence

from ..core.models import DistributionParameters, PercentileBand
from ..validation import (
    require_non_negative_int,
    require_positive,
    require_quantile_edges,
)

logger = logging.getLogger(__name__)


def build_bands(
    params: DistributionParameters,
    edges: Sequence[float],
    total_headcount: int,
    total_budget: float,
) -> list[PercentileBand]:
    """Split the fitted distribution into contiguous quantile bands.

    For each adjacent pair of edges (lo, hi) the band's salary bounds are the
    log-normal quantiles at lo and hi. The head count is
    round(total_headcount * (hi - lo)) and the budget share is
    midpoint_salary * employee_count / total_budget.

    Both figures are approximations. Counts are rounded independently per
    band, so they need not add up to total_headcount, and shares use the
    band midpoint rather than an integral, so they need not add up to 1.0.
    A band reaching the 100th percentile has an infinite upper salary; its
    representative salary is the mean of the tail above its lower bound.

    Args:
        params: Fitted distribution parameters
        edges: Strictly increasing quantiles in [0, 1]
        total_headcount: Number of employees to distribute, >= 0
        total_budget: Total monthly budget, > 0

    Returns:
        One PercentileBand per adjacent edge pair, in edge order

    Raises:
        InvalidParameterError: On malformed edges, headcount, or budget
    """
    edges = require_quantile_edges(edges)
    total_headcount = require_non_negative_int(total_headcount, "total_headcount")
    total_budget = require_positive(total_budget, "total_budget")

    salaries = [float(s) for s in params.quantile(edges)]

    bands = []
    for (lo, hi), (lower_salary, upper_salary) in zip(
        zip(edges, edges[1:]), zip(salaries, salaries[1:])
    ):
        employee_count = int(round(total_headcount * (hi - lo)))

        if math.isinf(upper_salary):
            representative = params.tail_mean(lower_salary)
        else:
            representative = (lower_salary + upper_salary) / 2

        budget_share = representative * employee_count / total_budget
        if budget_share > 1.0:
            logger.warning(
                f"[Bands] P{lo * 100:g}-P{hi * 100:g} share {budget_share:.3f} "
                f"exceeds the whole budget; capping at 1.0"
            )
            budget_share = 1.0

        bands.append(
            PercentileBand(
                lower_quantile=lo,
                upper_quantile=hi,
                lower_salary=lower_salary,
                upper_salary=upper_salary,
                employee_count=employee_count,
                budget_share=budget_share,
            )
        )

    total_count = sum(b.employee_count for b in bands)
    if total_count != round(total_headcount * (edges[-1] - edges[0])):
        logger.debug(
            f"[Bands] rounded counts sum to {total_count} for headcount {total_headcount}"
        )
    logger.info(f"[Bands] built {len(bands)} bands")
    return bands
