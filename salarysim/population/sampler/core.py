"""Seeded log-normal salary sampling with budget normalisation."""

import logging
import math

import numpy as np

from ...core.errors import DegenerateSampleError, InvalidParameterError
from ...core.models import DistributionParameters, SimulatedEmployee, SimulationResult
from ...validation import require_non_negative_int, require_positive, require_positive_int

logger = logging.getLogger(__name__)


def draw_raw_salaries(
    params: DistributionParameters,
    headcount: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw unscaled salaries by inversion.

    Uniforms from rng are pushed through the log-normal quantile function, so
    the output depends only on the generator's uniform stream.
    """
    uniforms = rng.random(headcount)
    return np.asarray(params.quantile(uniforms), dtype=float)


def simulate_salaries(
    params: DistributionParameters,
    headcount: int,
    total_budget: float,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> SimulationResult:
    """Simulate a population whose salaries sum exactly to total_budget.

    Raw draws are multiplied by total_budget / sum(raw). Ids 1..headcount are
    assigned in draw order.

    Reproducibility: the same seed, parameters and headcount give identical
    output for a given numpy bit generator. Matching output across other
    generator algorithms is not guaranteed.

    Args:
        params: Fitted distribution parameters
        headcount: Number of employees, > 0
        total_budget: Total monthly budget the salaries must sum to, > 0
        seed: Seed for a fresh numpy Generator built for this call
        rng: Caller-owned Generator to draw from instead of seeding one

    Returns:
        SimulationResult with employees in draw order

    Raises:
        InvalidParameterError: On non-positive headcount or budget, a negative
            seed, or when both seed and rng are given
        DegenerateSampleError: If a raw draw is zero or the raw sum is
            zero or non-finite
    """
    headcount = require_positive_int(headcount, "headcount")
    total_budget = require_positive(total_budget, "total_budget")

    if seed is not None:
        seed = require_non_negative_int(seed, "seed")
    if seed is not None and rng is not None:
        raise InvalidParameterError("Pass either seed or rng, not both")
    if rng is None:
        rng = np.random.default_rng(seed)

    raw = draw_raw_salaries(params, headcount, rng)

    bad = ~(raw > 0) | ~np.isfinite(raw)
    if bad.any():
        raise DegenerateSampleError(
            f"{int(bad.sum())} of {headcount} raw salary draws are non-positive or non-finite"
        )

    raw_total = float(raw.sum())
    if not math.isfinite(raw_total) or raw_total <= 0:
        raise DegenerateSampleError(
            f"Raw salary sum {raw_total} cannot be rescaled to the budget"
        )

    adjustment_factor = total_budget / raw_total
    scaled = raw * adjustment_factor

    logger.info(
        f"[Sampler] drew {headcount} salaries, raw total {raw_total:.2f}, "
        f"adjustment factor {adjustment_factor:.6f}"
    )

    employees = tuple(
        SimulatedEmployee(id=i, monthly_salary=float(salary))
        for i, salary in enumerate(scaled, start=1)
    )
    return SimulationResult(
        employees=employees,
        total_budget=total_budget,
        seed=seed,
        adjustment_factor=adjustment_factor,
    )
