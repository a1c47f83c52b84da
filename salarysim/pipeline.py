"""End-to-end salary simulation run."""

import logging

import numpy as np

from .analysis import analyze_inequality
from .core.models import SalaryReport, SalaryScenario
from .population import build_bands, derive_parameters, simulate_salaries

logger = logging.getLogger(__name__)


def run_scenario(
    scenario: SalaryScenario,
    rng: np.random.Generator | None = None,
) -> SalaryReport:
    """Run derive -> bands -> simulate -> analyse for one scenario.

    If rng is given it is used instead of seeding from scenario.seed.
    """
    logger.info(
        f"[Pipeline] {scenario.name}: budget={scenario.total_budget:.2f} "
        f"headcount={scenario.headcount} cv={scenario.coefficient_of_variation}"
    )

    params = derive_parameters(
        scenario.effective_mean_salary, scenario.coefficient_of_variation
    )
    bands = build_bands(
        params, scenario.band_edges, scenario.headcount, scenario.total_budget
    )
    simulation = simulate_salaries(
        params,
        scenario.headcount,
        scenario.total_budget,
        seed=scenario.seed if rng is None else None,
        rng=rng,
    )
    inequality = analyze_inequality(simulation.employees)

    logger.info(f"[Pipeline] {scenario.name}: done, gini={inequality.gini_index:.4f}")
    return SalaryReport(
        scenario=scenario,
        parameters=params,
        bands=tuple(bands),
        simulation=simulation,
        inequality=inequality,
    )
