"""Pydantic models for salarysim.

- distribution.py: Log-normal parameters and percentile bands
- population.py: Simulated employees, simulation results, salary summaries
- inequality.py: Lorenz curve points and inequality results
- scenario.py: Run inputs (scenario files) and run outputs (reports)
"""

from .distribution import DistributionParameters, PercentileBand
from .population import SimulatedEmployee, SimulationResult, SalarySummary
from .inequality import LorenzPoint, InequalityResult
from .scenario import DEFAULT_BAND_EDGES, SalaryScenario, SalaryReport

__all__ = [
    # Distribution
    "DistributionParameters",
    "PercentileBand",
    # Population
    "SimulatedEmployee",
    "SimulationResult",
    "SalarySummary",
    # Inequality
    "LorenzPoint",
    "InequalityResult",
    # Scenario
    "DEFAULT_BAND_EDGES",
    "SalaryScenario",
    "SalaryReport",
]
