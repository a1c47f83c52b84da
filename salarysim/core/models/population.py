"""Simulated employee population models."""

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


class SimulatedEmployee(BaseModel):
    """A single simulated employee.

    The sampler only produces strictly positive salaries. Zero is allowed
    here so inequality analysis can be run on hand-built boundary inputs.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    monthly_salary: float = Field(ge=0, allow_inf_nan=False)


class SalarySummary(BaseModel):
    """Descriptive statistics of a salary sample."""

    model_config = ConfigDict(frozen=True)

    count: int
    total: float
    mean: float
    median: float
    std: float
    min: float
    max: float
    p10: float
    p25: float
    p75: float
    p90: float


class SimulationResult(BaseModel):
    """Result of one simulate_salaries call.

    employees are in draw order; ids run 1..N.
    """

    model_config = ConfigDict(frozen=True)

    employees: tuple[SimulatedEmployee, ...]
    total_budget: float = Field(gt=0)
    seed: int | None = None
    adjustment_factor: float = Field(gt=0)

    @property
    def headcount(self) -> int:
        return len(self.employees)

    @property
    def salaries(self) -> np.ndarray:
        return np.array([e.monthly_salary for e in self.employees], dtype=float)

    def summary(self) -> SalarySummary:
        salaries = self.salaries
        p10, p25, p50, p75, p90 = np.percentile(salaries, [10, 25, 50, 75, 90])
        # Sample standard deviation, matching R's sd()
        std = float(salaries.std(ddof=1)) if len(salaries) > 1 else 0.0
        return SalarySummary(
            count=len(salaries),
            total=float(salaries.sum()),
            mean=float(salaries.mean()),
            median=float(p50),
            std=std,
            min=float(salaries.min()),
            max=float(salaries.max()),
            p10=float(p10),
            p25=float(p25),
            p75=float(p75),
            p90=float(p90),
        )
