"""Lorenz curve and inequality index models."""

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidParameterError


class LorenzPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    cumulative_employee_share: float = Field(ge=0, le=1)
    cumulative_salary_share: float = Field(ge=0, le=1)


class InequalityResult(BaseModel):
    """Lorenz curve plus Gini index for one population.

    The curve starts at (0, 0), ends at (1, 1) and is non-decreasing in both
    coordinates.
    """

    model_config = ConfigDict(frozen=True)

    lorenz_curve: tuple[LorenzPoint, ...]
    gini_index: float = Field(ge=0, le=1)

    def _shares(self) -> tuple[np.ndarray, np.ndarray]:
        x = np.array([p.cumulative_employee_share for p in self.lorenz_curve])
        y = np.array([p.cumulative_salary_share for p in self.lorenz_curve])
        return x, y

    def bottom_share(self, fraction: float) -> float:
        """Share of total pay held by the lowest-paid `fraction` of employees."""
        if not 0.0 <= fraction <= 1.0:
            raise InvalidParameterError(f"fraction must be in [0, 1], got {fraction}")
        x, y = self._shares()
        return float(np.interp(fraction, x, y))

    def top_share(self, fraction: float) -> float:
        """Share of total pay held by the highest-paid `fraction` of employees."""
        if not 0.0 <= fraction <= 1.0:
            raise InvalidParameterError(f"fraction must be in [0, 1], got {fraction}")
        return 1.0 - self.bottom_share(1.0 - fraction)
