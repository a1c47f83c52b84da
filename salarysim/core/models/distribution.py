"""Distribution and percentile band models."""

import math

import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from scipy import stats


class DistributionParameters(BaseModel):
    """Log-normal parameters on the log scale.

    A salary X is modelled as X = exp(location + scale * Z) with Z standard
    normal, so the arithmetic mean of X is exp(location + scale**2 / 2).
    """

    model_config = ConfigDict(frozen=True)

    location: float = Field(allow_inf_nan=False, description="Mean of log(salary) (mu)")
    scale: float = Field(gt=0, allow_inf_nan=False, description="Standard deviation of log(salary) (sigma)")

    def frozen(self):
        """Return the equivalent frozen scipy.stats.lognorm distribution."""
        return stats.lognorm(s=self.scale, scale=math.exp(self.location))

    @property
    def mean(self) -> float:
        return math.exp(self.location + self.scale**2 / 2)

    @property
    def median(self) -> float:
        return math.exp(self.location)

    @property
    def std(self) -> float:
        return self.mean * math.sqrt(math.expm1(self.scale**2))

    def quantile(self, q):
        """Inverse CDF. quantile(0) is 0.0 and quantile(1) is +inf."""
        return self.frozen().ppf(q)

    def cdf(self, x):
        return self.frozen().cdf(x)

    def tail_mean(self, lower_salary: float) -> float:
        """Mean salary conditional on salary > lower_salary.

        Uses the closed form E[X | X > a] = mean * Phi(sigma - z_a) / (1 - F(a))
        where z_a = (ln a - mu) / sigma.
        """
        if lower_salary <= 0:
            return self.mean
        z = (math.log(lower_salary) - self.location) / self.scale
        survival = stats.norm.sf(z)
        if survival <= 0:
            return float(lower_salary)
        return float(self.mean * stats.norm.cdf(self.scale - z) / survival)


class PercentileBand(BaseModel):
    """One contiguous quantile band of the fitted distribution.

    employee_count and budget_share are first-order approximations: counts
    are rounded per band and shares use the band midpoint salary, so neither
    is guaranteed to reconcile exactly with the headcount or the budget.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    lower_quantile: float = Field(ge=0, lt=1)
    upper_quantile: float = Field(gt=0, le=1)
    lower_salary: float = Field(ge=0)
    upper_salary: float = Field(gt=0, allow_inf_nan=True)
    employee_count: int = Field(ge=0)
    budget_share: float = Field(ge=0, le=1)

    @property
    def label(self) -> str:
        return f"P{self.lower_quantile * 100:g}-P{self.upper_quantile * 100:g}"

    @property
    def is_open_ended(self) -> bool:
        return not np.isfinite(self.upper_salary)
