"""Lorenz curve and Gini index of a salary population."""

import logging
from typing import Sequence

import numpy as np

from ..core.errors import EmptyPopulationError, InvalidParameterError
from ..core.models import InequalityResult, LorenzPoint, SimulatedEmployee

logger = logging.getLogger(__name__)


def lorenz_shares(salaries: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return Lorenz x/y arrays for salaries already sorted ascending.

    Both arrays have N + 1 entries and start at 0. The last y is exactly 1.0.
    """
    n = len(salaries)
    cumulative = np.cumsum(salaries)
    total = cumulative[-1]
    x = np.concatenate([[0.0], np.arange(1, n + 1) / n])
    y = np.concatenate([[0.0], cumulative / total])
    return x, y


def gini_from_lorenz(x: np.ndarray, y: np.ndarray) -> float:
    """Trapezoidal Gini: 1 - 2 * sum(dx * (y_k + y_{k-1}) / 2)."""
    area = float(np.sum(np.diff(x) * (y[1:] + y[:-1]) / 2))
    # Rounding can leave a tiny negative residue for near-equal salaries
    return min(max(1.0 - 2.0 * area, 0.0), 1.0)


def analyze_inequality(employees: Sequence[SimulatedEmployee]) -> InequalityResult:
    """Compute the Lorenz curve and Gini index of a population.

    Employees are sorted ascending by salary, ties broken by id, so the
    result does not depend on input order.

    Args:
        employees: Population to analyse

    Returns:
        InequalityResult with N + 1 Lorenz points and the Gini index

    Raises:
        EmptyPopulationError: If employees is empty
        InvalidParameterError: If total pay is zero
    """
    if not employees:
        raise EmptyPopulationError("Cannot analyse inequality of an empty population")

    ordered = sorted(employees, key=lambda e: (e.monthly_salary, e.id))
    salaries = np.array([e.monthly_salary for e in ordered], dtype=float)

    if salaries.sum() <= 0:
        raise InvalidParameterError(
            "Total salary is zero; the Lorenz curve is undefined"
        )

    if salaries[0] == salaries[-1]:
        x = np.concatenate([[0.0], np.arange(1, len(salaries) + 1) / len(salaries)])
        y = x.copy()
        gini = 0.0
    else:
        x, y = lorenz_shares(salaries)
        gini = gini_from_lorenz(x, y)

    curve = tuple(
        LorenzPoint(
            cumulative_employee_share=float(xi),
            cumulative_salary_share=min(float(yi), 1.0),
        )
        for xi, yi in zip(x, y)
    )

    logger.info(f"[Inequality] N={len(salaries)} gini={gini:.4f}")
    return InequalityResult(lorenz_curve=curve, gini_index=gini)
