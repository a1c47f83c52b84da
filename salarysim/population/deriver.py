"""Fit log-normal parameters from a mean salary and a dispersion guess."""

import logging
import math

from ..core.models import DistributionParameters
from ..validation import require_positive

logger = logging.getLogger(__name__)

# Typical cv range for organisational salary data. Not enforced.
PLAUSIBLE_CV_RANGE = (0.1, 1.5)


def derive_parameters(
    mean_salary: float,
    coefficient_of_variation: float,
) -> DistributionParameters:
    """Convert a mean and coefficient of variation into log-normal parameters.

    scale = sqrt(ln(1 + cv^2)) and location = ln(mean) - scale^2 / 2, which
    makes the fitted distribution's arithmetic mean equal mean_salary.

    Args:
        mean_salary: Target arithmetic mean salary, > 0
        coefficient_of_variation: Ratio of standard deviation to mean, > 0

    Returns:
        DistributionParameters with location (mu) and scale (sigma)

    Raises:
        InvalidParameterError: If either input is non-positive or non-finite
    """
    mean_salary = require_positive(mean_salary, "mean_salary")
    cv = require_positive(coefficient_of_variation, "coefficient_of_variation")

    low, high = PLAUSIBLE_CV_RANGE
    if not low <= cv <= high:
        logger.debug(
            f"[Deriver] cv={cv} is outside the usual {low}-{high} range for salaries"
        )

    scale = math.sqrt(math.log1p(cv**2))
    location = math.log(mean_salary) - scale**2 / 2

    logger.debug(
        f"[Deriver] mean={mean_salary:.2f} cv={cv} -> location={location:.4f} scale={scale:.4f}"
    )
    return DistributionParameters(location=location, scale=scale)
