"""Population layer: fit a salary distribution, band it, and sample from it.

Pipeline:
    Step 1: derive_parameters() - Fit log-normal mu/sigma from mean and cv
    Step 2: build_bands() - Quantile bands with counts and budget shares
    Step 3: simulate_salaries() - Seeded draws rescaled to the budget
"""

from .deriver import derive_parameters
from .bands import build_bands
from .sampler import simulate_salaries

__all__ = [
    "derive_parameters",
    "build_bands",
    "simulate_salaries",
]
