"""Inequality analysis of simulated populations."""

from .inequality import analyze_inequality, gini_from_lorenz, lorenz_shares

__all__ = [
    "analyze_inequality",
    "gini_from_lorenz",
    "lorenz_shares",
]
