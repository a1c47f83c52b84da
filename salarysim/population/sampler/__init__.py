"""Salary sampler."""

from .core import draw_raw_salaries, simulate_salaries

__all__ = ["draw_raw_salaries", "simulate_salaries"]
