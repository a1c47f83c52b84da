"""Salarysim: log-normal salary simulation and pay inequality analysis."""

__version__ = "0.3.0"
