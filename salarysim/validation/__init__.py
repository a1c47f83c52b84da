"""Shared validation primitives for salarysim.

This module provides the low-level input checks every pipeline stage runs
at its boundary before doing any arithmetic.

Modules:
    numbers: Scalar and sequence checks (finite, positive, quantile edges)
"""

from .numbers import (
    require_real,
    require_positive,
    require_positive_int,
    require_non_negative_int,
    require_quantile_edges,
)

__all__ = [
    "require_real",
    "require_positive",
    "require_positive_int",
    "require_non_negative_int",
    "require_quantile_edges",
]
