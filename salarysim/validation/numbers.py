"""Numeric input checks.

Each helper returns the value coerced to its canonical Python type or
raises InvalidParameterError naming the offending argument.
"""

import math
from numbers import Integral, Real
from typing import Sequence

from ..core.errors import InvalidParameterError


def require_real(value: object, name: str) -> float:
    """Return value as a finite float.

    Booleans are rejected even though bool is a subclass of int.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    result = float(value)
    if not math.isfinite(result):
        raise InvalidParameterError(f"{name} must be finite, got {result}")
    return result


def require_positive(value: object, name: str) -> float:
    result = require_real(value, name)
    if result <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {result}")
    return result


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameterError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return int(value)


def require_positive_int(value: object, name: str) -> int:
    result = _require_int(value, name)
    if result <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {result}")
    return result


def require_non_negative_int(value: object, name: str) -> int:
    result = _require_int(value, name)
    if result < 0:
        raise InvalidParameterError(f"{name} must be >= 0, got {result}")
    return result


def require_quantile_edges(edges: Sequence[float], name: str = "edges") -> list[float]:
    """Validate an ordered sequence of quantile edges.

    Edges must hold at least two values, each in [0, 1], strictly increasing.

    Args:
        edges: Candidate quantile edges
        name: Argument name used in error messages

    Returns:
        The edges as a list of floats

    Raises:
        InvalidParameterError: If any rule is violated
    """
    if isinstance(edges, (str, bytes)):
        raise InvalidParameterError(f"{name} must be a sequence of numbers")
    try:
        values = [require_real(e, f"{name}[{i}]") for i, e in enumerate(edges)]
    except TypeError as e:
        raise InvalidParameterError(f"{name} must be a sequence of numbers") from e

    if len(values) < 2:
        raise InvalidParameterError(
            f"{name} needs at least two values to form a band, got {len(values)}"
        )

    for i, edge in enumerate(values):
        if edge < 0.0 or edge > 1.0:
            raise InvalidParameterError(f"{name}[{i}]={edge} is outside [0, 1]")

    for i in range(1, len(values)):
        if values[i] <= values[i - 1]:
            raise InvalidParameterError(
                f"{name} must be strictly increasing: "
                f"{name}[{i - 1}]={values[i - 1]} >= {name}[{i}]={values[i]}"
            )

    return values
