"""CLI commands for salarysim."""

from . import (
    config_cmd,
    simulate,
    validate,
)

__all__ = [
    "config_cmd",
    "simulate",
    "validate",
]
