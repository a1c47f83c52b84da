"""Command-line interface for salarysim."""

from .app import app

__all__ = ["app"]
