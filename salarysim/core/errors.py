"""Exception types raised by the salarysim pipeline.

Every stage validates its own inputs and fails fast. Nothing is retried and
no partial result is returned, so callers should treat any of these as fatal
for the current run.
"""


class SalarySimError(Exception):
    """Base class for all salarysim errors."""


class InvalidParameterError(SalarySimError, ValueError):
    """A scalar or sequence input is malformed or outside its domain."""


class DegenerateSampleError(SalarySimError, ArithmeticError):
    """A sampling draw produced a result that cannot be rescaled safely."""


class EmptyPopulationError(SalarySimError, ValueError):
    """Inequality analysis was asked to run on zero employees."""


class ScenarioFileError(SalarySimError):
    """A scenario file is missing, unreadable, or does not validate."""


class ConfigError(SalarySimError):
    """A configuration key or value was rejected."""
