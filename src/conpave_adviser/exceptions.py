"""Errors raised by the pavement advisory engine.

All core operations raise synchronously; presentation layers (the CLI) are
responsible for turning these into user-facing messages.
"""

from typing import Optional


class AdviserError(Exception):
    """Base class for all advisory engine errors."""


class InvalidParameterValueError(AdviserError, ValueError):
    """Raised when a parameter value is outside its enumerated domain."""

    def __init__(self, message: str, fields: Optional[list[str]] = None):
        super().__init__(message)
        self.fields = fields or []


class InsufficientInputError(AdviserError):
    """Raised when none of the four primary parameters is supplied."""


class UnknownPavementTypeError(AdviserError, ValueError):
    """Raised when a pavement type code cannot be resolved."""


class CalibrationOutOfRangeError(AdviserError, ValueError):
    """Raised when a calibration weight lies outside the permitted range."""


class SampleSizeError(AdviserError, ValueError):
    """Base class for invalid Monte Carlo sample sizes."""


class ZeroSampleSizeError(SampleSizeError):
    """Raised when a probability estimate is requested for no samples."""


class SampleSizeLimitError(SampleSizeError):
    """Raised when a sample size exceeds the configured cap."""


class ConfigurationError(AdviserError):
    """Raised when an adviser configuration file cannot be used."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
