from enum import Enum


class ConfigurationErrorReason(Enum):
    """Why a metabolic probe could not be set up."""

    UNKNOWN_MUSCLE = "unknown_muscle"
    INVALID_RATIO = "invalid_ratio"
    INVALID_MASS = "invalid_mass"
    DUPLICATE_MUSCLE = "duplicate_muscle"


class MetabolicsError(Exception):
    """Base class for all errors raised by myometab."""


class ConfigurationError(MetabolicsError, ValueError):
    """
    Raised while validating metabolic parameters against a muscle inventory.

    Parameters
    ----------
    reason : ConfigurationErrorReason
        Category of the failure.
    muscle_name : str
        Name of the muscle whose parameters are invalid.
    message : str
        Human readable description.
    """

    def __init__(self, reason: ConfigurationErrorReason, muscle_name: str, message: str):
        super().__init__(f"[{reason.name}] {message}")
        self.reason = reason
        self.muscle_name = muscle_name


class NumericalError(MetabolicsError, ArithmeticError):
    """Raised when a heat or work rate evaluates to a non-finite value."""
