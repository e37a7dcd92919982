from myometab.utils.errors import (
    ConfigurationError,
    ConfigurationErrorReason,
    MetabolicsError,
    NumericalError,
)

__all__ = [
    "ConfigurationError",
    "ConfigurationErrorReason",
    "MetabolicsError",
    "NumericalError",
]
