"""Exception hierarchy for Stability Assurance."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    InvalidInputError,
    MetricSeverityExceededError,
    ParsingError,
)
from .base import StabilityAssuranceError
from .config import (
    ConfigFileError,
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "StabilityAssuranceError",
    "AnalysisError",
    "InvalidInputError",
    "FileAccessError",
    "ParsingError",
    "MetricSeverityExceededError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "ConfigFileError",
]
