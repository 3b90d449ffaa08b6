"""Exception hierarchy for maat-insight."""

from .base import MaatInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    TransformConfigError,
)
from .input import (
    InvalidInputError,
    LogEncodingError,
    LogFileNotFoundError,
    MalformedLogError,
    MalformedLogLineError,
    UnknownAnalysisError,
    UnknownVcsError,
)

__all__ = [
    "MaatInsightError",
    "InvalidInputError",
    "LogFileNotFoundError",
    "LogEncodingError",
    "MalformedLogError",
    "MalformedLogLineError",
    "UnknownVcsError",
    "UnknownAnalysisError",
    "ConfigurationError",
    "InvalidConfigError",
    "TransformConfigError",
]
