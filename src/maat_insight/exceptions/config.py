"""Configuration exceptions: option values, config files, transform inputs."""

from pathlib import Path
from typing import Any

from .base import MaatInsightError


class ConfigurationError(MaatInsightError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class TransformConfigError(ConfigurationError):
    """Raised when a grouping or team-mapping file cannot be loaded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to load {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason
