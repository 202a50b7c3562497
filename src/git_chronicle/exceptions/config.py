"""Errors raised before any history is read: the repository path and settings."""

from pathlib import Path
from typing import Any

from .base import ChronicleError


class ConfigurationError(ChronicleError):
    """A run could not start because of its inputs."""


class InvalidPathError(ConfigurationError):
    """The path given for the repository cannot be analyzed.

    ``reason`` says why, e.g. "not a directory" or "not a git repository".
    """

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read git history from {path}: {reason}",
            details={"path": path},
        )
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """A setting from a TOML file, CHRONICLE_* variable or CLI flag was rejected."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid value for setting '{key}': {reason}",
            details={"key": key, "value": value},
        )
        self.key = key
        self.value = value
        self.reason = reason
