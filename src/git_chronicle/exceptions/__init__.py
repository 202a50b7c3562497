"""Exception hierarchy for git-chronicle."""

from .analysis import (
    AnalysisCancelledError,
    AnalysisError,
    ContentError,
    ContentNotFoundError,
    ContentRetrievalError,
    InvalidRecordError,
)
from .base import ChronicleError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .history import GitCommandError, HistoryError

__all__ = [
    "ChronicleError",
    "AnalysisError",
    "AnalysisCancelledError",
    "ContentError",
    "ContentNotFoundError",
    "ContentRetrievalError",
    "InvalidRecordError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
    "HistoryError",
    "GitCommandError",
]
