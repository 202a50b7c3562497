"""Analysis-related exceptions: malformed records, content fetches, cancellation."""

from typing import Any, List, Optional

from .base import ChronicleError


class AnalysisError(ChronicleError):
    """Base class for analysis-related errors."""
    pass


class InvalidRecordError(AnalysisError):
    """Raised when a commit or file-change record violates its contract."""

    def __init__(self, record: str, field: str, value: Any, reason: str):
        super().__init__(
            f"Invalid {record}: {field}={value!r}",
            details={"record": record, "field": field, "reason": reason},
        )
        self.record = record
        self.field = field
        self.value = value
        self.reason = reason


class ContentError(AnalysisError):
    """Base class for file-content retrieval errors."""

    def __init__(self, message: str, revision: str, path: str, reason: str):
        super().__init__(
            message,
            details={"revision": revision, "path": path, "reason": reason},
        )
        self.revision = revision
        self.path = path
        self.reason = reason


class ContentNotFoundError(ContentError):
    """Raised when a path does not exist at the requested revision."""

    def __init__(self, revision: str, path: str, reason: str = "path not in revision"):
        super().__init__(f"File not found at {revision}: {path}", revision, path, reason)


class ContentRetrievalError(ContentError):
    """Raised when content exists but could not be retrieved."""

    def __init__(self, revision: str, path: str, reason: str):
        super().__init__(f"Failed to retrieve {path} at {revision}", revision, path, reason)


class AnalysisCancelledError(AnalysisError):
    """Raised when a batch analysis is cancelled between batches.

    ``partial_results`` holds every result produced before cancellation.
    """

    def __init__(self, completed: int, total: int, partial_results: Optional[List[Any]] = None):
        super().__init__(
            "Batch analysis cancelled",
            details={"completed": completed, "total": total},
        )
        self.completed = completed
        self.total = total
        self.partial_results = partial_results or []
