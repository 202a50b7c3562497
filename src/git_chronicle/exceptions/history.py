"""History retrieval exceptions."""

from typing import List

from .base import ChronicleError


class HistoryError(ChronicleError):
    """Base class for errors while reading repository history."""

    pass


class GitCommandError(HistoryError):
    """Raised when a git subprocess fails or times out."""

    def __init__(self, command: List[str], reason: str):
        super().__init__(
            f"git command failed: {' '.join(command)}",
            details={"reason": reason},
        )
        self.command = command
        self.reason = reason
