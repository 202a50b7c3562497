"""Root of the git-chronicle error hierarchy.

Everything raised while reading history, fetching file contents or loading
settings derives from ChronicleError, so the CLI reports them all the same way.
"""

from typing import Mapping, Optional


class ChronicleError(Exception):
    """An error message plus the revision, path or setting it concerns.

    ``str()`` renders as ``message (key=value, ...)`` so a single log line
    names what failed.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, object]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
