"""Data models for commit history and the shared analysis context."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional

from ..config import DEFAULT_CONFIG, ChronicleConfig
from ..exceptions import InvalidRecordError


class ChangeStatus(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"


@dataclass(frozen=True)
class FileChange:
    path: str
    lines_added: int
    lines_deleted: int
    bytes_added: Optional[int] = None  # None = unknown
    bytes_deleted: Optional[int] = None
    status: ChangeStatus = ChangeStatus.MODIFIED
    old_path: Optional[str] = None  # renames only

    def __post_init__(self) -> None:
        if not self.path:
            raise InvalidRecordError("FileChange", "path", self.path, "path must be non-empty")
        for name in ("lines_added", "lines_deleted"):
            _require_count("FileChange", name, getattr(self, name))
        for name in ("bytes_added", "bytes_deleted"):
            value = getattr(self, name)
            if value is not None:
                _require_count("FileChange", name, value)
        if not isinstance(self.status, ChangeStatus):
            try:
                object.__setattr__(self, "status", ChangeStatus(self.status))
            except ValueError as e:
                raise InvalidRecordError(
                    "FileChange", "status", self.status, "unknown change status"
                ) from e

    @property
    def net_lines(self) -> int:
        return self.lines_added - self.lines_deleted

    @property
    def net_bytes(self) -> int:
        return (self.bytes_added or 0) - (self.bytes_deleted or 0)

    @property
    def churn(self) -> int:
        return self.lines_added + self.lines_deleted


@dataclass(frozen=True)
class CommitRecord:
    sha: str
    author_name: str
    author_email: str
    timestamp: int  # unix seconds, UTC
    message: str = ""
    changes: tuple[FileChange, ...] = ()

    def __post_init__(self) -> None:
        if not self.sha:
            raise InvalidRecordError("CommitRecord", "sha", self.sha, "sha must be non-empty")
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
            raise InvalidRecordError(
                "CommitRecord", "timestamp", self.timestamp, "timestamp must be unix seconds (int)"
            )
        if self.timestamp < 0:
            raise InvalidRecordError(
                "CommitRecord", "timestamp", self.timestamp, "timestamp must be non-negative"
            )
        if not isinstance(self.changes, tuple):
            object.__setattr__(self, "changes", tuple(self.changes))

    @property
    def date(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    @property
    def lines_added(self) -> int:
        return sum(c.lines_added for c in self.changes)

    @property
    def lines_deleted(self) -> int:
        return sum(c.lines_deleted for c in self.changes)

    @property
    def net_lines(self) -> int:
        return self.lines_added - self.lines_deleted

    @property
    def bytes_added(self) -> Optional[int]:
        """Sum of known byte additions; None when no change reports bytes."""
        known = [c.bytes_added for c in self.changes if c.bytes_added is not None]
        return sum(known) if known else None

    @property
    def bytes_deleted(self) -> Optional[int]:
        known = [c.bytes_deleted for c in self.changes if c.bytes_deleted is not None]
        return sum(known) if known else None

    @property
    def net_bytes(self) -> int:
        return sum(c.net_bytes for c in self.changes)


@dataclass(frozen=True)
class AnalysisContext:
    """Immutable input shared by every aggregator in one report run.

    Attributes:
        commits: Commit records, chronological ascending
        current_files: Paths present in the working tree snapshot
        config: Run configuration
        now: Reference time (unix seconds) for recency computations
    """

    commits: tuple[CommitRecord, ...]
    current_files: frozenset[str] = frozenset()
    config: ChronicleConfig = field(default_factory=lambda: DEFAULT_CONFIG)
    now: int = field(default_factory=lambda: int(time.time()))

    def __post_init__(self) -> None:
        if not isinstance(self.commits, tuple):
            object.__setattr__(self, "commits", tuple(self.commits))
        if not isinstance(self.current_files, frozenset):
            object.__setattr__(self, "current_files", frozenset(self.current_files))

    @classmethod
    def build(
        cls,
        commits: Iterable[CommitRecord],
        current_files: Iterable[str] = (),
        config: Optional[ChronicleConfig] = None,
        now: Optional[int] = None,
    ) -> "AnalysisContext":
        return cls(
            commits=tuple(commits),
            current_files=frozenset(current_files),
            config=config or DEFAULT_CONFIG,
            now=int(time.time()) if now is None else now,
        )

    @property
    def span_hours(self) -> float:
        if len(self.commits) < 2:
            return 0.0
        timestamps = [c.timestamp for c in self.commits]
        return (max(timestamps) - min(timestamps)) / 3600


def _require_count(record: str, name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecordError(record, name, value, "must be an integer")
    if value < 0:
        raise InvalidRecordError(record, name, value, "must be non-negative")
