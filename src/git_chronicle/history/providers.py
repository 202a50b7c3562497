"""Collaborator interfaces the analytics engine depends on.

The engine never talks to version control directly; it receives these
providers and treats their output as immutable input. ``history.git`` holds
the git-backed implementations.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence, runtime_checkable

from .models import CommitRecord


@runtime_checkable
class CommitHistoryProvider(Protocol):
    def get_commits(self, max_commits: Optional[int] = None) -> Sequence[CommitRecord]:
        """Commit records in chronological (oldest first) order."""
        ...


@runtime_checkable
class CurrentFileSetProvider(Protocol):
    def get_current_files(self) -> frozenset[str]:
        """Paths present in the working tree snapshot."""
        ...


@runtime_checkable
class FileContentProvider(Protocol):
    def get_content(self, revision: str, path: str) -> str:
        """Content of ``path`` at ``revision``.

        Raises:
            ContentNotFoundError: path does not exist at that revision
            ContentRetrievalError: any other retrieval failure
        """
        ...


@runtime_checkable
class ExternalComplexityTool(Protocol):
    def is_available(self) -> bool:
        ...

    def analyze(self) -> Mapping[str, int]:
        """Per-file complexity keyed by repository-relative path; empty when unavailable."""
        ...
