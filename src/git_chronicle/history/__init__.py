"""Commit history: records, the shared analysis context, and collaborators."""

from .git import GitContentProvider, GitFileSetProvider, GitHistoryProvider, is_git_repo
from .models import AnalysisContext, ChangeStatus, CommitRecord, FileChange
from .providers import (
    CommitHistoryProvider,
    CurrentFileSetProvider,
    ExternalComplexityTool,
    FileContentProvider,
)

__all__ = [
    "AnalysisContext",
    "ChangeStatus",
    "CommitHistoryProvider",
    "CommitRecord",
    "CurrentFileSetProvider",
    "ExternalComplexityTool",
    "FileChange",
    "FileContentProvider",
    "GitContentProvider",
    "GitFileSetProvider",
    "GitHistoryProvider",
    "is_git_repo",
]
