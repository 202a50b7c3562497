"""Shared builders and fixtures for git-chronicle tests."""

import pytest

from git_chronicle.config import ChronicleConfig
from git_chronicle.history.models import AnalysisContext, CommitRecord, FileChange

DAY = 86400
HOUR = 3600

# 2024-01-01T00:00:00Z, a Monday
BASE_TS = 1704067200


def make_change(path, added=0, deleted=0, bytes_added=None, bytes_deleted=None, **kwargs):
    """FileChange shorthand: make_change("a.py", 10, 2)."""
    return FileChange(
        path=path,
        lines_added=added,
        lines_deleted=deleted,
        bytes_added=bytes_added,
        bytes_deleted=bytes_deleted,
        **kwargs,
    )


def make_commit(sha, timestamp, changes=(), author="alice", message="update", email=None):
    """CommitRecord shorthand with a default author and message."""
    return CommitRecord(
        sha=sha,
        author_name=author,
        author_email=email or f"{author}@example.com",
        timestamp=timestamp,
        message=message,
        changes=tuple(changes),
    )


def make_context(commits, current_files=None, now=None, **config):
    """AnalysisContext over ``commits``.

    ``current_files`` defaults to every path ever touched; ``now`` defaults to
    the last commit's timestamp so recency is deterministic.
    """
    commits = list(commits)
    if current_files is None:
        current_files = {ch.path for c in commits for ch in c.changes}
    if now is None:
        now = max((c.timestamp for c in commits), default=BASE_TS)
    return AnalysisContext.build(
        commits, current_files, config=ChronicleConfig(**config), now=now
    )


@pytest.fixture
def three_commit_history():
    """Three commits across two days touching application, test and docs files."""
    return [
        make_commit(
            "a1",
            BASE_TS,
            [make_change("src/app.py", 100, 0, 5000, 0), make_change("README.md", 10, 0, 500, 0)],
            author="alice",
            message="Initial import of the parser",
        ),
        make_commit(
            "b2",
            BASE_TS + 2 * HOUR,
            [make_change("src/app.py", 20, 5, 1000, 250), make_change("tests/test_app.py", 30, 0, 1500, 0)],
            author="bob",
            message="Add parser tests",
        ),
        make_commit(
            "c3",
            BASE_TS + DAY + HOUR,
            [make_change("src/app.py", 5, 40, 250, 2000)],
            author="alice",
            message="Simplify parser error handling",
        ),
    ]
