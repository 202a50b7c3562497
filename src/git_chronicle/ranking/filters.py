"""Commit filters for awards."""

import re

from ..history.models import CommitRecord

MERGE_PREFIXES = (
    "merge remote-tracking branch",
    "merge branch",
    "merge pull request",
)

# Matched against the lower-cased message
AUTOMATED_PATTERNS = tuple(
    re.compile(p)
    for p in (
        r"resolved conflict",
        r"resolving conflict",
        r"accept.*conflict",
        r"conflict.*accept",
        r"auto-merge",
        r"automated merge",
        r'revert "',
        r"bump version",
        r"update dependencies",
        r"update dependency",
        r"renovate\[bot\]",
        r"dependabot\[bot\]",
        r"whitesource",
        r"accepting (remote|local|incoming|current)",
    )
)


def is_real_commit(commit: CommitRecord) -> bool:
    """False for merges and automated housekeeping commits."""
    message = commit.message.lower()
    if message.startswith(MERGE_PREFIXES):
        return False
    if "merge pull request" in message:
        return False
    return not any(p.search(message) for p in AUTOMATED_PATTERNS)
