"""Git-backed collaborators, all via subprocess.

GitHistoryProvider reads the whole history in one ``git log --numstat
--summary`` pass; GitFileSetProvider lists HEAD; GitContentProvider runs
``git show <rev>:<path>`` per file.
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Optional

from ..exceptions import ContentNotFoundError, ContentRetrievalError, GitCommandError
from ..logging_config import get_logger
from .models import ChangeStatus, CommitRecord, FileChange

logger = get_logger(__name__)

# Field/record separators that cannot appear in git metadata
_RS = "\x1e"
_FS = "\x1f"
_LOG_FORMAT = f"{_RS}%H{_FS}%at{_FS}%an{_FS}%ae{_FS}%s"

_NUMSTAT_RE = re.compile(r"^(\d+|-)\t(\d+|-)\t(.+)$")
_BRACE_RENAME_RE = re.compile(r"^(.*)\{(.*) => (.*)\}(.*)$")
_SUMMARY_RE = re.compile(r"^(create|delete) mode \d+ (.+)$")

_NOT_FOUND_MARKERS = ("does not exist in", "exists on disk, but not in")


def is_git_repo(repo_path: str) -> bool:
    try:
        result = subprocess.run(
            ["git", "-C", str(repo_path), "rev-parse", "--git-dir"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        return result.returncode == 0
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


def _run_git(repo_path: str, args: list[str], timeout: int) -> str:
    cmd = ["git", "-C", repo_path, "-c", "core.quotepath=off", *args]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except (FileNotFoundError, subprocess.TimeoutExpired) as e:
        raise GitCommandError(cmd, str(e)) from e
    if result.returncode != 0:
        raise GitCommandError(cmd, result.stderr.strip())
    return result.stdout


def split_rename(field: str) -> tuple[Optional[str], str]:
    """Split a numstat path into (old_path, new_path).

    Handles ``old => new`` and the compact ``dir/{old => new}/file`` form.
    """
    match = _BRACE_RENAME_RE.match(field)
    if match:
        prefix, old, new, suffix = match.groups()
        old_path = (prefix + old + suffix).replace("//", "/").lstrip("/")
        new_path = (prefix + new + suffix).replace("//", "/").lstrip("/")
        return old_path, new_path
    if " => " in field:
        old_path, new_path = field.split(" => ", 1)
        return old_path, new_path
    return None, field


class GitHistoryProvider:
    """Parse ``git log`` into chronological CommitRecords."""

    def __init__(self, repo_path: str, bytes_per_line_estimate: int = 50, timeout: int = 120):
        self.repo_path = str(Path(repo_path).resolve())
        self.bytes_per_line_estimate = bytes_per_line_estimate
        self.timeout = timeout

    def get_commits(self, max_commits: Optional[int] = None) -> list[CommitRecord]:
        args = [
            "log",
            "--reverse",
            "-M",
            "--numstat",
            "--summary",
            f"--format={_LOG_FORMAT}",
        ]
        if max_commits:
            args.append(f"-n{max_commits}")
        raw = _run_git(self.repo_path, args, self.timeout)
        commits = self.parse_log(raw)
        logger.info("Read %d commits from %s", len(commits), self.repo_path)
        return commits

    def parse_log(self, raw: str) -> list[CommitRecord]:
        commits = []
        for block in raw.split(_RS):
            if not block.strip():
                continue
            commit = self._parse_block(block)
            if commit is not None:
                commits.append(commit)
        return commits

    def _parse_block(self, block: str) -> Optional[CommitRecord]:
        header, _, body = block.partition("\n")
        parts = header.split(_FS, 4)
        if len(parts) < 5:
            logger.debug("Skipping malformed log header: %r", header)
            return None
        sha, ts, author_name, author_email, subject = parts
        try:
            timestamp = int(ts)
        except ValueError:
            logger.debug("Skipping commit %s with bad timestamp %r", sha, ts)
            return None

        # path -> [added, deleted, binary, old_path]
        stats: dict[str, list] = {}
        statuses: dict[str, ChangeStatus] = {}

        for line in body.split("\n"):
            line = line.strip("\r")
            match = _NUMSTAT_RE.match(line)
            if match:
                added, deleted, field = match.groups()
                old_path, path = split_rename(field)
                binary = added == "-"
                stats[path] = [
                    0 if binary else int(added),
                    0 if deleted == "-" else int(deleted),
                    binary,
                    old_path,
                ]
                if old_path is not None:
                    statuses[path] = ChangeStatus.RENAMED
                continue
            summary = _SUMMARY_RE.match(line.strip())
            if summary:
                kind, path = summary.groups()
                statuses[path] = ChangeStatus.ADDED if kind == "create" else ChangeStatus.DELETED

        changes = []
        for path, (added, deleted, binary, old_path) in stats.items():
            changes.append(
                FileChange(
                    path=path,
                    lines_added=added,
                    lines_deleted=deleted,
                    bytes_added=None if binary else added * self.bytes_per_line_estimate,
                    bytes_deleted=None if binary else deleted * self.bytes_per_line_estimate,
                    status=statuses.get(path, ChangeStatus.MODIFIED),
                    old_path=old_path,
                )
            )

        return CommitRecord(
            sha=sha,
            author_name=author_name,
            author_email=author_email,
            timestamp=timestamp,
            message=subject,
            changes=tuple(changes),
        )


class GitFileSetProvider:
    """Paths tracked at HEAD."""

    def __init__(self, repo_path: str, revision: str = "HEAD", timeout: int = 30):
        self.repo_path = str(Path(repo_path).resolve())
        self.revision = revision
        self.timeout = timeout

    def get_current_files(self) -> frozenset[str]:
        raw = _run_git(
            self.repo_path, ["ls-tree", "-r", "-z", "--name-only", self.revision], self.timeout
        )
        return frozenset(p for p in raw.split("\0") if p)


class GitContentProvider:
    """File content at a revision via ``git show``."""

    def __init__(self, repo_path: str, timeout: int = 30):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout = timeout

    def get_content(self, revision: str, path: str) -> str:
        cmd = ["git", "-C", self.repo_path, "show", f"{revision}:{path}"]
        try:
            result = subprocess.run(cmd, capture_output=True, timeout=self.timeout)
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            raise ContentRetrievalError(revision, path, str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            if any(marker in stderr for marker in _NOT_FOUND_MARKERS):
                raise ContentNotFoundError(revision, path, stderr)
            raise ContentRetrievalError(revision, path, stderr)

        return result.stdout.decode("utf-8", errors="replace")
