"""Leaderboard awards over commits and contributors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..history.models import AnalysisContext, CommitRecord
from .filters import is_real_commit


@dataclass(frozen=True)
class CommitAward:
    sha: str
    author_name: str
    date: str
    message: str
    value: int

    def to_dict(self) -> dict:
        return {
            "sha": self.sha,
            "author_name": self.author_name,
            "date": self.date,
            "message": self.message,
            "value": self.value,
        }


@dataclass(frozen=True)
class ContributorStats:
    name: str
    commits: int
    lines_added: int
    lines_deleted: int

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "commits": self.commits,
            "lines_added": self.lines_added,
            "lines_deleted": self.lines_deleted,
        }


@dataclass(frozen=True)
class ContributorAward:
    name: str
    commits: int
    average_lines_changed: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "commits": self.commits,
            "average_lines_changed": self.average_lines_changed,
        }


@dataclass(frozen=True)
class CommitAwards:
    most_files_modified: tuple[CommitAward, ...] = ()
    most_bytes_added: tuple[CommitAward, ...] = ()
    most_bytes_removed: tuple[CommitAward, ...] = ()
    most_lines_added: tuple[CommitAward, ...] = ()
    most_lines_removed: tuple[CommitAward, ...] = ()
    lowest_average_lines_changed: tuple[ContributorAward, ...] = ()
    highest_average_lines_changed: tuple[ContributorAward, ...] = ()

    def to_dict(self) -> dict:
        return {name: [a.to_dict() for a in getattr(self, name)] for name in self.__dataclass_fields__}


# metric returns None when the commit carries no value for it
CommitMetric = Callable[[CommitRecord], Optional[int]]

COMMIT_METRICS: dict[str, CommitMetric] = {
    "most_files_modified": lambda c: len(c.changes),
    "most_bytes_added": lambda c: c.bytes_added,
    "most_bytes_removed": lambda c: c.bytes_deleted,
    "most_lines_added": lambda c: c.lines_added,
    "most_lines_removed": lambda c: c.lines_deleted,
}


def _award_candidates(context: AnalysisContext) -> list[CommitRecord]:
    if context.config.exclude_merge_commits:
        return [c for c in context.commits if is_real_commit(c)]
    return list(context.commits)


def top_commits_by(context: AnalysisContext, metric: CommitMetric) -> list[CommitAward]:
    """Top-N commits by one metric; ties keep the earlier commit first."""
    scored = []
    for index, commit in enumerate(_award_candidates(context)):
        value = metric(commit)
        if value is not None:
            scored.append((value, index, commit))
    scored.sort(key=lambda item: (-item[0], item[1]))

    return [
        CommitAward(
            sha=commit.sha,
            author_name=commit.author_name,
            date=commit.iso_date,
            message=commit.message,
            value=value,
        )
        for value, _, commit in scored[: context.config.top_n]
    ]


def contributor_stats(context: AnalysisContext) -> list[ContributorStats]:
    """Per-author totals, most commits first, ties by name."""
    totals: dict[str, list[int]] = {}
    for commit in context.commits:
        entry = totals.setdefault(commit.author_name, [0, 0, 0])
        entry[0] += 1
        entry[1] += commit.lines_added
        entry[2] += commit.lines_deleted

    stats = [
        ContributorStats(name=name, commits=c, lines_added=a, lines_deleted=d)
        for name, (c, a, d) in totals.items()
    ]
    stats.sort(key=lambda s: (-s.commits, s.name))
    return stats


def contributors_by_average_lines_changed(context: AnalysisContext) -> list[ContributorAward]:
    """(lines added + lines deleted) / commits per author.

    Authors with fewer than ``award_min_commits`` qualifying commits are left
    out so a single large commit does not dominate.
    """
    totals: dict[str, list[int]] = {}
    for commit in _award_candidates(context):
        entry = totals.setdefault(commit.author_name, [0, 0])
        entry[0] += 1
        entry[1] += commit.lines_added + commit.lines_deleted

    min_commits = context.config.award_min_commits
    return [
        ContributorAward(name=name, commits=commits, average_lines_changed=changed / commits)
        for name, (commits, changed) in totals.items()
        if commits >= min_commits
    ]


def lowest_average_lines_changed(context: AnalysisContext) -> list[ContributorAward]:
    awards = contributors_by_average_lines_changed(context)
    awards.sort(key=lambda a: (a.average_lines_changed, a.name))
    return awards[: context.config.top_n]


def highest_average_lines_changed(context: AnalysisContext) -> list[ContributorAward]:
    awards = contributors_by_average_lines_changed(context)
    awards.sort(key=lambda a: (-a.average_lines_changed, a.name))
    return awards[: context.config.top_n]


def commit_awards(context: AnalysisContext) -> CommitAwards:
    ranked = {name: tuple(top_commits_by(context, metric)) for name, metric in COMMIT_METRICS.items()}
    return CommitAwards(
        **ranked,
        lowest_average_lines_changed=tuple(lowest_average_lines_changed(context)),
        highest_average_lines_changed=tuple(highest_average_lines_changed(context)),
    )
