"""Growth series over the commit list.

Two independent views of the same input:

- the time series groups commits into calendar buckets and carries running
  totals forward from bucket to bucket;
- the linear series has one point per commit in input order.

Every line and byte delta is attributed to its file's category, so each
cumulative value is a CategoryBreakdown whose ``total`` is the sum of the
five categories. The last point of both series always carries the same
cumulative totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..classification.categories import FileCategory, classify_category
from ..history.models import AnalysisContext, CommitRecord
from ..logging_config import get_logger
from .buckets import bucket_key, bucket_start, next_bucket, previous_bucket, resolve_granularity

logger = get_logger(__name__)


@dataclass
class CategoryBreakdown:
    application: int = 0
    test: int = 0
    build: int = 0
    documentation: int = 0
    other: int = 0

    @property
    def total(self) -> int:
        return self.application + self.test + self.build + self.documentation + self.other

    def add(self, category: FileCategory, value: int) -> None:
        name = category.value
        setattr(self, name, getattr(self, name) + value)

    def merge(self, other: "CategoryBreakdown") -> None:
        for category in FileCategory:
            self.add(category, other.get(category))

    def get(self, category: FileCategory) -> int:
        return getattr(self, category.value)

    def copy(self) -> "CategoryBreakdown":
        return CategoryBreakdown(
            application=self.application,
            test=self.test,
            build=self.build,
            documentation=self.documentation,
            other=self.other,
        )

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "application": self.application,
            "test": self.test,
            "build": self.build,
            "documentation": self.documentation,
            "other": self.other,
        }


@dataclass
class TimeSeriesPoint:
    date: str  # bucket key
    commits: int = 0
    commit_shas: list[str] = field(default_factory=list)
    lines_added: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    lines_deleted: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    bytes_added: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    bytes_deleted: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    cumulative_lines: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    cumulative_bytes: CategoryBreakdown = field(default_factory=CategoryBreakdown)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "commits": self.commits,
            "commit_shas": list(self.commit_shas),
            "lines_added": self.lines_added.to_dict(),
            "lines_deleted": self.lines_deleted.to_dict(),
            "bytes_added": self.bytes_added.to_dict(),
            "bytes_deleted": self.bytes_deleted.to_dict(),
            "cumulative_lines": self.cumulative_lines.to_dict(),
            "cumulative_bytes": self.cumulative_bytes.to_dict(),
        }


@dataclass
class LinearSeriesPoint:
    commit_index: int
    sha: str
    date: str
    lines_added: int
    lines_deleted: int
    net_lines: int
    cumulative_lines: CategoryBreakdown
    cumulative_bytes: CategoryBreakdown

    def to_dict(self) -> dict:
        return {
            "commit_index": self.commit_index,
            "sha": self.sha,
            "date": self.date,
            "lines_added": self.lines_added,
            "lines_deleted": self.lines_deleted,
            "net_lines": self.net_lines,
            "cumulative_lines": self.cumulative_lines.to_dict(),
            "cumulative_bytes": self.cumulative_bytes.to_dict(),
        }


class _CategoryCache(dict):
    def __missing__(self, path: str) -> FileCategory:
        category = classify_category(path)
        self[path] = category
        return category


def _accumulate_commit(
    commit: CommitRecord,
    categories: _CategoryCache,
    net_lines: CategoryBreakdown,
    net_bytes: CategoryBreakdown,
    point: Optional[TimeSeriesPoint] = None,
) -> None:
    for change in commit.changes:
        category = categories[change.path]
        net_lines.add(category, change.net_lines)
        net_bytes.add(category, change.net_bytes)
        if point is not None:
            point.lines_added.add(category, change.lines_added)
            point.lines_deleted.add(category, change.lines_deleted)
            point.bytes_added.add(category, change.bytes_added or 0)
            point.bytes_deleted.add(category, change.bytes_deleted or 0)


def build_time_series(context: AnalysisContext) -> list[TimeSeriesPoint]:
    """Calendar-bucketed series with running per-category totals.

    Buckets are emitted in chronological order whatever the input order, and
    the running totals are never reset. With ``retain_empty_buckets`` the gaps
    between the first and last bucket are filled with zero-commit points. With
    ``include_baseline`` an all-zero point one bucket before the first commit
    opens the series.
    """
    commits = context.commits
    if not commits:
        return []

    config = context.config
    granularity = resolve_granularity(
        config.granularity, context.span_hours, config.hourly_threshold_hours
    )

    categories = _CategoryCache()
    points: dict[datetime, TimeSeriesPoint] = {}
    net_lines: dict[datetime, CategoryBreakdown] = {}
    net_bytes: dict[datetime, CategoryBreakdown] = {}

    for commit in commits:
        start = bucket_start(commit.timestamp, granularity)
        point = points.get(start)
        if point is None:
            point = points[start] = TimeSeriesPoint(date=bucket_key(start, granularity))
            net_lines[start] = CategoryBreakdown()
            net_bytes[start] = CategoryBreakdown()
        point.commits += 1
        point.commit_shas.append(commit.sha)
        _accumulate_commit(commit, categories, net_lines[start], net_bytes[start], point)

    starts = sorted(points)
    if config.retain_empty_buckets:
        starts = _fill_gaps(starts[0], starts[-1], granularity)
    if config.include_baseline:
        starts.insert(0, previous_bucket(starts[0], granularity))

    cumulative_lines = CategoryBreakdown()
    cumulative_bytes = CategoryBreakdown()
    series: list[TimeSeriesPoint] = []
    for start in starts:
        point = points.get(start)
        if point is None:
            point = TimeSeriesPoint(date=bucket_key(start, granularity))
        else:
            cumulative_lines.merge(net_lines[start])
            cumulative_bytes.merge(net_bytes[start])
        point.cumulative_lines = cumulative_lines.copy()
        point.cumulative_bytes = cumulative_bytes.copy()
        series.append(point)

    logger.debug(
        "Time series: %d commits in %d %s buckets", len(commits), len(series), granularity
    )
    return series


def _fill_gaps(first: datetime, last: datetime, granularity: str) -> list[datetime]:
    starts = []
    current = first
    while current <= last:
        starts.append(current)
        current = next_bucket(current, granularity)
    return starts


def build_linear_series(context: AnalysisContext) -> list[LinearSeriesPoint]:
    """One point per commit, in input order, with running per-category totals."""
    categories = _CategoryCache()
    cumulative_lines = CategoryBreakdown()
    cumulative_bytes = CategoryBreakdown()
    series: list[LinearSeriesPoint] = []

    for index, commit in enumerate(context.commits):
        _accumulate_commit(commit, categories, cumulative_lines, cumulative_bytes)
        series.append(
            LinearSeriesPoint(
                commit_index=index,
                sha=commit.sha,
                date=commit.iso_date,
                lines_added=commit.lines_added,
                lines_deleted=commit.lines_deleted,
                net_lines=commit.net_lines,
                cumulative_lines=cumulative_lines.copy(),
                cumulative_bytes=cumulative_bytes.copy(),
            )
        )

    return series
