"""File heat: recency- and frequency-weighted activity per surviving file.

    recency    = exp(-days_since_last_modified / 30)
    heat_score = commit_count * 0.4 + recency * 0.6

Only files in the current snapshot are ranked; history of deleted files is
ignored. Ordering is heat descending, then commit count descending, then path.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import numpy as np

from ..classification.categories import classify_category
from ..classification.languages import detect_language
from ..history.models import AnalysisContext

RECENCY_DECAY_DAYS = 30.0
FREQUENCY_WEIGHT = 0.4
RECENCY_WEIGHT = 0.6

_SECONDS_PER_DAY = 86400.0


@dataclass(frozen=True)
class FileHeatEntry:
    path: str
    heat_score: float
    commit_count: int
    last_modified: int  # unix seconds
    total_lines: int  # net lines, floored at 1
    file_type: str
    category: str

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "heat_score": self.heat_score,
            "commit_count": self.commit_count,
            "last_modified": datetime.fromtimestamp(self.last_modified, tz=timezone.utc).isoformat(),
            "total_lines": self.total_lines,
            "file_type": self.file_type,
            "category": self.category,
        }


def heat_score(commit_count: int, days_since_last_modified: float) -> float:
    recency = float(np.exp(-days_since_last_modified / RECENCY_DECAY_DAYS))
    return commit_count * FREQUENCY_WEIGHT + recency * RECENCY_WEIGHT


def rank_file_heat(context: AnalysisContext) -> list[FileHeatEntry]:
    current = context.current_files
    if not current:
        return []

    commit_counts: dict[str, int] = {}
    last_modified: dict[str, int] = {}
    net_lines: dict[str, int] = {}

    for commit in context.commits:
        for change in commit.changes:
            path = change.path
            if path not in current:
                continue
            commit_counts[path] = commit_counts.get(path, 0) + 1
            net_lines[path] = net_lines.get(path, 0) + change.net_lines
            if commit.timestamp > last_modified.get(path, -1):
                last_modified[path] = commit.timestamp

    if not commit_counts:
        return []

    paths = list(commit_counts)
    counts = np.array([commit_counts[p] for p in paths], dtype=float)
    # Commits dated after `now` count as touched today
    days = np.maximum(
        (context.now - np.array([last_modified[p] for p in paths], dtype=float))
        / _SECONDS_PER_DAY,
        0.0,
    )
    scores = counts * FREQUENCY_WEIGHT + np.exp(-days / RECENCY_DECAY_DAYS) * RECENCY_WEIGHT

    entries = [
        FileHeatEntry(
            path=path,
            heat_score=float(score),
            commit_count=commit_counts[path],
            last_modified=last_modified[path],
            total_lines=max(net_lines[path], 1),
            file_type=detect_language(path).name,
            category=classify_category(path).value,
        )
        for path, score in zip(paths, scores)
    ]
    entries.sort(key=lambda e: (-e.heat_score, -e.commit_count, e.path))
    return entries[: context.config.max_heat_files]
