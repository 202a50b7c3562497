"""Top-N files by size, churn and complexity.

Only files in the current snapshot are ranked. Each list is ordered by value
descending with ties broken by path, and every entry carries its share of the
returned list's total.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ..history.models import AnalysisContext


@dataclass(frozen=True)
class TopFileStat:
    path: str
    value: float
    percentage: float

    def to_dict(self) -> dict:
        return {"path": self.path, "value": self.value, "percentage": self.percentage}


@dataclass(frozen=True)
class TopFiles:
    largest: tuple[TopFileStat, ...] = ()
    most_churn: tuple[TopFileStat, ...] = ()
    most_complex: tuple[TopFileStat, ...] = ()

    def to_dict(self) -> dict:
        return {
            "largest": [s.to_dict() for s in self.largest],
            "most_churn": [s.to_dict() for s in self.most_churn],
            "most_complex": [s.to_dict() for s in self.most_complex],
        }


def _rank(values: Iterable[tuple[str, float]], limit: int) -> list[TopFileStat]:
    top = sorted(values, key=lambda item: (-item[1], item[0]))[:limit]
    total = sum(value for _, value in top)
    return [
        TopFileStat(path=path, value=value, percentage=(value / total) * 100 if total > 0 else 0.0)
        for path, value in top
    ]


def _per_file_sum(context: AnalysisContext, metric) -> dict[str, int]:
    current = context.current_files
    totals: dict[str, int] = {}
    for commit in context.commits:
        for change in commit.changes:
            if change.path in current:
                totals[change.path] = totals.get(change.path, 0) + metric(change)
    return totals


def top_files_by_size(context: AnalysisContext) -> list[TopFileStat]:
    """Current size as net lines added over history; non-positive sizes are dropped."""
    sizes = _per_file_sum(context, lambda c: c.net_lines)
    return _rank(((p, s) for p, s in sizes.items() if s > 0), context.config.top_n)


def top_files_by_churn(context: AnalysisContext) -> list[TopFileStat]:
    """Churn as lines added plus lines deleted over history."""
    churn = _per_file_sum(context, lambda c: c.churn)
    return _rank(churn.items(), context.config.top_n)


def top_files_by_complexity(
    context: AnalysisContext, complexity: Optional[Mapping[str, int]]
) -> list[TopFileStat]:
    """Rank by a path -> complexity mapping; empty when no complexity data exists."""
    if not complexity:
        return []
    current = context.current_files
    return _rank(
        ((p, c) for p, c in complexity.items() if p in current and c > 0),
        context.config.top_n,
    )


def top_files(
    context: AnalysisContext, complexity: Optional[Mapping[str, int]] = None
) -> TopFiles:
    return TopFiles(
        largest=tuple(top_files_by_size(context)),
        most_churn=tuple(top_files_by_churn(context)),
        most_complex=tuple(top_files_by_complexity(context, complexity)),
    )
