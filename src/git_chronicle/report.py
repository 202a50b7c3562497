"""Report payload assembly.

The caller fetches history and the current file set once, wraps them in an
AnalysisContext, and every aggregator runs as an independent pass over that
context. ``build_report`` merges the results into one JSON-serializable dict.

Example:
    >>> context = load_context(GitHistoryProvider(repo), GitFileSetProvider(repo))
    >>> payload = build_report(context)
    >>> payload["summary"]["total_commits"]
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from .complexity.scorer import FileAnalysisResult, complexity_map, summarize
from .config import ChronicleConfig
from .history.models import AnalysisContext
from .history.providers import (
    CommitHistoryProvider,
    CurrentFileSetProvider,
    ExternalComplexityTool,
)
from .logging_config import get_logger
from .ranking.awards import commit_awards, contributor_stats
from .ranking.file_types import file_type_stats
from .ranking.heat import rank_file_heat
from .ranking.top_files import top_files
from .temporal.series import build_linear_series, build_time_series
from .text import word_frequencies

logger = get_logger(__name__)

REPORT_VERSION = 1


def load_context(
    history: CommitHistoryProvider,
    file_set: CurrentFileSetProvider,
    config: Optional[ChronicleConfig] = None,
    now: Optional[int] = None,
) -> AnalysisContext:
    """Fetch commits and the current file set once and freeze them into a context."""
    config = config or ChronicleConfig()
    commits = history.get_commits(max_commits=config.max_commits or None)
    current_files = file_set.get_current_files()
    return AnalysisContext.build(commits, current_files, config=config, now=now)


def _resolve_complexity(
    complexity_results: Optional[Sequence[FileAnalysisResult]],
    external_complexity: Optional[ExternalComplexityTool],
) -> Optional[Mapping[str, int]]:
    if external_complexity is not None:
        if external_complexity.is_available():
            return external_complexity.analyze()
        logger.info("External complexity tool unavailable; using built-in scores if present")
    if complexity_results:
        return complexity_map(complexity_results)
    return None


def build_report(
    context: AnalysisContext,
    complexity_results: Optional[Sequence[FileAnalysisResult]] = None,
    external_complexity: Optional[ExternalComplexityTool] = None,
) -> dict[str, Any]:
    config = context.config
    time_series = build_time_series(context)
    linear_series = build_linear_series(context)

    complexity = _resolve_complexity(complexity_results, external_complexity)
    summary = summarize(complexity_results or (), hotspot_limit=config.hotspot_limit)

    final_lines = time_series[-1].cumulative_lines.total if time_series else 0
    final_bytes = time_series[-1].cumulative_bytes.total if time_series else 0

    payload = {
        "version": REPORT_VERSION,
        "generated_at": context.now,
        "summary": {
            "total_commits": len(context.commits),
            "total_contributors": len({c.author_name for c in context.commits}),
            "current_files": len(context.current_files),
            "lines_added": sum(c.lines_added for c in context.commits),
            "lines_deleted": sum(c.lines_deleted for c in context.commits),
            "cumulative_lines": final_lines,
            "cumulative_bytes": final_bytes,
        },
        "time_series": [p.to_dict() for p in time_series],
        "linear_series": [p.to_dict() for p in linear_series],
        "file_heat": [e.to_dict() for e in rank_file_heat(context)],
        "top_files": top_files(context, complexity).to_dict(),
        "awards": commit_awards(context).to_dict(),
        "contributors": [s.to_dict() for s in contributor_stats(context)],
        "file_types": [s.to_dict() for s in file_type_stats(context)],
        "complexity": summary.to_dict(),
        "words": [w.to_dict() for w in word_frequencies(context)],
    }
    logger.debug("Report built: %d commits, %d series points", len(context.commits), len(time_series))
    return payload
