"""Per-file complexity scoring and batched content analysis.

Usage:
    scorer = ComplexityScorer(GitContentProvider(repo), batch_size=10)
    results = scorer.batch_analyze("HEAD", paths)
    summary = summarize(results)

Batches run one at a time; inside a batch every content fetch runs
concurrently. A failed fetch becomes a stub result (binary, zero complexity)
and never aborts its siblings.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from ..classification.languages import LanguageInfo, detect_language
from ..exceptions import AnalysisCancelledError
from ..history.providers import FileContentProvider
from ..logging_config import get_logger
from .patterns import patterns_for

logger = get_logger(__name__)

DEFAULT_BATCH_SIZE = 10
DEFAULT_HOTSPOT_LIMIT = 10
_CENTS = Decimal("0.01")

# Control characters that still count as text
_TEXT_CONTROL = frozenset({"\t", "\n", "\r"})


@dataclass(frozen=True)
class FileAnalysisResult:
    path: str
    language: str
    complexity: int  # 0 when binary or unsupported
    lines: int
    size_bytes: int
    is_binary: bool
    fetch_failed: bool = False

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "language": self.language,
            "complexity": self.complexity,
            "lines": self.lines,
            "size_bytes": self.size_bytes,
            "is_binary": self.is_binary,
            "fetch_failed": self.fetch_failed,
        }


@dataclass(frozen=True)
class Hotspot:
    path: str
    complexity: int
    lines: int

    def to_dict(self) -> dict:
        return {"path": self.path, "complexity": self.complexity, "lines": self.lines}


@dataclass(frozen=True)
class ComplexitySummary:
    average_complexity: float = 0.0
    max_complexity: int = 0
    hotspots: tuple[Hotspot, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "average_complexity": self.average_complexity,
            "max_complexity": self.max_complexity,
            "hotspots": [h.to_dict() for h in self.hotspots],
        }


def is_binary(content: str) -> bool:
    """Heuristic binary detection.

    True when the content holds a NUL character, or when the number of
    control characters other than tab/LF/CR exceeds max(30% of length, 100).
    """
    if "\0" in content:
        return True
    non_printable = sum(1 for ch in content if ord(ch) < 32 and ch not in _TEXT_CONTROL)
    threshold = max(len(content) * 0.3, 100)
    return non_printable > threshold


def score_complexity(content: str, language: LanguageInfo | str) -> int:
    """Cyclomatic complexity estimate: 1 plus weighted decision-point matches."""
    complexity = 1
    for pattern in patterns_for(language):
        complexity += len(pattern.regex.findall(content)) * pattern.weight
    return complexity


def analyze_file(path: str, content: str) -> FileAnalysisResult:
    language = detect_language(path)
    binary = is_binary(content)

    complexity = 0
    if not binary and language.supports_complexity:
        complexity = score_complexity(content, language)

    return FileAnalysisResult(
        path=path,
        language=language.name,
        complexity=complexity,
        # every "\n" starts a new line, so "a\nb\n" is three lines and "" is one
        lines=0 if binary else content.count("\n") + 1,
        size_bytes=len(content.encode("utf-8", errors="surrogateescape")),
        is_binary=binary,
    )


def stub_result(path: str) -> FileAnalysisResult:
    """Placeholder for a file whose content could not be fetched."""
    return FileAnalysisResult(
        path=path,
        language=detect_language(path).name,
        complexity=0,
        lines=0,
        size_bytes=0,
        is_binary=True,
        fetch_failed=True,
    )


def failed_paths(results: Sequence[FileAnalysisResult]) -> list[str]:
    """Paths whose content could not be fetched, in result order."""
    return [r.path for r in results if r.fetch_failed]


class ComplexityScorer:
    """Fetches file contents through a FileContentProvider and scores them.

    Holds no per-run state, so one scorer may serve overlapping calls.
    """

    def __init__(
        self, provider: FileContentProvider, batch_size: int = DEFAULT_BATCH_SIZE
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self._provider = provider
        self._batch_size = batch_size

    def batch_analyze(
        self,
        revision: str,
        paths: Sequence[str],
        cancel_event: Optional[threading.Event] = None,
    ) -> list[FileAnalysisResult]:
        """Analyze ``paths`` at ``revision`` in fixed-size concurrent batches.

        Results come back in input order. When ``cancel_event`` is set, no new
        batch is started and AnalysisCancelledError carries the results so far.
        """
        results: list[FileAnalysisResult] = []
        total = len(paths)
        if total == 0:
            return results

        num_batches = (total + self._batch_size - 1) // self._batch_size
        logger.info(
            "Batch analyzing %d files at %s in %d batches", total, revision[:7], num_batches
        )

        with ThreadPoolExecutor(max_workers=self._batch_size) as executor:
            for batch_index, start in enumerate(range(0, total, self._batch_size)):
                if cancel_event is not None and cancel_event.is_set():
                    logger.warning(
                        "Batch analysis cancelled after %d of %d files", len(results), total
                    )
                    raise AnalysisCancelledError(len(results), total, list(results))

                batch = paths[start : start + self._batch_size]
                futures = [executor.submit(self._analyze_one, revision, p) for p in batch]
                # Wait for the whole batch before starting the next one
                results.extend(f.result() for f in futures)

                logger.debug("Processed batch %d/%d", batch_index + 1, num_batches)

        failed = failed_paths(results)
        if failed:
            logger.warning(
                "%d of %d files could not be fetched and were recorded as binary stubs",
                len(failed),
                total,
            )
        return results

    def _analyze_one(self, revision: str, path: str) -> FileAnalysisResult:
        try:
            content = self._provider.get_content(revision, path)
        except Exception as e:
            logger.warning("Failed to analyze file %s: %s", path, e)
            return stub_result(path)
        return analyze_file(path, content)


def summarize(
    results: Sequence[FileAnalysisResult], hotspot_limit: int = DEFAULT_HOTSPOT_LIMIT
) -> ComplexitySummary:
    """Aggregate complexity over the files that were actually scored.

    Hotspots are ordered by complexity descending, ties by path.
    """
    scored = [r for r in results if r.complexity > 0]
    if not scored:
        return ComplexitySummary()

    average = Decimal(sum(r.complexity for r in scored)) / len(scored)
    ranked = sorted(scored, key=lambda r: (-r.complexity, r.path))

    return ComplexitySummary(
        average_complexity=float(average.quantize(_CENTS, rounding=ROUND_HALF_UP)),
        max_complexity=max(r.complexity for r in scored),
        hotspots=tuple(
            Hotspot(path=r.path, complexity=r.complexity, lines=r.lines)
            for r in ranked[:hotspot_limit]
        ),
    )


def complexity_map(results: Sequence[FileAnalysisResult]) -> dict[str, int]:
    """Path -> complexity for scored files, the shape top-files ranking consumes."""
    return {r.path: r.complexity for r in results if r.complexity > 0}


__all__ = [
    "ComplexityScorer",
    "ComplexitySummary",
    "FileAnalysisResult",
    "Hotspot",
    "analyze_file",
    "complexity_map",
    "failed_paths",
    "is_binary",
    "score_complexity",
    "stub_result",
    "summarize",
]
