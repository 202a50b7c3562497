"""Complexity scoring: per-file estimates, batched analysis, optional lizard."""

from .external import LizardComplexityTool
from .scorer import (
    ComplexityScorer,
    ComplexitySummary,
    FileAnalysisResult,
    Hotspot,
    analyze_file,
    complexity_map,
    failed_paths,
    is_binary,
    score_complexity,
    summarize,
)

__all__ = [
    "ComplexityScorer",
    "ComplexitySummary",
    "FileAnalysisResult",
    "Hotspot",
    "LizardComplexityTool",
    "analyze_file",
    "complexity_map",
    "failed_paths",
    "is_binary",
    "score_complexity",
    "summarize",
]
