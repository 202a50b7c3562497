"""
git-chronicle - repository history analytics

Turns a commit history into growth time series, file heat rankings,
top-file lists, complexity hotspots and commit/contributor awards.
Every view is computed from one immutable AnalysisContext.
"""

__version__ = "0.1.0"

from .config import ChronicleConfig, load_config
from .history.models import AnalysisContext, CommitRecord, FileChange
from .report import build_report, load_context

__all__ = [
    "build_report",  # Main entry point
    "load_context",
    "AnalysisContext",
    "ChronicleConfig",
    "CommitRecord",
    "FileChange",
    "load_config",
]
