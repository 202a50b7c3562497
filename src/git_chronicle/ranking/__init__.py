"""Rankings: file heat, top files, commit and contributor awards."""

from .awards import (
    CommitAward,
    CommitAwards,
    ContributorAward,
    ContributorStats,
    commit_awards,
    contributor_stats,
    highest_average_lines_changed,
    lowest_average_lines_changed,
    top_commits_by,
)
from .file_types import FileTypeStat, file_type_stats
from .filters import is_real_commit
from .heat import FileHeatEntry, heat_score, rank_file_heat
from .top_files import (
    TopFiles,
    TopFileStat,
    top_files,
    top_files_by_churn,
    top_files_by_complexity,
    top_files_by_size,
)

__all__ = [
    "CommitAward",
    "CommitAwards",
    "ContributorAward",
    "ContributorStats",
    "FileHeatEntry",
    "FileTypeStat",
    "TopFileStat",
    "TopFiles",
    "commit_awards",
    "contributor_stats",
    "file_type_stats",
    "heat_score",
    "highest_average_lines_changed",
    "is_real_commit",
    "lowest_average_lines_changed",
    "rank_file_heat",
    "top_commits_by",
    "top_files",
    "top_files_by_churn",
    "top_files_by_complexity",
    "top_files_by_size",
]
