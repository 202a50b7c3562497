"""Share of added lines per language over the current snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from ..classification.languages import detect_language
from ..history.models import AnalysisContext


@dataclass(frozen=True)
class FileTypeStat:
    file_type: str
    lines: int
    percentage: float

    def to_dict(self) -> dict:
        return {"file_type": self.file_type, "lines": self.lines, "percentage": self.percentage}


def file_type_stats(context: AnalysisContext) -> list[FileTypeStat]:
    lines_by_type: dict[str, int] = {}
    for commit in context.commits:
        for change in commit.changes:
            if change.path not in context.current_files:
                continue
            name = detect_language(change.path).name
            lines_by_type[name] = lines_by_type.get(name, 0) + change.lines_added

    total = sum(lines_by_type.values())
    stats = [
        FileTypeStat(
            file_type=name,
            lines=lines,
            percentage=(lines / total) * 100 if total > 0 else 0.0,
        )
        for name, lines in lines_by_type.items()
    ]
    stats.sort(key=lambda s: (-s.lines, s.file_type))
    return stats
