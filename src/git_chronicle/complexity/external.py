"""Optional lizard-backed complexity via subprocess.

lizard is not a hard dependency. When the executable is missing the tool
reports itself unavailable, warns once per process, and ``analyze()`` returns
an empty mapping so complexity-derived views simply stay empty.
"""

from __future__ import annotations

import csv
import io
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_EXCLUDES = (
    "*/node_modules/*",
    "*/dist/*",
    "*/build/*",
    "*/.git/*",
    "*/coverage/*",
)

# lizard --csv columns: nloc,ccn,token,param,length,location,file,function,long_name,start,end
_CCN_COLUMN = 1
_FILE_COLUMN = 6


class LizardComplexityTool:
    """Per-file maximum cyclomatic complexity from ``lizard --csv``."""

    _missing_warned = False

    def __init__(
        self,
        repo_path: str,
        executable: str = "lizard",
        excludes: Sequence[str] = DEFAULT_EXCLUDES,
        timeout: int = 300,
    ):
        self.repo_path = str(Path(repo_path).resolve())
        self.executable = executable
        self.excludes = tuple(excludes)
        self.timeout = timeout

    def is_available(self) -> bool:
        if shutil.which(self.executable) is not None:
            return True
        if not LizardComplexityTool._missing_warned:
            logger.warning(
                "lizard is not installed; complexity rankings will be empty. "
                "Install with: pip install lizard"
            )
            LizardComplexityTool._missing_warned = True
        return False

    def analyze(self) -> dict[str, int]:
        if not self.is_available():
            return {}

        raw = self._run()
        if raw is None:
            return {}
        return self.parse_csv(raw, self.repo_path)

    def _run(self) -> Optional[str]:
        cmd = [self.executable, self.repo_path, "--csv"]
        for pattern in self.excludes:
            cmd.extend(["-x", pattern])
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.warning("lizard error: %s", e)
            return None
        # lizard exits non-zero when warnings fire but still prints the CSV
        if not result.stdout:
            logger.warning("lizard produced no output: %s", result.stderr.strip())
            return None
        return result.stdout

    @staticmethod
    def parse_csv(raw: str, repo_path: str) -> dict[str, int]:
        """Reduce lizard's per-function rows to the max CCN per file."""
        prefix = repo_path.rstrip("/") + "/"
        per_file: dict[str, int] = {}

        for row in csv.reader(io.StringIO(raw)):
            if len(row) <= _FILE_COLUMN:
                continue
            try:
                ccn = int(row[_CCN_COLUMN])
            except ValueError:
                continue  # header
            path = row[_FILE_COLUMN]
            if path.startswith(prefix):
                path = path[len(prefix) :]
            elif path.startswith("./"):
                path = path[2:]
            if ccn > per_file.get(path, 0):
                per_file[path] = ccn

        return per_file
