"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ChronicleConfig, load_config

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    granularity: Optional[str] = None,
    max_commits: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> ChronicleConfig:
    """Build a config from CLI options."""
    overrides = {}
    if granularity is not None:
        overrides["granularity"] = granularity
    if max_commits is not None:
        overrides["max_commits"] = max_commits
    return load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)


def format_count(value: int) -> str:
    return f"{value:,}"
