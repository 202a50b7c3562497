"""Configuration loading and management for git-chronicle.

Configuration sources are merged in priority order:
    1. Defaults (defined in ChronicleConfig)
    2. Global config (~/.git-chronicle.toml)
    3. Project config (./git-chronicle.toml)
    4. Explicit config file
    5. Environment variables (CHRONICLE_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(granularity="week", top_n=10)
    >>> config.granularity
    'week'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError

Granularity = Literal["auto", "hour", "day", "week", "month"]
Verbosity = Literal["quiet", "normal", "verbose"]

GRANULARITIES = ("auto", "hour", "day", "week", "month")
VERBOSITIES = ("quiet", "normal", "verbose")

DEFAULT_STOP_WORDS = frozenset(
    {
        "the", "is", "are", "was", "were", "been", "be", "have", "has", "had",
        "do", "does", "did", "will", "would", "should", "could", "may", "might", "must",
        "can", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "up", "about", "into", "through", "during", "before",
        "after", "above", "below", "between", "under", "since", "without", "within", "along",
        "following", "across", "behind", "beyond", "plus", "except", "yet", "so",
        "if", "then", "than", "such", "both", "either", "neither", "all", "each",
        "every", "any", "some", "no", "not", "only", "just", "also", "very",
        "too", "quite", "almost", "always", "often", "never", "seldom", "rarely", "usually",
        "generally", "sometimes", "now", "once", "twice", "first", "second", "last",
        "next", "previous", "few", "many", "much", "more", "most", "less", "least",
        "own", "same", "other", "another", "what", "which", "who", "whom",
        "whose", "where", "when", "why", "how", "here", "there", "everywhere",
        "anywhere", "somewhere", "nowhere", "this", "that", "these", "those", "it", "its",
        "they", "them", "their", "theirs", "we", "us", "our", "ours", "you",
        "your", "yours", "he", "him", "his", "she", "her", "hers", "i",
        "me", "my", "mine", "myself", "yourself", "himself", "herself", "itself", "ourselves",
        "yourselves", "themselves", "yes", "as", "because", "while", "until", "although",
        "though", "unless", "however", "therefore", "thus", "hence", "moreover", "furthermore",
        "meanwhile",
    }
)


@dataclass(frozen=True)
class ChronicleConfig:
    """Configuration for one report-generation run.

    Attributes:
        Time series:
            granularity: Calendar bucket size ("auto" picks hour or day)
            hourly_threshold_hours: History span below which "auto" means hourly
            retain_empty_buckets: Fill gaps with zero-commit points
            include_baseline: Prepend a zero point one bucket before the first commit

        Complexity:
            batch_size: Files fetched concurrently per batch
            hotspot_limit: Number of hotspots reported by summarize()

        Rankings and awards:
            top_n: Length of top-files and commit-award lists
            max_heat_files: Cap on file heat entries
            award_min_commits: Minimum commits for average-lines awards (0 = no filter)
            exclude_merge_commits: Drop merge/automated commits from awards

        History retrieval:
            max_commits: Maximum commits to read (0 = unlimited)
            bytes_per_line_estimate: Bytes per changed line for text files

        Commit-message words:
            min_word_length, max_words, stop_words

        Output control:
            verbosity: Logging verbosity level
    """

    # Time series
    granularity: Granularity = "auto"
    hourly_threshold_hours: int = 48
    retain_empty_buckets: bool = False
    include_baseline: bool = False

    # Complexity
    batch_size: int = 10
    hotspot_limit: int = 10

    # Rankings and awards
    top_n: int = 5
    max_heat_files: int = 100
    award_min_commits: int = 5
    exclude_merge_commits: bool = True

    # History retrieval
    max_commits: int = 0
    bytes_per_line_estimate: int = 50

    # Commit-message words
    min_word_length: int = 3
    max_words: int = 100
    stop_words: frozenset[str] = field(default_factory=lambda: DEFAULT_STOP_WORDS)

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.granularity not in GRANULARITIES:
            raise ValueError(f"granularity must be one of {', '.join(GRANULARITIES)}")
        if self.verbosity not in VERBOSITIES:
            raise ValueError(f"verbosity must be one of {', '.join(VERBOSITIES)}")

        if self.hourly_threshold_hours < 0:
            raise ValueError("hourly_threshold_hours must be non-negative")
        if self.batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if self.hotspot_limit < 1:
            raise ValueError("hotspot_limit must be at least 1")
        if self.top_n < 1:
            raise ValueError("top_n must be at least 1")
        if self.max_heat_files < 1:
            raise ValueError("max_heat_files must be at least 1")
        if self.award_min_commits < 0:
            raise ValueError("award_min_commits must be non-negative")
        if self.max_commits < 0:
            raise ValueError("max_commits must be non-negative")
        if self.bytes_per_line_estimate < 0:
            raise ValueError("bytes_per_line_estimate must be non-negative")
        if self.min_word_length < 1:
            raise ValueError("min_word_length must be at least 1")
        if self.max_words < 1:
            raise ValueError("max_words must be at least 1")

        # TOML hands us lists
        if not isinstance(self.stop_words, frozenset):
            object.__setattr__(self, "stop_words", frozenset(w.lower() for w in self.stop_words))


DEFAULT_CONFIG = ChronicleConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> ChronicleConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None`` values are ignored.

    Returns:
        Validated ChronicleConfig instance

    Raises:
        InvalidConfigError: If a config file is missing or invalid, or a value is out of range
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".git-chronicle.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "git-chronicle.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config_file", str(config_file), "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(ChronicleConfig)}
    for key in merged:
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown configuration key")

    try:
        return ChronicleConfig(**merged)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError("config", merged, str(e)) from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CHRONICLE_* environment variables.

    Every scalar field of ChronicleConfig can be set, e.g. CHRONICLE_GRANULARITY=week,
    CHRONICLE_TOP_N=10, CHRONICLE_RETAIN_EMPTY_BUCKETS=true.
    """
    type_hints = get_type_hints(ChronicleConfig)
    result: dict[str, Any] = {}

    for field_name in ChronicleConfig.__dataclass_fields__:
        env_key = f"CHRONICLE_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment (sets).
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is frozenset or type_hint is frozenset:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file; keys may sit at top level or under a [chronicle] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config_file", str(path), str(e)) from e
    return data.get("chronicle", data)
