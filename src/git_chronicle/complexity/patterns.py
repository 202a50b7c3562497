"""Decision-point patterns for cyclomatic complexity estimation.

Each pattern set is an ordered tuple of (compiled regex, weight). A file's
score is ``1 + sum(len(regex.findall(content)) * weight)``.

Adding a language: add a row to PATTERN_SETS keyed by the language name (or
its family). Languages without a row use GENERIC_PATTERNS.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..classification.languages import LanguageInfo, get_language


@dataclass(frozen=True)
class DecisionPattern:
    regex: re.Pattern
    weight: int = 1


def _p(pattern: str, weight: int = 1) -> DecisionPattern:
    return DecisionPattern(re.compile(pattern), weight)


# ── Re-usable building blocks ──────────────────────────────────────

_AND = _p(r"&&")
_OR = _p(r"\|\|")
_TERNARY = _p(r"\?")


JAVASCRIPT_PATTERNS = (
    _p(r"\b(if|while|for|catch)\b"),
    _p(r"\bcase\b(?!\s*:)"),
    _AND,
    _OR,
    _TERNARY,
)

PYTHON_PATTERNS = (
    _p(r"\b(if|while|for|except|elif)\b"),
    _p(r"\band\b"),
    _p(r"\bor\b"),
)

C_FAMILY_PATTERNS = (
    _p(r"\b(if|while|for|catch|case|switch)\b"),
    _AND,
    _OR,
    _TERNARY,
)

GO_PATTERNS = (
    _p(r"\b(if|for|switch|case)\b"),
    _AND,
    _OR,
)

RUST_PATTERNS = (
    _p(r"\b(if|while|for|match)\b"),
    _AND,
    _OR,
)

GENERIC_PATTERNS = (
    _p(r"\b(if|while|for|catch|case)\b"),
    _AND,
    _OR,
)


# Keyed by language name first, then by family.
PATTERN_SETS: Mapping[str, tuple[DecisionPattern, ...]] = MappingProxyType(
    {
        "javascript": JAVASCRIPT_PATTERNS,
        "Python": PYTHON_PATTERNS,
        "c-family": C_FAMILY_PATTERNS,
        "Go": GO_PATTERNS,
        "Rust": RUST_PATTERNS,
    }
)


def patterns_for(language: LanguageInfo | str) -> tuple[DecisionPattern, ...]:
    if isinstance(language, str):
        language = get_language(language)
    by_name = PATTERN_SETS.get(language.name)
    if by_name is not None:
        return by_name
    if language.family is not None and language.family in PATTERN_SETS:
        return PATTERN_SETS[language.family]
    return GENERIC_PATTERNS
