"""File classification: language detection and coarse categories."""

from .categories import CATEGORIES, FileCategory, classify_category
from .languages import (
    LANGUAGES,
    UNKNOWN,
    LanguageInfo,
    detect_language,
    get_language,
    supports_complexity,
)

__all__ = [
    "CATEGORIES",
    "FileCategory",
    "LANGUAGES",
    "LanguageInfo",
    "UNKNOWN",
    "classify_category",
    "detect_language",
    "get_language",
    "supports_complexity",
]
