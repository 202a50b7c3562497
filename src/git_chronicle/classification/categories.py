"""Coarse file categories.

Rules are evaluated top to bottom and the first match wins:

    1. binary asset extension        -> other
    2. test path pattern             -> test
    3. build/config language or name -> build
    4. documentation language/path   -> documentation
    5. markup, styles, SQL           -> application
    6. fallback                      -> application if the language supports
                                        complexity scoring, else other

The order is part of the report format; changing it changes every report.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .languages import LanguageInfo, detect_language, file_extension


class FileCategory(str, Enum):
    APPLICATION = "application"
    TEST = "test"
    BUILD = "build"
    DOCUMENTATION = "documentation"
    OTHER = "other"


CATEGORIES: tuple[FileCategory, ...] = tuple(FileCategory)

BINARY_EXTENSIONS = frozenset(
    {
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".ico", ".svg", ".webp",
        ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
        ".zip", ".tar", ".gz", ".bz2", ".7z", ".rar",
        ".exe", ".dll", ".so", ".dylib", ".lib", ".a",
        ".class", ".jar", ".war", ".ear", ".pyc", ".pyo",
        ".ttf", ".otf", ".woff", ".woff2", ".eot",
        ".mp3", ".mp4", ".avi", ".mov", ".wmv", ".flv",
        ".db", ".sqlite", ".sqlite3",
        ".bin", ".dat", ".img", ".iso",
    }
)

TEST_DIR_NAMES = frozenset({"test", "tests", "__tests__", "spec", "specs"})
TEST_NAME_MARKERS = (".test.", ".spec.", "_test.", "_spec.")
TEST_FILE_PREFIXES = ("test_",)

BUILD_LANGUAGES = frozenset(
    {
        "JSON", "YAML", "TOML", "XML", "INI", "Properties", "Config",
        "Shell", "PowerShell", "Batch", "Dockerfile", "Makefile", "Gradle",
    }
)
BUILD_FILE_NAMES = frozenset(
    {
        "setup.py", "setup.cfg", "pyproject.toml", "package.json", "cargo.toml",
        "go.mod", "go.sum", "gemfile", "rakefile", "cmakelists.txt", "pom.xml",
        "build.gradle", "requirements.txt", "tox.ini", "noxfile.py",
    }
)

DOCUMENTATION_LANGUAGES = frozenset({"Markdown", "reStructuredText", "Text"})
DOCUMENTATION_NAMES = frozenset({"license", "licence", "changelog", "authors", "notice"})
DOCUMENTATION_DIRS = ("docs/", "doc/")

APPLICATION_LANGUAGES = frozenset({"HTML", "CSS", "SCSS", "LESS", "SQL"})


@dataclass(frozen=True)
class CategoryRule:
    name: str
    category: FileCategory
    matches: Callable[[str, str, LanguageInfo], bool]


def _is_binary_asset(path: str, name: str, lang: LanguageInfo) -> bool:
    return file_extension(name).lower() in BINARY_EXTENSIONS


def _is_test(path: str, name: str, lang: LanguageInfo) -> bool:
    if name.startswith(TEST_FILE_PREFIXES) or any(m in name for m in TEST_NAME_MARKERS):
        return True
    return any(segment in TEST_DIR_NAMES for segment in path.split("/")[:-1])


def _is_build(path: str, name: str, lang: LanguageInfo) -> bool:
    return lang.name in BUILD_LANGUAGES or name in BUILD_FILE_NAMES


def _is_documentation(path: str, name: str, lang: LanguageInfo) -> bool:
    if lang.name in DOCUMENTATION_LANGUAGES:
        return True
    stem = name.split(".", 1)[0]
    return stem in DOCUMENTATION_NAMES or path.startswith(DOCUMENTATION_DIRS)


def _is_markup_application(path: str, name: str, lang: LanguageInfo) -> bool:
    return lang.name in APPLICATION_LANGUAGES


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("binary-asset", FileCategory.OTHER, _is_binary_asset),
    CategoryRule("test-path", FileCategory.TEST, _is_test),
    CategoryRule("build", FileCategory.BUILD, _is_build),
    CategoryRule("documentation", FileCategory.DOCUMENTATION, _is_documentation),
    CategoryRule("markup-application", FileCategory.APPLICATION, _is_markup_application),
)


def classify_category(path: str) -> FileCategory:
    """Resolve a path to exactly one FileCategory; never fails."""
    normalised = path.replace("\\", "/").lower()
    name = posixpath.basename(normalised)
    lang = detect_language(path)

    for rule in CATEGORY_RULES:
        if rule.matches(normalised, name, lang):
            return rule.category

    return FileCategory.APPLICATION if lang.supports_complexity else FileCategory.OTHER
