"""Language registry: the single source of truth for extension lookups.

Adding a new language:
  1. Add a LanguageInfo entry to LANGUAGES below.
  2. If it supports complexity scoring, give it a pattern set in
     complexity/patterns.py (otherwise the generic set is used).
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class LanguageInfo:
    """What the classifier knows about one language."""

    name: str
    extensions: tuple[str, ...] = ()
    family: Optional[str] = None  # javascript, c-family, functional, markup, config, data, other
    supports_complexity: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "family": self.family,
            "supports_complexity": self.supports_complexity,
        }


UNKNOWN = LanguageInfo(name="Unknown")
CONFIG = LanguageInfo(name="Config", family="config")


# ── Language definitions ───────────────────────────────────────────

LANGUAGES: tuple[LanguageInfo, ...] = (
    # JavaScript family
    LanguageInfo("JavaScript", (".js", ".mjs", ".cjs"), "javascript", True),
    LanguageInfo("TypeScript", (".ts", ".tsx"), "javascript", True),
    LanguageInfo("JSX", (".jsx",), "javascript", True),
    # Python
    LanguageInfo("Python", (".py", ".pyw", ".pyx"), None, True),
    # C family
    LanguageInfo("C", (".c", ".h"), "c-family", True),
    LanguageInfo("C++", (".cpp", ".cxx", ".cc", ".hpp", ".hxx"), "c-family", True),
    LanguageInfo("C#", (".cs",), "c-family", True),
    LanguageInfo("Java", (".java",), "c-family", True),
    # Other general-purpose languages
    LanguageInfo("Go", (".go",), None, True),
    LanguageInfo("Rust", (".rs",), None, True),
    LanguageInfo("Ruby", (".rb", ".rbw"), None, True),
    LanguageInfo("PHP", (".php", ".phtml"), None, True),
    LanguageInfo("Swift", (".swift",), None, True),
    LanguageInfo("Kotlin", (".kt", ".kts"), None, True),
    LanguageInfo("Scala", (".scala",), None, True),
    LanguageInfo("Lua", (".lua",), None, True),
    LanguageInfo("Perl", (".pl", ".pm"), None, True),
    LanguageInfo("R", (".r",), None, True),
    # Functional
    LanguageInfo("Haskell", (".hs", ".lhs"), "functional", True),
    LanguageInfo("Erlang", (".erl", ".hrl"), "functional", True),
    LanguageInfo("Elixir", (".ex", ".exs"), "functional", True),
    # Markup and styles
    LanguageInfo("HTML", (".html", ".htm", ".xhtml"), "markup", False),
    LanguageInfo("CSS", (".css",), "markup", False),
    LanguageInfo("SCSS", (".scss", ".sass"), "markup", False),
    LanguageInfo("LESS", (".less",), "markup", False),
    LanguageInfo("XML", (".xml", ".xsl", ".xsd"), "markup", False),
    LanguageInfo("SQL", (".sql",), "data", False),
    # Data formats
    LanguageInfo("JSON", (".json",), "data", False),
    LanguageInfo("YAML", (".yaml", ".yml"), "data", False),
    LanguageInfo("TOML", (".toml",), "data", False),
    LanguageInfo("CSV", (".csv",), "data", False),
    LanguageInfo("INI", (".ini", ".cfg", ".conf"), "config", False),
    LanguageInfo("Properties", (".properties",), "config", False),
    # Scripts and build files
    LanguageInfo("Shell", (".sh", ".bash", ".zsh", ".fish"), "config", True),
    LanguageInfo("PowerShell", (".ps1", ".psm1", ".psd1"), "config", True),
    LanguageInfo("Batch", (".bat", ".cmd"), "config", False),
    LanguageInfo("Dockerfile", (".dockerfile",), "config", False),
    LanguageInfo("Makefile", (".make", ".mk", ".makefile"), "config", False),
    LanguageInfo("Gradle", (".gradle",), "config", False),
    # Documentation
    LanguageInfo("Markdown", (".md", ".markdown"), "markup", False),
    LanguageInfo("reStructuredText", (".rst",), "markup", False),
    LanguageInfo("Text", (".txt",), "other", False),
)

# Extensionless files recognised by (lower-cased) name.
NAMED_FILES: Mapping[str, str] = MappingProxyType(
    {
        "dockerfile": "Dockerfile",
        "makefile": "Makefile",
        "gnumakefile": "Makefile",
    }
)


def _build_extension_index(languages: tuple[LanguageInfo, ...]) -> Mapping[str, LanguageInfo]:
    index: dict[str, LanguageInfo] = {}
    for lang in languages:
        for ext in lang.extensions:
            key = ext.lower()
            if key in index:
                raise ValueError(f"Duplicate extension {key} for {lang.name} and {index[key].name}")
            index[key] = lang
    return MappingProxyType(index)


# Built once at import; shared by every caller.
EXTENSION_INDEX = _build_extension_index(LANGUAGES)
LANGUAGES_BY_NAME: Mapping[str, LanguageInfo] = MappingProxyType(
    {lang.name: lang for lang in (*LANGUAGES, CONFIG, UNKNOWN)}
)


def file_extension(path: str) -> str:
    """Extension of the final path segment including the dot, or ''.

    Dotfiles such as ``.gitignore`` report their whole name as the extension.
    """
    base = path.replace("\\", "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot != -1 else ""


def detect_language(path: str) -> LanguageInfo:
    """Resolve a path to its LanguageInfo; never fails.

    Extension lookup is case-insensitive. Paths whose extension is unknown fall
    back to name rules (Dockerfile, Makefile), then to the dotfile heuristic
    (Config), else UNKNOWN.
    """
    lang = EXTENSION_INDEX.get(file_extension(path).lower())
    if lang is not None:
        return lang

    name = posixpath.basename(path.replace("\\", "/")).lower()
    named = NAMED_FILES.get(name)
    if named is not None:
        return LANGUAGES_BY_NAME[named]
    if name.startswith("."):
        return CONFIG
    return UNKNOWN


def get_language(name: str) -> LanguageInfo:
    """Look up a language by display name; unknown names give UNKNOWN."""
    return LANGUAGES_BY_NAME.get(name, UNKNOWN)


def supports_complexity(language: LanguageInfo | str) -> bool:
    if isinstance(language, str):
        language = get_language(language)
    return language.supports_complexity
