"""Word frequencies over commit messages."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

from .history.models import AnalysisContext

_WORD_RE = re.compile(r"[a-z]+")


@dataclass(frozen=True)
class WordFrequency:
    word: str
    count: int

    def to_dict(self) -> dict:
        return {"word": self.word, "count": self.count}


def word_frequencies(context: AnalysisContext) -> list[WordFrequency]:
    config = context.config
    counts: Counter[str] = Counter()
    for commit in context.commits:
        for word in _WORD_RE.findall(commit.message.lower()):
            if len(word) >= config.min_word_length and word not in config.stop_words:
                counts[word] += 1

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [WordFrequency(word=w, count=c) for w, c in ranked[: config.max_words]]
