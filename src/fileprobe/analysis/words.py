"""Case-insensitive whole-word counting."""

from __future__ import annotations

import re
from typing import Dict, Sequence


def _whole_word_pattern(word: str) -> "re.Pattern[str]":
    return re.compile(rf"\b{re.escape(word)}\b")


def count_word(content: str, word: str) -> int:
    """Count whole-word occurrences of ``word`` in ``content`` ignoring case.

    Both sides are lower-cased before matching and ``word`` is escaped, so
    ``"a.b"`` only matches a literal period. An empty word never matches.
    """

    if not word:
        return 0
    pattern = _whole_word_pattern(word.lower())
    return sum(1 for _ in pattern.finditer(content.lower()))


def count_words(content: str, words: Sequence[str]) -> Dict[str, int]:
    """Return a mapping of each requested word, as given, to its match count."""

    if not words:
        return {}
    counts: Dict[str, int] = {}
    for word in words:
        if word not in counts:
            counts[word] = count_word(content, word)
    return counts
