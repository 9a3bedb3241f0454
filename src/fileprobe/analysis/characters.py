"""Character frequency tabulation.

Counts are taken over code points exactly as decoded: no case folding and no
Unicode normalisation. :class:`collections.Counter` keeps first-seen order,
which :func:`top_characters` relies on to break ties consistently.
"""

from __future__ import annotations

import unicodedata
from collections import Counter
from typing import List, Mapping, Tuple

DEFAULT_TOP_CHARACTERS = 10

_NAMED_CHARACTERS = {
    "\n": "\\n (newline)",
    "\t": "\\t (tab)",
    "\r": "\\r (carriage return)",
    " ": "' ' (space)",
}


def tabulate_characters(content: str) -> Counter[str]:
    counts: Counter[str] = Counter()
    for char in content:
        counts[char] += 1
    return counts


def top_characters(
    counts: Mapping[str, int],
    limit: int = DEFAULT_TOP_CHARACTERS,
) -> List[Tuple[str, int]]:
    """Return up to ``limit`` entries sorted by descending count.

    ``sorted`` is stable, so characters with equal counts keep the order in
    which ``counts`` yields them.
    """

    if limit <= 0:
        return []
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def describe_character(char: str) -> str:
    """Render ``char`` for display without emitting raw control bytes."""

    named = _NAMED_CHARACTERS.get(char)
    if named is not None:
        return named
    if char.isspace() or unicodedata.category(char).startswith("C"):
        return f"U+{ord(char):04X}"
    return f"'{char}'"
