"""JSON structural sniff.

Only the opening token is inspected: characters are read one at a time,
leading whitespace is skipped, and the payload qualifies when the first
remaining character opens an object or an array. No parsing is attempted, so
truncated or malformed JSON still classifies as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..format_registry import register
from ...core.types import DetectionMatch

_OPENING_TOKENS = {"{": "object", "[": "array"}


def first_significant_character(path: Path, encoding: Optional[str]) -> Optional[str]:
    with path.open("r", encoding=encoding) as handle:
        while True:
            char = handle.read(1)
            if not char:
                return None
            if not char.isspace():
                return char


@dataclass
class JsonSniffPlugin:
    """Classify payloads whose first non-whitespace character is ``{`` or ``[``."""

    name: str = "json"
    priority: int = 30
    version: str = "0.1.0"

    def detect(self, path: Path, encoding: Optional[str]) -> Optional[DetectionMatch]:
        char = first_significant_character(path, encoding)
        if char not in _OPENING_TOKENS:
            return None

        top_level_type = _OPENING_TOKENS[char]
        return DetectionMatch(
            plugin_name=self.name,
            format_name="JSON",
            confidence=0.7,
            reasons=[f"Detected JSON {top_level_type} opening token {char!r}"],
            metadata={"top_level_type": top_level_type},
        )


register(JsonSniffPlugin())
