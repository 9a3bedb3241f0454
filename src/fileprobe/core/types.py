"""Shared data structures for the fileprobe detection core.

Example
-------
>>> match = DetectionMatch(
...     plugin_name="signatures",
...     format_name="PDF",
...     confidence=0.98,
...     reasons=["Leading bytes match %PDF signature"],
... )
>>> match.is_binary_container
True
>>> summarise_match(match)["format"]
'PDF'
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

EMPTY_FILE = "Empty File"
UNKNOWN = "Unknown"
UNREADABLE = "Unknown/Unreadable"

PDF = "PDF"
ZIP_FAMILY = "ZIP/DOCX/XLSX/PPTX"

# Labels whose bytes are never decoded for text analysis.
BINARY_CONTAINER_FORMATS = frozenset({PDF, ZIP_FAMILY})


def is_binary_container(format_name: str) -> bool:
    return format_name in BINARY_CONTAINER_FORMATS


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, Mapping):
        return {str(key): _json_safe(val) for key, val in value.items()}
    if isinstance(value, Iterable):
        return [_json_safe(item) for item in value]
    return str(value)


@dataclass
class DetectionMatch:
    plugin_name: str
    format_name: str
    confidence: float
    reasons: List[str]
    metadata: Optional[Dict[str, Any]] = None

    @property
    def is_binary_container(self) -> bool:
        return is_binary_container(self.format_name)


def summarise_match(match: DetectionMatch) -> Mapping[str, Any]:
    """Return a JSON-ready mapping describing ``match`` and its metadata."""

    metadata = match.metadata or {}
    return {
        "plugin": match.plugin_name,
        "format": match.format_name,
        "confidence": match.confidence,
        "binary_container": match.is_binary_container,
        "reasons": list(match.reasons),
        "metadata": {str(key): _json_safe(value) for key, value in metadata.items()},
    }
