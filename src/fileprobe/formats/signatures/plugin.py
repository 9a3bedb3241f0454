"""Detect formats from leading magic-number byte sequences.

This plugin always runs first: a byte signature at offset zero is the most
reliable signal available, so it outranks any text heuristic. Patterns are
compared by value against the file's leading bytes, one full pattern at a
time, which keeps entries that share a prefix (``PK\\x03\\x04`` versus
``PK\\x05\\x06``) distinct.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from ..format_registry import register
from ...core.types import EMPTY_FILE, PDF, ZIP_FAMILY, DetectionMatch

_SIGNATURE_READ_SIZE = 16

# Longer patterns precede shorter ones that share their prefix.
BINARY_SIGNATURES: Sequence[Tuple[bytes, str]] = (
    (b"%PDF", PDF),
    (b"PK\x03\x04", ZIP_FAMILY),
    (b"PK\x05\x06", ZIP_FAMILY),
    (b"PK\x07\x08", ZIP_FAMILY),
    (b"SQLite format 3\x00", "SQLite Database"),
    (b"\x89PNG\r\n\x1a\n", "PNG Image"),
    (b"GIF87a", "GIF Image"),
    (b"GIF89a", "GIF Image"),
    (b"\xff\xd8\xff", "JPEG Image"),
    (b"\x1f\x8b", "GZIP Archive"),
    (b"7z\xbc\xaf\x27\x1c", "7-Zip Archive"),
    (b"Rar!\x1a\x07\x01\x00", "RAR Archive"),
    (b"Rar!\x1a\x07\x00", "RAR Archive"),
    (b"\x7fELF", "ELF Executable"),
    (b"bplist00", "Binary Property List"),
    (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1", "OLE Compound Document"),
    (b"{\\rtf", "Rich Text Format"),
)


def match_signature(
    header: bytes,
    signatures: Sequence[Tuple[bytes, str]] = BINARY_SIGNATURES,
) -> Optional[Tuple[bytes, str]]:
    """Return the first ``(pattern, label)`` entry whose pattern prefixes ``header``."""

    for pattern, label in signatures:
        if len(header) >= len(pattern) and header[: len(pattern)] == pattern:
            return pattern, label
    return None


@dataclass
class SignaturePlugin:
    name: str = "signatures"
    priority: int = 10
    version: str = "0.1.0"

    def detect(self, path: Path, encoding: Optional[str]) -> Optional[DetectionMatch]:
        with path.open("rb") as handle:
            header = handle.read(_SIGNATURE_READ_SIZE)

        if not header:
            return DetectionMatch(
                plugin_name=self.name,
                format_name=EMPTY_FILE,
                confidence=1.0,
                reasons=["File contains zero bytes"],
                metadata={"bytes_sampled": 0},
            )

        found = match_signature(header)
        if found is None:
            return None

        pattern, label = found
        return DetectionMatch(
            plugin_name=self.name,
            format_name=label,
            confidence=0.98,
            reasons=[f"Leading bytes match {label} signature {pattern!r}"],
            metadata={
                "signature": pattern.hex(),
                "signature_length": len(pattern),
                "bytes_sampled": len(header),
            },
        )


register(SignaturePlugin())
