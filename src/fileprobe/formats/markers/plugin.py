"""Detect text formats from literal tokens near the top of the file.

The first few decoded lines are concatenated and each token in
:data:`TEXT_SIGNATURES` is tested for plain substring containment, in table
order. Tokens are neither anchored to the start of the file nor treated as
patterns, so a shebang or markup declaration preceded by a comment line still
matches.

XML matches carry an extra ``xml_well_formed`` flag. The document is parsed
with :mod:`defusedxml` and only when it stays under a size guardrail and
declares no DOCTYPE or ENTITY; the flag never changes the label.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from defusedxml import ElementTree as DEFUSED_ET
from defusedxml.common import DefusedXmlException

from ..format_registry import register
from ...core.types import DetectionMatch

_MARKER_LINE_COUNT = 5
_MAX_XML_PARSE_BYTES = 1024 * 1024
_XML_LABEL = "XML"
_UNSAFE_DECLARATION = re.compile(rb"<!(?:DOCTYPE|ENTITY)\b", re.IGNORECASE)

TEXT_SIGNATURES: Sequence[Tuple[str, str]] = (
    ("<!DOCTYPE html", "HTML"),
    ("<!doctype html", "HTML"),
    ("<?xml", _XML_LABEL),
    ("\\documentclass", "LaTeX"),
    ("---", "YAML"),
    ("BEGIN:VCALENDAR", "iCalendar"),
    ("<?php", "PHP"),
    ("#!/", "Script"),
)


def read_leading_lines(path: Path, encoding: Optional[str], count: int) -> List[str]:
    with path.open("r", encoding=encoding) as handle:
        return list(islice(handle, count))


def check_xml_well_formed(path: Path) -> Optional[bool]:
    """Return whether ``path`` parses as XML, or ``None`` when parsing was skipped."""

    with path.open("rb") as handle:
        payload = handle.read(_MAX_XML_PARSE_BYTES + 1)
    if len(payload) > _MAX_XML_PARSE_BYTES:
        return None
    if _UNSAFE_DECLARATION.search(payload):
        return None
    try:
        DEFUSED_ET.fromstring(payload)
    except (DEFUSED_ET.ParseError, DefusedXmlException):
        return False
    except (LookupError, ValueError):
        # Declared encoding unknown to the parser.
        return False
    return True


@dataclass
class MarkerPlugin:
    name: str = "markers"
    priority: int = 20
    version: str = "0.1.0"

    def detect(self, path: Path, encoding: Optional[str]) -> Optional[DetectionMatch]:
        head = "".join(read_leading_lines(path, encoding, _MARKER_LINE_COUNT))
        if not head:
            return None

        for token, label in TEXT_SIGNATURES:
            if token in head:
                return self._build_match(path, token, label)
        return None

    def _build_match(self, path: Path, token: str, label: str) -> DetectionMatch:
        reasons = [
            f"Found {token!r} within the first {_MARKER_LINE_COUNT} lines",
        ]
        metadata: Dict[str, object] = {"marker": token}

        if label == _XML_LABEL:
            well_formed = check_xml_well_formed(path)
            if well_formed is not None:
                metadata["xml_well_formed"] = well_formed
                if well_formed:
                    reasons.append("Document parsed as well-formed XML")
                else:
                    reasons.append("Document is not well-formed XML")

        return DetectionMatch(
            plugin_name=self.name,
            format_name=label,
            confidence=0.85,
            reasons=reasons,
            metadata=metadata,
        )


register(MarkerPlugin())
