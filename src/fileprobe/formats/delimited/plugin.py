"""Delimiter-frequency sniffing for CSV and TSV payloads.

The first few non-blank lines are inspected; a single line holding at least
two delimiters is enough to classify the file. Lines consisting only of
whitespace are treated as blank and skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..format_registry import register
from ...core.types import DetectionMatch

_DELIMITED_LINE_COUNT = 3
_MIN_DELIMITERS = 2

_DELIMITER_NAMES = {",": "comma", "\t": "tab"}


def read_non_blank_lines(path: Path, encoding: Optional[str], count: int) -> List[str]:
    lines: List[str] = []
    with path.open("r", encoding=encoding) as handle:
        for line in handle:
            if not line.strip():
                continue
            lines.append(line.rstrip("\r\n"))
            if len(lines) >= count:
                break
    return lines


@dataclass
class DelimitedPlugin:
    name: str
    delimiter: str
    format_name: str
    priority: int
    version: str = "0.1.0"

    def detect(self, path: Path, encoding: Optional[str]) -> Optional[DetectionMatch]:
        lines = read_non_blank_lines(path, encoding, _DELIMITED_LINE_COUNT)
        for index, line in enumerate(lines):
            found = line.count(self.delimiter)
            if found < _MIN_DELIMITERS:
                continue
            delimiter_name = _DELIMITER_NAMES.get(self.delimiter, repr(self.delimiter))
            return DetectionMatch(
                plugin_name=self.name,
                format_name=self.format_name,
                confidence=0.6,
                reasons=[
                    f"Line {index + 1} of {len(lines)} sampled holds "
                    f"{found} {delimiter_name} delimiters",
                ],
                metadata={
                    "delimiter": self.delimiter,
                    "delimiter_count": found,
                    "lines_sampled": len(lines),
                },
            )
        return None


register(DelimitedPlugin(name="csv", delimiter=",", format_name="CSV", priority=40))
register(DelimitedPlugin(name="tsv", delimiter="\t", format_name="TSV", priority=50))
