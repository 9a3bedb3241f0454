"""Extension-based fallback.

Runs last and always answers, mapping unrecognised suffixes to ``Unknown``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..format_registry import register
from ...core.types import UNKNOWN, DetectionMatch

EXTENSION_LABELS: Mapping[str, str] = {
    ".txt": "Plain Text",
    ".md": "Markdown",
    ".json": "JSON",
    ".xml": "XML",
    ".csv": "CSV",
    ".html": "HTML",
    ".htm": "HTML",
    ".css": "CSS",
    ".js": "JavaScript",
    ".py": "Python",
    ".java": "Java",
    ".cs": "C#",
    ".c": "C",
    ".cpp": "C++",
    ".h": "Header",
    ".sh": "Shell Script",
    ".bat": "Batch File",
    ".ps1": "PowerShell",
    ".sql": "SQL",
    ".yaml": "YAML",
    ".yml": "YAML",
    ".ini": "INI",
    ".config": "Configuration",
    ".log": "Log File",
    ".rtf": "Rich Text Format",
}


@dataclass
class ExtensionPlugin:
    name: str = "extension"
    priority: int = 1000
    version: str = "0.1.0"

    def detect(self, path: Path, encoding: Optional[str]) -> Optional[DetectionMatch]:
        extension = path.suffix.lower()
        label = EXTENSION_LABELS.get(extension)
        if label is None:
            return DetectionMatch(
                plugin_name=self.name,
                format_name=UNKNOWN,
                confidence=0.0,
                reasons=[f"No heuristic matched and extension {extension or '(none)'} is not recognised"],
                metadata={"extension": extension},
            )
        return DetectionMatch(
            plugin_name=self.name,
            format_name=label,
            confidence=0.3,
            reasons=[f"File extension {extension} suggests {label}"],
            metadata={"extension": extension},
        )


register(ExtensionPlugin())
