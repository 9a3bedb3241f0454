"""Single-file analysis: format detection followed by text statistics.

Example
-------
>>> from pathlib import Path
>>> import tempfile
>>> with tempfile.TemporaryDirectory() as tmp:
...     target = Path(tmp) / "notes.txt"
...     _ = target.write_text("aab", encoding="utf-8")
...     report = FileAnalyzer(encoding="utf-8").analyze_file(target, ["aab"])
>>> report.format_name, report.word_counts
('Plain Text', {'aab': 1})
>>> report.top_entries()
[('a', 2), ('b', 1)]
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .analysis.characters import DEFAULT_TOP_CHARACTERS, tabulate_characters, top_characters
from .analysis.words import count_words
from .core.detector import Detector
from .core.types import DetectionMatch

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Everything gathered about one file during one invocation."""

    path: Path
    size_bytes: int
    detection: DetectionMatch
    words: Tuple[str, ...] = ()
    character_counts: Optional[Counter] = None
    word_counts: Optional[Dict[str, int]] = None
    error: Optional[str] = None
    top_characters: int = DEFAULT_TOP_CHARACTERS

    @property
    def format_name(self) -> str:
        return self.detection.format_name

    @property
    def analysis_skipped(self) -> bool:
        return self.detection.is_binary_container

    def top_entries(self) -> List[Tuple[str, int]]:
        if self.character_counts is None:
            return []
        return top_characters(self.character_counts, self.top_characters)

    def word_entries(self) -> List[Tuple[str, int]]:
        """Requested words in input order, duplicates and zero counts included."""

        if not self.words or self.word_counts is None:
            return []
        return [(word, self.word_counts.get(word, 0)) for word in self.words]


def read_content(path: Path, encoding: Optional[str]) -> str:
    # newline="" keeps carriage returns so they are counted as read.
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


class FileAnalyzer:
    """Detects a file's format and, for text formats, tabulates its content."""

    def __init__(
        self,
        detector: Optional[Detector] = None,
        *,
        encoding: Optional[str] = None,
        top_characters: int = DEFAULT_TOP_CHARACTERS,
    ) -> None:
        if top_characters <= 0:
            raise ValueError("top_characters must be a positive integer")
        self._encoding = encoding
        self._detector = detector if detector is not None else Detector(encoding=encoding)
        self._top_characters = top_characters

    def analyze_file(self, path: Path, words: Sequence[str] = ()) -> AnalysisReport:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Expected file path, got: {path}")

        detection = self._detector.detect(path)
        report = AnalysisReport(
            path=path,
            size_bytes=path.stat().st_size,
            detection=detection,
            words=tuple(words),
            top_characters=self._top_characters,
        )

        if detection.is_binary_container:
            logger.info(
                "Skipping text analysis of %s: %s is a binary container",
                path,
                detection.format_name,
            )
            return report

        try:
            content = read_content(path, self._encoding)
        except (OSError, UnicodeError, LookupError) as exc:
            logger.warning("Unable to analyze content of %s: %s", path, exc)
            report.error = str(exc) or type(exc).__name__
            return report

        report.character_counts = tabulate_characters(content)
        report.word_counts = count_words(content, report.words)
        return report


def analyze_file(
    path: Path,
    words: Sequence[str] = (),
    *,
    encoding: Optional[str] = None,
    top_characters: int = DEFAULT_TOP_CHARACTERS,
) -> AnalysisReport:
    """Convenience wrapper mirroring :meth:`FileAnalyzer.analyze_file`."""

    analyzer = FileAnalyzer(encoding=encoding, top_characters=top_characters)
    return analyzer.analyze_file(Path(path), words)
