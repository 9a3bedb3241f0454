"""JSON rendering of an :class:`~fileprobe.analyzer.AnalysisReport`."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..analysis.characters import describe_character
from ..analyzer import AnalysisReport
from ..core.types import summarise_match

__all__ = ["report_payload", "render_json_report"]


def _character_payload(report: AnalysisReport) -> Optional[List[Dict[str, Any]]]:
    if report.character_counts is None:
        return None
    return [
        {"character": char, "display": describe_character(char), "count": count}
        for char, count in report.top_entries()
    ]


def _word_payload(report: AnalysisReport) -> Optional[List[Dict[str, Any]]]:
    if report.word_counts is None or not report.words:
        return None
    return [{"word": word, "count": count} for word, count in report.word_entries()]


def report_payload(report: AnalysisReport) -> Dict[str, Any]:
    """Return a JSON-ready mapping describing ``report``."""

    return {
        "path": str(report.path),
        "format": report.format_name,
        "size_bytes": report.size_bytes,
        "binary_container": report.analysis_skipped,
        "detection": dict(summarise_match(report.detection)),
        "characters": _character_payload(report),
        "words": _word_payload(report),
        "error": report.error,
    }


def render_json_report(report: AnalysisReport, *, indent: Optional[int] = 2) -> str:
    return json.dumps(report_payload(report), indent=indent, sort_keys=True) + "\n"
