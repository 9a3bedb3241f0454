"""Plain-text report rendering.

Sections are assembled in a fixed order: header, optional detection details,
then either the text analysis sections, a skip notice for binary containers,
or the analysis error line.
"""

from __future__ import annotations

from typing import List

from ..analysis.characters import describe_character
from ..analyzer import AnalysisReport

SKIP_NOTICE = "Text analysis skipped: {label} is a binary container format."
ERROR_LINE = "Error analyzing file content: {message}"


def _header(report: AnalysisReport) -> List[str]:
    return [
        f"File Analysis: {report.path}",
        f"File Type: {report.format_name}",
        f"File Size: {report.size_bytes} bytes",
    ]


def _details(report: AnalysisReport) -> List[str]:
    detection = report.detection
    lines = [
        "Detection Details:",
        f"  Plugin: {detection.plugin_name}",
        f"  Confidence: {detection.confidence:.2f}",
    ]
    for reason in detection.reasons:
        lines.append(f"  Reason: {reason}")
    if detection.metadata:
        lines.append("  Metadata keys: " + ", ".join(sorted(detection.metadata)))
    return lines


def _character_section(report: AnalysisReport) -> List[str]:
    lines = ["Character Analysis:"]
    for char, count in report.top_entries():
        lines.append(f"  {describe_character(char)}: {count} occurrences")
    return lines


def _word_section(report: AnalysisReport) -> List[str]:
    lines = ["Word Matches:"]
    for word, count in report.word_entries():
        lines.append(f"  '{word}': {count} occurrences")
    return lines


def render_sections(report: AnalysisReport, *, details: bool = False) -> List[List[str]]:
    """Return the report as an ordered list of sections, each a list of lines."""

    sections = [_header(report)]
    if details:
        sections.append(_details(report))

    if report.analysis_skipped:
        sections.append([SKIP_NOTICE.format(label=report.format_name)])
        return sections
    if report.error is not None:
        sections.append([ERROR_LINE.format(message=report.error)])
        return sections

    sections.append(_character_section(report))
    if report.words:
        sections.append(_word_section(report))
    return sections


def render_text_report(report: AnalysisReport, *, details: bool = False) -> str:
    sections = render_sections(report, details=details)
    return "\n\n".join("\n".join(lines) for lines in sections) + "\n"
