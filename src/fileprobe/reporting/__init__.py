"""Report renderers for :class:`~fileprobe.analyzer.AnalysisReport`.

The text renderer is the default CLI output; the JSON renderer carries the
same content for scripts that post-process results.
"""

from .json import render_json_report, report_payload
from .text import render_sections, render_text_report

__all__ = [
    "render_json_report",
    "render_sections",
    "render_text_report",
    "report_payload",
]
