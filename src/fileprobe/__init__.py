"""fileprobe package.

Guesses a single file's format through an ordered chain of detection plugins
and reports character frequencies and whole-word counts for text formats.
"""

from __future__ import annotations

from .analyzer import AnalysisReport, FileAnalyzer, analyze_file
from .core import (
    BINARY_CONTAINER_FORMATS,
    DetectionMatch,
    Detector,
    detect_file,
    is_binary_container,
)
from .formats import FormatPlugin, get_plugins, register
from .reporting import render_json_report, render_text_report

__all__ = [
    "AnalysisReport",
    "BINARY_CONTAINER_FORMATS",
    "DetectionMatch",
    "Detector",
    "FileAnalyzer",
    "FormatPlugin",
    "analyze_file",
    "detect_file",
    "get_plugins",
    "is_binary_container",
    "register",
    "render_json_report",
    "render_text_report",
]
