"""fileprobe core module exports."""

from .detector import Detector, DetectorIOError, detect_file
from .types import (
    BINARY_CONTAINER_FORMATS,
    EMPTY_FILE,
    UNKNOWN,
    UNREADABLE,
    DetectionMatch,
    is_binary_container,
    summarise_match,
)

__all__ = [
    "BINARY_CONTAINER_FORMATS",
    "Detector",
    "DetectorIOError",
    "DetectionMatch",
    "EMPTY_FILE",
    "UNKNOWN",
    "UNREADABLE",
    "detect_file",
    "is_binary_container",
    "summarise_match",
]
