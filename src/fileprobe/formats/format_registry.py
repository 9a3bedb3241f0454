"""Format plugin registry utilities.

The registry maintains insertion-ordered plugin records and offers immutable
snapshots so callers can reason about plugin ordering without mutating the
backing store.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple

from ..core.types import DetectionMatch


class FormatPlugin(Protocol):
    """Protocol implemented by format plugins.

    ``detect`` opens ``path`` itself and must release the handle before it
    returns, whether it matched, declined, or raised.
    """

    name: str
    priority: int
    version: str

    def detect(self, path: Path, encoding: Optional[str]) -> Optional[DetectionMatch]:
        ...


@dataclass
class PluginRecord:
    plugin: FormatPlugin


_PLUGINS: List[PluginRecord] = []


def register(plugin: FormatPlugin) -> None:
    """Register a format plugin while keeping names unique.

    Repeated calls with the same plugin instance are treated as idempotent and
    ignored. A different plugin declaring an existing ``plugin.name`` raises a
    :class:`ValueError` so collisions surface during import.
    """

    if not _ensure_unique(plugin):
        return
    _PLUGINS.append(PluginRecord(plugin=plugin))


def get_plugins() -> Tuple[FormatPlugin, ...]:
    """Return a tuple snapshot of registered format plugins.

    Built-in plugins register when :mod:`fileprobe.formats` is imported, which
    always happens before this module is reachable.
    """

    return tuple(record.plugin for record in _PLUGINS)


def plugin_versions() -> Dict[str, str]:
    """Return a mapping of plugin names to declared versions."""

    return {plugin.name: getattr(plugin, "version", "0.0.0") for plugin in get_plugins()}


def _ensure_unique(plugin: FormatPlugin) -> bool:
    """Validate that ``plugin`` does not duplicate existing registry entries."""

    for record in _PLUGINS:
        existing = record.plugin
        if existing is plugin:
            return False
        if existing.name == plugin.name:
            raise ValueError(
                f"A plugin named {plugin.name!r} is already registered: {existing!r}"
            )
    return True
