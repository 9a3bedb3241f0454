"""Core detection orchestration for fileprobe.

Examples
--------
>>> from pathlib import Path
>>> from fileprobe.core.types import DetectionMatch
>>> class StaticPlugin:
...     name = "static-fixture"
...     priority = 0
...     version = "0.0.0"
...     def detect(self, path, encoding):
...         with path.open("rb") as handle:
...             _ = handle.read(1)
...         return DetectionMatch(
...             plugin_name=self.name,
...             format_name="Fixture",
...             confidence=1.0,
...             reasons=["Static match for doctest"],
...         )
>>> detect_file(Path(__file__), plugins=(StaticPlugin(),)).format_name
'Fixture'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ..formats import format_registry as registry
from .types import UNKNOWN, UNREADABLE, DetectionMatch

logger = logging.getLogger(__name__)


class DetectorIOError(Exception):
    """Represents an I/O failure that occurred while detecting a format."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {self.reason}")

    def __repr__(self) -> str:  # pragma: no cover - trivial wrapper
        path_repr = str(self.path)
        return f"DetectorIOError(path={path_repr!r}, reason={self.reason!r})"


def _wrap_error(path: Path, exc: Exception) -> DetectorIOError:
    """Convert a plugin failure into ``DetectorIOError``."""

    if isinstance(exc, DetectorIOError):
        return exc
    return DetectorIOError(path=Path(path), reason=str(exc) or type(exc).__name__)


def _unreadable_match(plugin_name: str, error: DetectorIOError, cause: Exception) -> DetectionMatch:
    return DetectionMatch(
        plugin_name=plugin_name,
        format_name=UNREADABLE,
        confidence=0.0,
        reasons=[f"Detection failed: {error.reason}"],
        metadata={"error_type": type(cause).__name__},
    )


class Detector:
    """Runs format plugins in priority order and returns the first match.

    Example
    -------
    >>> from pathlib import Path
    >>> class DummyPlugin:
    ...     name = "dummy"
    ...     priority = 10
    ...     version = "0.0.0"
    ...     def detect(self, path, encoding):
    ...         return None
    >>> Detector(plugins=(DummyPlugin(),)).detect(Path(__file__)).format_name
    'Unknown'
    """

    def __init__(
        self,
        plugins: Optional[Sequence[registry.FormatPlugin]] = None,
        *,
        encoding: Optional[str] = None,
        sort_plugins: bool = True,
    ) -> None:
        """Create a detector.

        Args:
            plugins: Optional explicit plugin sequence. When omitted the
                registry provided defaults are used.
            encoding: Text encoding handed to plugins that decode content.
                ``None`` uses the platform's preferred encoding.
            sort_plugins: Controls whether plugins are re-sorted by priority.
                Disable this when you inject a custom ordered sequence and want
                its order to win over priority values.
        """
        selected_plugins = list(plugins) if plugins is not None else list(
            registry.get_plugins()
        )
        if sort_plugins:
            selected_plugins = sorted(
                selected_plugins,
                key=lambda plugin: plugin.priority,
            )
        self._plugins: List[registry.FormatPlugin] = selected_plugins
        self._encoding = encoding

    @property
    def plugins(self) -> tuple:
        return tuple(self._plugins)

    def detect(self, path: Path) -> DetectionMatch:
        """Return exactly one match for ``path``; failures become ``Unknown/Unreadable``."""

        path = Path(path)
        for plugin in self._plugins:
            try:
                match = plugin.detect(path, self._encoding)
            except Exception as exc:  # noqa: BLE001 - detection must not raise
                error = _wrap_error(path, exc)
                logger.warning(
                    "Plugin %s failed on %s; reporting as unreadable: %s",
                    plugin.name,
                    path,
                    error.reason,
                )
                return _unreadable_match(plugin.name, error, exc)
            if match is not None:
                logger.debug(
                    "Plugin %s classified %s as %s",
                    plugin.name,
                    path,
                    match.format_name,
                )
                return match

        logger.debug("No plugin classified %s", path)
        return DetectionMatch(
            plugin_name="none",
            format_name=UNKNOWN,
            confidence=0.0,
            reasons=["No detection plugin produced a match"],
        )


def detect_file(
    path: Path,
    *,
    encoding: Optional[str] = None,
    plugins: Optional[Sequence[registry.FormatPlugin]] = None,
    sort_plugins: bool = True,
) -> DetectionMatch:
    """Convenience wrapper that uses a default detector instance."""

    detector = Detector(plugins=plugins, encoding=encoding, sort_plugins=sort_plugins)
    return detector.detect(Path(path))
