"""Format plugins package."""

from . import format_registry as registry
from .format_registry import FormatPlugin, get_plugins, plugin_versions, register

# Ensure built-in plugins register on import.
from . import signatures as _signatures_plugin  # noqa: F401
from . import markers as _markers_plugin  # noqa: F401
from . import json as _json_plugin  # noqa: F401
from . import delimited as _delimited_plugin  # noqa: F401
from . import extension as _extension_plugin  # noqa: F401

__all__ = [
    "FormatPlugin",
    "get_plugins",
    "plugin_versions",
    "register",
    "registry",
]
