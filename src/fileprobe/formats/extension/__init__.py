from .plugin import EXTENSION_LABELS, ExtensionPlugin

__all__ = ["EXTENSION_LABELS", "ExtensionPlugin"]
