from .plugin import DelimitedPlugin

__all__ = ["DelimitedPlugin"]
