from .plugin import JsonSniffPlugin

__all__ = ["JsonSniffPlugin"]
