from .plugin import TEXT_SIGNATURES, MarkerPlugin

__all__ = ["TEXT_SIGNATURES", "MarkerPlugin"]
