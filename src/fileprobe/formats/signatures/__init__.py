from .plugin import BINARY_SIGNATURES, SignaturePlugin, match_signature

__all__ = ["BINARY_SIGNATURES", "SignaturePlugin", "match_signature"]
