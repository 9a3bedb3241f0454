"""Allow ``python -m fileprobe``."""

from .cli import console_main

if __name__ == "__main__":  # pragma: no cover - CLI entry
    console_main()
