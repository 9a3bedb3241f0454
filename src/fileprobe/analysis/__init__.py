"""Text statistics computed over decoded file content."""

from .characters import (
    DEFAULT_TOP_CHARACTERS,
    describe_character,
    tabulate_characters,
    top_characters,
)
from .words import count_word, count_words

__all__ = [
    "DEFAULT_TOP_CHARACTERS",
    "count_word",
    "count_words",
    "describe_character",
    "tabulate_characters",
    "top_characters",
]
