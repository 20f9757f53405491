"""Word normalization shared by corpus indexing and poem generation.

A character is kept as part of a word body when it is a Unicode letter or a
decimal digit. Everything else counts as punctuation.
"""

from __future__ import annotations


def is_word_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal()


def strip_punctuation(token: str) -> str:
    """Return *token* with every non letter/digit character removed.

    Case is preserved.
    """
    return "".join(ch for ch in token if is_word_char(ch))


def extract_punctuation(token: str) -> str:
    """Return the non letter/digit characters of *token*, in order."""
    return "".join(ch for ch in token if not is_word_char(ch))


def normalize_word(token: str) -> str:
    """Normalize a token into a graph vertex label.

    Examples:
        >>> normalize_word("Hello,")
        'hello'
        >>> normalize_word("--")
        ''
    """
    return strip_punctuation(token).lower()


def split_words(line: str) -> list[str]:
    """Split on runs of whitespace, dropping empty tokens."""
    return line.split()
