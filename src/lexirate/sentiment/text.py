"""Text normalization and tokenization."""

from __future__ import annotations

import unicodedata


def is_punctuation(char: str) -> bool:
    """True for characters in any Unicode punctuation category (Pc, Pd, Ps, ...)."""
    return unicodedata.category(char).startswith("P")


def to_lowercase(text: str) -> str:
    return text.lower()


def strip_punctuation(text: str) -> str:
    """Remove punctuation characters, leaving everything else untouched."""
    return "".join(char for char in text if not is_punctuation(char))


def normalize(text: str) -> str:
    """Lowercase ``text`` and remove its punctuation.

    Symbols that are not punctuation (emoji, currency signs, maths) pass
    through. Normalizing twice gives the same result as normalizing once.
    """
    return strip_punctuation(to_lowercase(text))


def tokenize(text: str, *, split_on_punctuation: bool = False) -> list[str]:
    """Split text into non-empty tokens.

    Args:
        text: Text to split, usually already normalized.
        split_on_punctuation: Also break words at punctuation, so "don't"
            yields "don" and "t" instead of staying whole.

    Returns:
        Tokens in their original order. Empty input gives an empty list.
    """
    if split_on_punctuation:
        text = "".join(" " if is_punctuation(char) else char for char in text)
    return text.split()


def words(text: str) -> list[str]:
    """Split on whitespace and punctuation alike."""
    return tokenize(text, split_on_punctuation=True)
