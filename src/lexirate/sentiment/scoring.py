"""Per-token scoring and aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from lexirate.sentiment.models import Rating

if TYPE_CHECKING:
    from lexirate.sentiment.lexicon import Lexicon


def rate_word(word: str, lexicon: Lexicon) -> Rating:
    """Score a single token against ``lexicon``."""
    return lexicon.rate_word(word)


def rate_words(words: Iterable[str], lexicon: Lexicon) -> Rating:
    """Sum the scores of every token, starting from 0."""
    return sum((lexicon.rate_word(word) for word in words), 0)


def matched_words(words: Iterable[str], lexicon: Lexicon) -> tuple[list[str], list[str]]:
    """Split tokens into those that scored positive and those that scored negative.

    Uses the same precedence as ``rate_word``, so the counts always agree
    with ``rate_words``.
    """
    positive: list[str] = []
    negative: list[str] = []
    for word in words:
        score = lexicon.rate_word(word)
        if score > 0:
            positive.append(word)
        elif score < 0:
            negative.append(word)
    return positive, negative
