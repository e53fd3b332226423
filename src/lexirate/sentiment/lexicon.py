"""Positive and negative word lists."""

from __future__ import annotations

from dataclasses import dataclass
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import TYPE_CHECKING

from lexirate.core.compose import map_optional
from lexirate.core.exceptions import LexiconNotFoundError
from lexirate.core.logging import get_logger
from lexirate.sentiment.models import Rating
from lexirate.sentiment.resources import load_text

if TYPE_CHECKING:
    from lexirate.config import Settings

logger = get_logger(__name__)

POSITIVE_WORDS = "positive-words"
NEGATIVE_WORDS = "negative-words"

# Opinion lexicon files open with a ';'-prefixed license/citation header
COMMENT_PREFIX = ";"


def parse_word_list(text: str) -> frozenset[str]:
    """Turn one-word-per-line text into a set of lowercase words.

    Blank lines and comment lines are skipped.
    """
    words: set[str] = set()
    for line in text.splitlines():
        word = line.strip()
        if not word or word.startswith(COMMENT_PREFIX):
            continue
        words.add(word.lower())
    return frozenset(words)


def load_lexicon(
    name: str, *, directory: Path | Traversable | None = None
) -> frozenset[str] | None:
    """Load a word list resource as a lexicon.

    Args:
        name: Resource name without the ``.txt`` suffix.
        directory: Directory to read from. Defaults to the bundled data.

    Returns:
        The set of words, or None if the resource is missing or undecodable.
    """
    words = map_optional(load_text(name, directory=directory), parse_word_list)
    if words is not None:
        logger.debug("Lexicon loaded", lexicon=name, words=len(words))
    return words


@dataclass(frozen=True, slots=True)
class Lexicon:
    """A pair of polarity word sets, fixed once loaded.

    Attributes:
        positive: Words scoring +1.
        negative: Words scoring -1.
    """

    positive: frozenset[str]
    negative: frozenset[str]

    def rate_word(self, word: str) -> Rating:
        """Score one token: +1 positive, -1 negative, 0 otherwise.

        Positive membership is checked first, so a word listed in both
        sets scores +1.
        """
        if word in self.positive:
            return 1
        if word in self.negative:
            return -1
        return 0

    @property
    def overlap(self) -> frozenset[str]:
        """Words present in both sets."""
        return self.positive & self.negative

    @property
    def size(self) -> int:
        """Total number of entries across both sets."""
        return len(self.positive) + len(self.negative)

    @classmethod
    def load(
        cls,
        positive: str = POSITIVE_WORDS,
        negative: str = NEGATIVE_WORDS,
        *,
        directory: Path | Traversable | None = None,
    ) -> Lexicon:
        """Load both word lists.

        Raises:
            LexiconNotFoundError: If either list cannot be loaded.
        """
        positive_words = load_lexicon(positive, directory=directory)
        if positive_words is None:
            raise LexiconNotFoundError(positive)

        negative_words = load_lexicon(negative, directory=directory)
        if negative_words is None:
            raise LexiconNotFoundError(negative)

        lexicon = cls(positive=positive_words, negative=negative_words)
        if lexicon.overlap:
            logger.warning(
                "Lexicons overlap, shared words score as positive",
                count=len(lexicon.overlap),
                words=sorted(lexicon.overlap)[:10],
            )
        return lexicon

    @classmethod
    def from_settings(cls, settings: Settings) -> Lexicon:
        """Load the word lists named in settings."""
        return cls.load(
            settings.positive_lexicon,
            settings.negative_lexicon,
            directory=settings.lexicon_dir,
        )
