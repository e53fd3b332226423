"""Sentiment rating pipeline built by composing small functions.

The rating function is assembled once per rater:

    lowercase -> split into words -> sum word scores -> draw glyphs

Every stage is a plain function of one argument, so each can be tested
and reused on its own.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache, partial
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from lexirate.core.compose import compose, map_optional
from lexirate.core.logging import get_logger, setup_logging
from lexirate.sentiment.lexicon import Lexicon
from lexirate.sentiment.models import Rating, RatingResult
from lexirate.sentiment.presenter import DEFAULT_GLYPHS, Glyphs, describe_rating
from lexirate.sentiment.resources import load_sample, load_text
from lexirate.sentiment.scoring import matched_words, rate_words
from lexirate.sentiment.text import normalize, to_lowercase, tokenize, words

if TYPE_CHECKING:
    from lexirate.config import Settings

logger = get_logger(__name__)


class SentimentRater:
    """Rates text against a fixed pair of lexicons.

    Two tokenizer variants are supported. With ``split_on_punctuation`` the
    text is lowercased and punctuation separates words, so "don't" becomes
    "don" and "t". Without it punctuation is deleted first, giving "dont".
    Both leave no punctuation in any token.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        *,
        glyphs: Glyphs = DEFAULT_GLYPHS,
        split_on_punctuation: bool = True,
    ) -> None:
        """Initialize rater.

        Args:
            lexicon: Positive and negative word sets.
            glyphs: Symbols used to render ratings.
            split_on_punctuation: Tokenizer variant, see class docstring.
        """
        self._lexicon = lexicon
        self._glyphs = glyphs

        self._tokens: Callable[[str], list[str]]
        if split_on_punctuation:
            self._tokens = compose(to_lowercase, words)
        else:
            self._tokens = compose(normalize, partial(tokenize, split_on_punctuation=False))

        self._score: Callable[[str], Rating] = compose(
            self._tokens,
            partial(rate_words, lexicon=lexicon),
        )
        self._rate: Callable[[str], str] = compose(
            self._score,
            partial(describe_rating, glyphs=glyphs),
        )

    def tokens(self, text: str) -> list[str]:
        """Tokens ``text`` is scored on."""
        return self._tokens(text)

    def score(self, text: str) -> Rating:
        """Integer rating of ``text``."""
        return self._score(text)

    def rate(self, text: str) -> str:
        """Rate ``text`` and render the result as glyphs."""
        return self._rate(text)

    def analyze(self, text: str) -> RatingResult:
        """Rate ``text`` and report which words contributed."""
        tokens = self._tokens(text)
        positive, negative = matched_words(tokens, self._lexicon)
        rating = len(positive) - len(negative)
        return RatingResult(
            rating=rating,
            description=describe_rating(rating, self._glyphs),
            tokens=tuple(tokens),
            positive_words=tuple(positive),
            negative_words=tuple(negative),
        )

    def rate_resource(
        self, name: str, *, directory: Path | Traversable | None = None
    ) -> str | None:
        """Rate a named text resource, or return None if it cannot be read."""
        return map_optional(load_text(name, directory=directory), self.rate)

    def rate_sample(self, name: str) -> str | None:
        """Rate one text from the bundled sample corpus."""
        return map_optional(load_sample(name), self.rate)

    @property
    def lexicon(self) -> Lexicon:
        """Get the lexicon used by this rater."""
        return self._lexicon

    @property
    def glyphs(self) -> Glyphs:
        return self._glyphs

    @classmethod
    def from_settings(cls, settings: Settings) -> SentimentRater:
        """Build a rater from configured lexicons, glyphs and tokenizer mode."""
        lexicon = Lexicon.from_settings(settings)
        logger.debug(
            "Rater ready",
            positive=len(lexicon.positive),
            negative=len(lexicon.negative),
            punctuation_mode=settings.punctuation_mode,
        )
        return cls(
            lexicon,
            glyphs=settings.glyphs,
            split_on_punctuation=settings.split_on_punctuation,
        )


@lru_cache
def default_rater() -> SentimentRater:
    """Shared rater built from the current settings, loaded on first use.

    Logging is configured from settings unless the caller already configured
    structlog, so library use gets the same stderr sink and level as the CLI.
    """
    from lexirate.config import get_settings

    settings = get_settings()
    if not structlog.is_configured():
        setup_logging(settings)
    return SentimentRater.from_settings(settings)


def rate(text: str) -> str:
    """Rate text with the default rater.

    Args:
        text: Text to rate.

    Returns:
        Glyph string, e.g. "😀😀" for a rating of 2.
    """
    return default_rater().rate(text)
