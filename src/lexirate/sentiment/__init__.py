"""Lexicon-based sentiment rating.

This module contains:
- Word list loading (positive and negative lexicons)
- Text normalization and tokenization
- Per-word scoring and aggregation
- Emoji rendering of ratings
- The composed rating pipeline
"""

from lexirate.sentiment.lexicon import Lexicon, load_lexicon
from lexirate.sentiment.models import Rating, RatingResult
from lexirate.sentiment.presenter import DEFAULT_GLYPHS, Glyphs, describe_rating
from lexirate.sentiment.rater import SentimentRater, default_rater, rate
from lexirate.sentiment.resources import list_samples, load_sample, load_text
from lexirate.sentiment.scoring import rate_word, rate_words
from lexirate.sentiment.text import normalize, tokenize, words

__all__ = [
    # Lexicon
    "Lexicon",
    "load_lexicon",
    # Models
    "Rating",
    "RatingResult",
    # Presenter
    "DEFAULT_GLYPHS",
    "Glyphs",
    "describe_rating",
    # Rater
    "SentimentRater",
    "default_rater",
    "rate",
    # Resources
    "list_samples",
    "load_sample",
    "load_text",
    # Scoring
    "rate_word",
    "rate_words",
    # Text
    "normalize",
    "tokenize",
    "words",
]
