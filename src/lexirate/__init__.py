"""Lexicon-based sentiment rating built from composable functions."""

from lexirate.sentiment import Lexicon, SentimentRater, load_lexicon, rate

__all__ = ["Lexicon", "SentimentRater", "load_lexicon", "rate"]
