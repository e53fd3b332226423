"""Unit tests for per-word scoring and aggregation."""

from lexirate.sentiment.lexicon import Lexicon
from lexirate.sentiment.scoring import matched_words, rate_word, rate_words


class TestRateWord:
    """Tests for rate_word."""

    def test_matches_lexicon(self, small_lexicon: Lexicon) -> None:
        assert rate_word("joy", small_lexicon) == 1
        assert rate_word("bad", small_lexicon) == -1
        assert rate_word("chair", small_lexicon) == 0


class TestRateWords:
    """Tests for rate_words."""

    def test_empty_is_zero(self, small_lexicon: Lexicon) -> None:
        assert rate_words([], small_lexicon) == 0

    def test_sums_scores(self, small_lexicon: Lexicon) -> None:
        assert rate_words(["happy", "happy", "joy", "joy"], small_lexicon) == 4

    def test_negative_total(self, small_lexicon: Lexicon) -> None:
        assert rate_words(["the", "horror", "the", "horror"], small_lexicon) == -2

    def test_balanced_is_zero(self, small_lexicon: Lexicon) -> None:
        assert rate_words(["best", "worst", "good", "bad"], small_lexicon) == 0

    def test_order_does_not_matter(self, small_lexicon: Lexicon) -> None:
        tokens = ["happy", "bad", "chair", "joy", "worst", "good"]
        assert rate_words(tokens, small_lexicon) == rate_words(reversed(tokens), small_lexicon)

    def test_accepts_generators(self, small_lexicon: Lexicon) -> None:
        assert rate_words((w for w in ["good", "good"]), small_lexicon) == 2


class TestMatchedWords:
    """Tests for matched_words."""

    def test_splits_by_polarity(self, small_lexicon: Lexicon) -> None:
        positive, negative = matched_words(["good", "chair", "bad", "joy"], small_lexicon)
        assert positive == ["good", "joy"]
        assert negative == ["bad"]

    def test_agrees_with_rate_words(self) -> None:
        lexicon = Lexicon(positive=frozenset({"sick", "fun"}), negative=frozenset({"sick"}))
        tokens = ["sick", "fun", "sick"]
        positive, negative = matched_words(tokens, lexicon)
        assert len(positive) - len(negative) == rate_words(tokens, lexicon)
        assert negative == []
