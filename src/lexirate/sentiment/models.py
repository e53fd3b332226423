"""Data models for sentiment ratings."""

from dataclasses import dataclass
from typing import Any

Rating = int


@dataclass(frozen=True, slots=True)
class RatingResult:
    """Detailed outcome of rating one text.

    Attributes:
        rating: Sum of per-token scores.
        description: Glyph string rendered from the rating.
        tokens: Tokens the text was split into, in order.
        positive_words: Tokens that matched the positive lexicon, in order.
        negative_words: Tokens that matched the negative lexicon, in order.
    """

    rating: Rating
    description: str
    tokens: tuple[str, ...]
    positive_words: tuple[str, ...]
    negative_words: tuple[str, ...]

    def __post_init__(self) -> None:
        """Check the rating agrees with the matched words."""
        expected = len(self.positive_words) - len(self.negative_words)
        if self.rating != expected:
            raise ValueError(
                f"rating {self.rating} does not match matched words (expected {expected})"
            )

    @property
    def is_positive(self) -> bool:
        return self.rating > 0

    @property
    def is_negative(self) -> bool:
        return self.rating < 0

    @property
    def is_neutral(self) -> bool:
        return self.rating == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "rating": self.rating,
            "description": self.description,
            "tokens": list(self.tokens),
            "positive_words": list(self.positive_words),
            "negative_words": list(self.negative_words),
        }
