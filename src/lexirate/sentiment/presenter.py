"""Render ratings as emoji."""

from dataclasses import dataclass

from lexirate.sentiment.models import Rating


@dataclass(frozen=True, slots=True)
class Glyphs:
    """The three symbols a rating is drawn with."""

    happy: str = "😀"
    distress: str = "😱"
    neutral: str = "😶"

    def __post_init__(self) -> None:
        for attr in ("happy", "distress", "neutral"):
            if not getattr(self, attr):
                raise ValueError(f"{attr} glyph cannot be empty")


DEFAULT_GLYPHS = Glyphs()


def describe_rating(rating: Rating, glyphs: Glyphs = DEFAULT_GLYPHS) -> str:
    """Show one glyph per point of rating.

    -2 -> "😱😱", 3 -> "😀😀😀", 0 -> "😶"
    """
    if rating < 0:
        return glyphs.distress * abs(rating)
    if rating > 0:
        return glyphs.happy * rating
    return glyphs.neutral
