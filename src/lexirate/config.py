"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lexirate.sentiment.presenter import Glyphs


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEXIRATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Core
    env: Literal["development", "production"] = Field(default="development")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="WARNING")

    # Lexicons
    positive_lexicon: str = Field(
        default="positive-words",
        description="Resource name of the positive word list (without .txt)",
    )
    negative_lexicon: str = Field(
        default="negative-words",
        description="Resource name of the negative word list (without .txt)",
    )
    lexicon_dir: Path | None = Field(
        default=None,
        description="Directory to read word lists from instead of the bundled data",
    )

    # Tokenizer
    punctuation_mode: Literal["split", "strip"] = Field(
        default="split",
        description="Treat punctuation as a word separator (split) or delete it (strip)",
    )

    # Presenter
    happy_glyph: str = Field(default="😀")
    distress_glyph: str = Field(default="😱")
    neutral_glyph: str = Field(default="😶")

    @field_validator("positive_lexicon", "negative_lexicon")
    @classmethod
    def strip_txt_suffix(cls, v: str) -> str:
        v = v.strip()
        if v.endswith(".txt"):
            v = v[: -len(".txt")]
        if not v:
            raise ValueError("Lexicon name cannot be empty")
        return v

    @field_validator("happy_glyph", "distress_glyph", "neutral_glyph")
    @classmethod
    def validate_glyph(cls, v: str) -> str:
        if not v:
            raise ValueError("Glyph cannot be empty")
        return v

    @property
    def glyphs(self) -> Glyphs:
        return Glyphs(
            happy=self.happy_glyph,
            distress=self.distress_glyph,
            neutral=self.neutral_glyph,
        )

    @property
    def split_on_punctuation(self) -> bool:
        return self.punctuation_mode == "split"

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
