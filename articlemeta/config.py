"""
Configuration management for article metadata extraction.

This module uses pydantic-settings to manage:
- Logging behaviour
- Thresholds used by the title cleanup heuristics

Configuration is loaded from environment variables (prefixed with
ARTICLEMETA_) or a .env file.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels supported by the library."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class TitleHeuristics(BaseModel):
    """
    Thresholds for the title cleanup heuristics.

    The defaults reproduce the reference readability behaviour; changing
    them changes which titles get truncated or rolled back.
    """
    model_config = ConfigDict(frozen=True)

    min_segment_words: int = Field(default=3, ge=1)
    """A separator cut leaving fewer words than this is retried from the front."""

    max_prefix_words: int = Field(default=5, ge=0)
    """More words than this before a colon means the colon is part of the title."""

    short_title_chars: int = Field(default=15, ge=0)
    """Titles shorter than this are replaced by a lone <h1>."""

    long_title_chars: int = Field(default=150, ge=1)
    """Titles longer than this are replaced by a lone <h1>."""

    max_rollback_words: int = Field(default=4, ge=0)
    """Cleaned titles with this many words or fewer fall back to the original."""

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "TitleHeuristics":
        if self.short_title_chars >= self.long_title_chars:
            raise ValueError("short_title_chars must be less than long_title_chars")
        return self


class Settings(BaseSettings):
    """Main settings class for article metadata extraction."""
    log_level: LogLevel = LogLevel.WARNING
    structured_logging: bool = False

    title: TitleHeuristics = Field(default_factory=TitleHeuristics)

    model_config = SettingsConfigDict(
        env_prefix="ARTICLEMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )


def load_settings() -> Settings:
    """Load settings from environment variables and .env file."""
    return Settings()
