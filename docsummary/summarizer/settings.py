"""Summarizer configuration. Env prefix: SUMMARY_."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docsummary.summarizer.types import LengthTier


class SummarizerSettings(BaseSettings):
    """Input limits and defaults for the summarization core."""

    model_config = SettingsConfigDict(
        env_prefix="SUMMARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    min_text_chars: int = Field(default=100, ge=1, description="Shortest text accepted for summarization")
    max_input_chars: int = Field(default=8000, ge=1, description="Text sent to the generative model is cut here")
    default_tier: LengthTier = Field(default=LengthTier.MEDIUM, description="Tier used when none is requested")
