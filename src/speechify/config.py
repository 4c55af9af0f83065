"""Application configuration using environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schemas.voices import EN_US_PROFILE, ES_US_PROFILE, VoiceProfile
from .segmenter import (
    DEFAULT_BREAK_MARKERS,
    DEFAULT_HARD_LIMIT,
    DEFAULT_SEARCH_FROM,
    SegmentationLimits,
)

# Resolve the project root once so that `.env` is discovered regardless of CWD
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Load configuration from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Synthesis backends reject requests of 5000 characters or more
    character_limit: int = Field(
        default=DEFAULT_HARD_LIMIT,
        ge=1,
        validation_alias=AliasChoices("CHARACTER_LIMIT", "character_limit"),
    )
    find_break_after: int = Field(
        default=DEFAULT_SEARCH_FROM,
        ge=0,
        validation_alias=AliasChoices("FIND_BREAK_AFTER", "find_break_after"),
    )
    break_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BREAK_MARKERS),
        min_length=1,
        validation_alias=AliasChoices("BREAK_MARKERS", "break_markers"),
    )

    input_suffix: str = Field(
        default=".speechify_me",
        min_length=1,
        validation_alias=AliasChoices("INPUT_SUFFIX", "input_suffix"),
    )
    output_suffix: str = Field(
        default=".wav",
        min_length=1,
        validation_alias=AliasChoices("OUTPUT_SUFFIX", "output_suffix"),
    )
    output_content_type: str = Field(
        default="audio/wav",
        validation_alias=AliasChoices("OUTPUT_CONTENT_TYPE", "output_content_type"),
    )

    default_voice: VoiceProfile = Field(
        default=EN_US_PROFILE,
        validation_alias=AliasChoices("DEFAULT_VOICE", "default_voice"),
    )
    alternate_voices: list[VoiceProfile] = Field(
        default_factory=lambda: [ES_US_PROFILE],
        validation_alias=AliasChoices("ALTERNATE_VOICES", "alternate_voices"),
    )
    synthesis_input_type: Literal["text", "ssml"] = Field(
        default="text",
        validation_alias=AliasChoices("SYNTHESIS_INPUT_TYPE", "synthesis_input_type"),
    )

    gcp_project_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GCP_PROJECT_ID", "gcp_project_id"),
    )
    google_application_credentials: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices(
            "GOOGLE_APPLICATION_CREDENTIALS",
            "google_application_credentials",
        ),
    )

    @property
    def segmentation_limits(self) -> SegmentationLimits:
        return SegmentationLimits(
            hard_limit=self.character_limit,
            search_from=self.find_break_after,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
