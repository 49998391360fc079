"""Application configuration and .env loading."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CheckerProfile = Literal["strict", "lenient", "basic"]
ContrastLevel = Literal["AA", "AAA"]
ConformanceLevel = Literal["A", "AA", "AAA"]


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    check_batch_workers: int = Field(
        default=1, ge=1, validation_alias="CHECK_BATCH_WORKERS"
    )
    checker_profile: CheckerProfile = Field(
        default="strict", validation_alias="CHECKER_PROFILE"
    )
    contrast_level: ContrastLevel = Field(
        default="AA", validation_alias="CONTRAST_LEVEL"
    )
    wcag_level: ConformanceLevel = Field(
        default="AA", validation_alias="WCAG_LEVEL"
    )

    role_map_max_depth: int | None = Field(
        default=None, ge=1, validation_alias="ROLE_MAP_MAX_DEPTH"
    )
    table_visual_tolerance: float | None = Field(
        default=None, ge=0, validation_alias="TABLE_VISUAL_TOLERANCE"
    )
    list_max_nesting_level: int = Field(
        default=5, ge=0, validation_alias="LIST_MAX_NESTING_LEVEL"
    )
    alt_text_min_length: int | None = Field(
        default=None, ge=1, validation_alias="ALT_TEXT_MIN_LENGTH"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["CheckerProfile", "ConformanceLevel", "ContrastLevel", "Settings", "get_settings"]
