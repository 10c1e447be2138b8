"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Move suggestion
    suggestion_order: Literal["column_major", "row_major"] = "column_major"
    require_pawn_capture: bool = True  # Diagonal pawn moves need an enemy on the square


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
