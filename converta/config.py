"""
Configuration management using Pydantic Settings.
Loads from environment variables and .env file.
"""
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format"
    )

    # Partner matching thresholds
    relevance_threshold: int = Field(
        default=20,
        description="Partners must score above this to pass the relevance filter"
    )
    recommendation_min_score: int = Field(
        default=10,
        description="Partners must score above this to join a category recommendation"
    )

    # Data Sources
    partner_catalog_file: str | None = Field(
        default=None,
        description="JSON file with the partner directory"
    )


# Global settings instance
settings = Settings()
