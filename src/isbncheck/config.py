"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IsbnCheckSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ISBNCHECK_",
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    strict: bool = Field(
        default=False,
        description="Exit with status 1 when any candidate is invalid",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return str(v).strip().upper()


@lru_cache
def get_settings() -> IsbnCheckSettings:
    """Get cached settings instance."""
    return IsbnCheckSettings()
