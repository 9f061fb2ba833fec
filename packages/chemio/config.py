"""Format detection configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HEADER_LENGTH = 65536


class ChemIOSettings(BaseSettings):
    """Settings loaded from CHEMIO_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHEMIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Detection
    header_length: int = Field(
        default=DEFAULT_HEADER_LENGTH,
        ge=1,
        description="Number of leading characters inspected for detection",
    )

    # Decoding of binary input
    encoding: str = "utf-8"
    encoding_errors: str = "replace"

    # Scripts
    log_level: str = "INFO"


@lru_cache
def get_settings() -> ChemIOSettings:
    """Get cached settings instance."""
    return ChemIOSettings()
