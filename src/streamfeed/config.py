"""Configuration management using Pydantic Settings."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Codec settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STREAMFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default clock used when an activity has no explicit time
    use_utc_clock: bool = True

    # Follow requests
    activity_copy_limit: int = 300

    # Followers listing
    followers_page_limit: int = 25

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
