"""Bridge settings loaded from the environment and .env."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .quote import QuoteSettings


class Settings(BaseSettings):
    """Settings for the Telegram -> Discord converter."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    use_first_name_instead_of_username: bool = Field(
        False, validation_alias="TELEGRAM_USE_FIRST_NAME_INSTEAD_OF_USERNAME"
    )

    # Fixed values; not read from env
    quote: QuoteSettings = Field(default_factory=QuoteSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
