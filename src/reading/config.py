"""Configuration for the reading demonstration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Demo defaults, loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=str(_PACKAGE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reader_name: str = "Alex"
    book_title: str = "Design Patterns"
    device_model: str = "Paperwhite"
    pages: int = Field(default=2, ge=0)

    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings singleton."""
    return Settings()
