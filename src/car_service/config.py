"""Configuration for the car-service demonstration using pydantic-settings."""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Prices and logging options, loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=str(_PACKAGE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Base service
    # ------------------------------------------------------------------
    base_cost: Decimal = Decimal("25")
    base_description: str = "Basic inspection"

    # ------------------------------------------------------------------
    # Add-on increments
    # tire_rotation_cost is the only default for tire rotation (quoted
    # both as 15 and 35); override with TIRE_ROTATION_COST.
    # ------------------------------------------------------------------
    oil_change_cost: Decimal = Decimal("29")
    tire_rotation_cost: Decimal = Decimal("15")

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("base_cost", "oil_change_cost", "tire_rotation_cost")
    @classmethod
    def _non_negative(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise ValueError("costs must be non-negative")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings singleton."""
    return Settings()
