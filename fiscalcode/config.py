"""Application configuration via pydantic-settings.

Values come from FISCALCODE_* environment variables or a .env file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_PLACES_PATH = Path(__file__).resolve().parent.parent / "data" / "places.json"


class Settings(BaseSettings):
    """Root settings.

    Usage:
        settings = Settings()
        settings.places_path
        settings.log_level
    """

    model_config = SettingsConfigDict(env_prefix="FISCALCODE_", env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    places_path: Path = Field(
        default=_DEFAULT_PLACES_PATH,
        description="JSON file mapping place codes to municipality / country records",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
