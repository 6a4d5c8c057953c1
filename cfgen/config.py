"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ReferenceDataSettings(BaseSettings):
    """Municipality reference table location and format."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    municipalities_path: Path = Field(
        default=_DATA_DIR / "comuni_italiani.csv",
        description="Delimited file with comune, provincia, codice_catastale columns",
    )
    municipalities_delimiter: str = Field(
        default=",",
        description="Field delimiter of the municipalities file",
    )

    @field_validator("municipalities_delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """The csv module only accepts single-character delimiters."""
        if len(v) != 1:
            msg = f"Delimiter must be a single character, got {v!r}"
            raise ValueError(msg)
        return v


class Settings(BaseSettings):
    """Root settings.

    Usage:
        settings = Settings()
        settings.min_birth_year
        settings.reference.municipalities_path
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Nobody who received a fiscal code (introduced in 1973) was born
    # more than 125 years earlier.
    min_birth_year: int = Field(default=1848, ge=1000)

    reference: ReferenceDataSettings = Field(default_factory=ReferenceDataSettings)

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


# Module-level singleton, import this wherever settings are needed.
settings = Settings()
