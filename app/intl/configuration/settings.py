"""Translation engine configuration settings."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator

from intl.configuration.base import IntlBaseSettings


class IntlSettings(IntlBaseSettings):
    """Translation engine configuration.

    Environment Variables:
        DEFAULT_LOCALE: Fallback locale, must have a dictionary (default: en-US)
        LOCALE: Initial active locale (default: DEFAULT_LOCALE)
        TRANSLATIONS_DIR: Directory with <name>.<locale>.yml/.json files
        LOADER_TIMEOUT_SECONDS: Upper bound for a single dictionary load
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: development, production or test

    Example:
        ```python
        from intl.configuration import settings

        default_locale = settings.DEFAULT_LOCALE
        if settings.is_production:
            ...
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en-US", alias="DEFAULT_LOCALE")
    LOCALE: Optional[str] = Field(default=None, alias="LOCALE")
    TRANSLATIONS_DIR: Optional[Path] = Field(default=None, alias="TRANSLATIONS_DIR")
    LOADER_TIMEOUT_SECONDS: Optional[float] = Field(
        default=None,
        alias="LOADER_TIMEOUT_SECONDS",
        description="Seconds before a pending dictionary load is abandoned",
    )
    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    ENVIRONMENT: Literal["development", "production", "test"] = Field(
        default="development", alias="ENVIRONMENT"
    )

    @field_validator("LOADER_TIMEOUT_SECONDS")
    @classmethod
    def validate_loader_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Ensure the loader timeout is positive when set."""
        if v is not None and v <= 0:
            raise ValueError("LOADER_TIMEOUT_SECONDS must be greater than 0")
        return v

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject an empty default locale."""
        if not v.strip():
            raise ValueError("DEFAULT_LOCALE must not be empty")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def active_locale(self) -> str:
        """Initial active locale, defaulting to DEFAULT_LOCALE."""
        return self.LOCALE or self.DEFAULT_LOCALE


settings = IntlSettings()
