"""
Configuration management using pydantic-settings.

Loads configuration from environment variables and .env files. The cache
root is normally provisioned by the host build before any fetch happens;
these settings only supply defaults for the outer surfaces (CLI, module-level
helpers). The store itself always receives its cache root explicitly.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from include_url.exceptions import ConfigurationError

DEFAULT_NAMESPACE = "unknown"


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Optional:
        INCLUDE_URL_CACHE_DIR: Directory holding cache entries
        INCLUDE_URL_NAMESPACE: Build-unit namespace mixed into every cache key
        LOG_LEVEL: Logging level
        LOG_FILE: JSON Lines log file (console only when unset)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    INCLUDE_URL_CACHE_DIR: Path = Field(
        default=Path(".cache") / ".include_url_cache",
        description="Cache root directory",
    )
    INCLUDE_URL_NAMESPACE: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace of the consuming build unit",
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    LOG_FILE: Path | None = Field(default=None, description="JSON Lines log file")

    @property
    def cache_dir(self) -> Path:
        """Get cache directory (lowercase alias)."""
        return self.INCLUDE_URL_CACHE_DIR

    @property
    def namespace(self) -> str:
        """Get namespace (lowercase alias)."""
        return self.INCLUDE_URL_NAMESPACE

    @field_validator("INCLUDE_URL_NAMESPACE")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Reject blank namespaces; they would merge unrelated build units."""
        v = v.strip()
        if not v:
            raise ValueError("INCLUDE_URL_NAMESPACE must not be empty")
        return v

    def ensure_cache_dir(self) -> Path:
        """Create the cache directory if it doesn't exist."""
        self.INCLUDE_URL_CACHE_DIR.mkdir(parents=True, exist_ok=True)
        return self.INCLUDE_URL_CACHE_DIR

    def display(self) -> dict[str, str]:
        """Return settings as display strings."""
        return {
            "INCLUDE_URL_CACHE_DIR": str(self.INCLUDE_URL_CACHE_DIR),
            "INCLUDE_URL_NAMESPACE": self.INCLUDE_URL_NAMESPACE,
            "LOG_LEVEL": self.LOG_LEVEL,
            "LOG_FILE": str(self.LOG_FILE) if self.LOG_FILE else "-",
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings instance loaded from environment.

    Raises:
        ConfigurationError: If settings are invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise ConfigurationError(
            f"Invalid settings: {e}",
            context={"fields": fields, "errors": e.error_count()},
        ) from e


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
