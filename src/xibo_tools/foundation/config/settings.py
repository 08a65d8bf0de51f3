"""Environment-based configuration using pydantic-settings.

Configuration is read once and treated as read-only by every tool. The CMS
base URL keeps its historical unprefixed name (``CMS_URL``); everything else
lives under the ``XIBO_`` prefix.

Example:
    >>> from xibo_tools.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.http.timeout
    30.0

    # Or with environment variables:
    # CMS_URL=https://cms.example.com
    # XIBO_CLIENT_ID=...
    # XIBO_CLIENT_SECRET=...
    # XIBO_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, PositiveFloat, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PathSettings(BaseSettings):
    """Local directory the upload tools read files from."""

    model_config = SettingsConfigDict(
        env_prefix="XIBO_PATH_",
        extra="ignore",
    )

    upload_dir: Path = Field(
        default=Path("persistent_data/uploads"),
        validation_alias=AliasChoices("XIBO_UPLOAD_DIR", "XIBO_PATH_UPLOAD_DIR", "upload_dir"),
        description="Base directory for files referenced by upload tools",
    )


class HttpSettings(BaseSettings):
    """HTTP client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="XIBO_HTTP_",
        extra="ignore",
    )

    timeout: PositiveFloat = Field(default=30.0, description="Per-request timeout in seconds")
    verify_ssl: bool = True
    user_agent: str = "xibo-tools/0.1"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="XIBO_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class WeatherSettings(BaseSettings):
    """Endpoints of the Open-Meteo services used by the weather tools."""

    model_config = SettingsConfigDict(
        env_prefix="XIBO_WEATHER_",
        extra="ignore",
    )

    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"


class XiboSettings(BaseSettings):
    """Root settings for the Xibo tool collection.

    Example environment variables:
        CMS_URL=https://cms.example.com
        XIBO_CLIENT_ID=abc
        XIBO_CLIENT_SECRET=s3cret
        XIBO_HTTP_TIMEOUT=60
        XIBO_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="XIBO_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        populate_by_name=True,
        validate_default=True,
    )

    cms_url: str = Field(
        default="",
        validation_alias=AliasChoices("CMS_URL", "XIBO_CMS_URL", "cms_url"),
        description="Base URL of the Xibo CMS; empty means not configured",
    )
    client_id: str = ""
    client_secret: SecretStr = SecretStr("")

    # Nested settings (loaded with XIBO_PATH_, XIBO_HTTP_, etc.)
    paths: PathSettings = Field(default_factory=PathSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    weather: WeatherSettings = Field(default_factory=WeatherSettings)

    @field_validator("cms_url", mode="before")
    @classmethod
    def _normalize_url(cls, v: str | None) -> str:
        """Strip whitespace and trailing slashes so paths can be appended directly."""
        return (v or "").strip().rstrip("/")

    @computed_field
    @property
    def is_configured(self) -> bool:
        """Whether a CMS URL is available."""
        return bool(self.cms_url)

    @property
    def token_url(self) -> str:
        return f"{self.cms_url}/api/authorize/access_token"


@lru_cache(maxsize=1)
def get_settings() -> XiboSettings:
    """Get the process-wide settings instance (cached)."""
    return XiboSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
