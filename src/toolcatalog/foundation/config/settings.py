"""Environment-based configuration using pydantic-settings.

Example:
    >>> from toolcatalog.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.default_locale
    <Locale.EN: 'en'>
    >>> settings.site.site_info().url("en", "tools", "crop-pdf")
    'https://example.com/en/tools/crop-pdf'

    # Or with environment variables:
    # TOOLCATALOG_DEFAULT_LOCALE=de
    # TOOLCATALOG_SITE_URL=https://pdf.example.org
    # TOOLCATALOG_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from toolcatalog.foundation.core import DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale, SiteInfo


class SiteSettings(BaseSettings):
    """Site identity for canonical URLs."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLCATALOG_SITE_", env_file=".env", env_file_encoding="utf-8", extra="ignore",
    )

    url: str = Field(default="https://example.com", description="Public base URL, no trailing slash")
    name: str = Field(default="PDF Tools", min_length=1)

    @field_validator("url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def site_info(self) -> SiteInfo:
        return SiteInfo(base_url=self.url, name=self.name)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLCATALOG_LOG_", env_file=".env", env_file_encoding="utf-8", extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class BatchSettings(BaseSettings):
    """Defaults for (locale x tool) batch generation."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLCATALOG_BATCH_", env_file=".env", env_file_encoding="utf-8", extra="ignore",
    )

    workers: Annotated[int, Field(ge=1, le=64)] = 4
    fail_fast: bool = False


class CatalogSettings(BaseSettings):
    """Root settings for the catalog.

    Loads configuration from environment variables with TOOLCATALOG_ prefix.

    Example environment variables:
        TOOLCATALOG_ENVIRONMENT=production
        TOOLCATALOG_DEFAULT_LOCALE=en
        TOOLCATALOG_SUPPORTED_LOCALES='["en", "de"]'
        TOOLCATALOG_SITE_URL=https://pdf.example.org
        TOOLCATALOG_BATCH_WORKERS=8
    """

    model_config = SettingsConfigDict(
        env_prefix="TOOLCATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    environment: Literal["development", "staging", "production"] = "development"
    default_locale: Locale = DEFAULT_LOCALE
    supported_locales: tuple[Locale, ...] = SUPPORTED_LOCALES

    site: SiteSettings = Field(default_factory=SiteSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    batch: BatchSettings = Field(default_factory=BatchSettings)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_env(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _default_is_supported(self) -> CatalogSettings:
        if self.default_locale not in self.supported_locales:
            raise ValueError(f"default_locale '{self.default_locale}' missing from supported_locales")
        return self

    @computed_field
    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> CatalogSettings:
    """Get the process settings instance (cached)."""
    return CatalogSettings()


def clear_settings_cache() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
