"""Configuration management using pydantic-settings."""

from .settings import (
    BatchSettings,
    CatalogSettings,
    LoggingSettings,
    SiteSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BatchSettings",
    "CatalogSettings",
    "LoggingSettings",
    "SiteSettings",
    "clear_settings_cache",
    "get_settings",
]
