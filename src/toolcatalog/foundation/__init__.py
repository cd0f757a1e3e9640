"""Foundation - core types, errors and configuration.

The registry lives in `toolcatalog.foundation.registry`; it is not re-exported
here because it logs through `toolcatalog.runtime`, which itself builds on the
types below.
"""

from .config import CatalogSettings, clear_settings_cache, get_settings
from .core import (
    DEFAULT_LOCALE,
    DEFAULT_SITE,
    SUPPORTED_LOCALES,
    UNBOUNDED,
    FAQItem,
    Locale,
    LocaleContent,
    RelatedToolSummary,
    SiteInfo,
    Tool,
    ToolCategory,
)
from .errors import CatalogError, CatalogException, Err, ErrorCode, Ok, Result

__all__ = [
    # Core
    "Tool", "ToolCategory", "UNBOUNDED", "LocaleContent", "FAQItem", "RelatedToolSummary", "SiteInfo",
    "DEFAULT_SITE", "Locale", "DEFAULT_LOCALE", "SUPPORTED_LOCALES",
    # Errors
    "ErrorCode", "CatalogError", "CatalogException", "Result", "Ok", "Err",
    # Config
    "CatalogSettings", "get_settings", "clear_settings_cache",
]
