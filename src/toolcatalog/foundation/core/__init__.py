"""Core catalog types: tools, locales and localized content."""

from .models import DEFAULT_SITE, UNBOUNDED, FAQItem, LocaleContent, RelatedToolSummary, SiteInfo, Tool, ToolCategory
from .types import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    JsonDict,
    JsonMapping,
    JsonValue,
    Locale,
)

__all__ = [
    # Entities
    "Tool", "ToolCategory", "UNBOUNDED", "LocaleContent", "FAQItem", "RelatedToolSummary",
    "SiteInfo", "DEFAULT_SITE",
    # Locales
    "Locale", "DEFAULT_LOCALE", "SUPPORTED_LOCALES",
    # JSON aliases
    "JsonDict", "JsonMapping", "JsonValue",
]
