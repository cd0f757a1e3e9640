"""Locale content store and fallback resolution."""

from .resolver import CatalogResolver, ContentResolver, ResolvedToolView
from .store import ContentKey, LocaleContentStore

__all__ = ["LocaleContentStore", "ContentKey", "ContentResolver", "CatalogResolver", "ResolvedToolView"]
