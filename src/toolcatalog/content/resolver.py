"""Locale resolution with default-locale fallback.

Resolution rule (the only one): look up `(tool_id, locale)`; if absent, look
up `(tool_id, default_locale)`; if still absent, there is no content. Records
are used whole, fields are never merged across locales.

Example:
    >>> resolver = ContentResolver(store, default_locale="en")
    >>> resolver.resolve_content("sign-pdf", "de").title  # no German record
    'Sign PDF'
    >>> pages = CatalogResolver(registry, resolver)
    >>> pages.resolve("nonexistent-tool", "en").unwrap_err().code
    <ErrorCode.TOOL_NOT_FOUND: 'TOOL_NOT_FOUND'>
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from toolcatalog.foundation.core import LocaleContent, RelatedToolSummary, Tool
from toolcatalog.foundation.errors import CatalogError, Err, Ok, Result, from_optional
from toolcatalog.foundation.registry import ToolRegistry
from toolcatalog.runtime.observability import get_logger

from .store import LocaleContentStore

_log = get_logger("toolcatalog.resolver")


class ContentResolver:
    """Resolves content for (tool, locale) pairs against a LocaleContentStore."""

    __slots__ = ("_store", "_default_locale")

    def __init__(self, store: LocaleContentStore, default_locale: str) -> None:
        self._store = store
        self._default_locale = str(default_locale)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def store(self) -> LocaleContentStore:
        return self._store

    def resolve_with_locale(self, tool_id: str, locale: str) -> tuple[LocaleContent, str] | None:
        """Resolve content and report which locale actually served it."""
        if (content := self._store.get(tool_id, locale)) is not None:
            return content, locale
        if (content := self._store.get(tool_id, self._default_locale)) is not None:
            return content, self._default_locale
        return None

    def resolve_content(self, tool_id: str, locale: str) -> LocaleContent | None:
        """Content in `locale`, else in the default locale, else None. Accepts any locale string."""
        return found[0] if (found := self.resolve_with_locale(tool_id, locale)) else None

    def resolve_related_tools(self, tool: Tool, locale: str) -> dict[str, RelatedToolSummary]:
        """Title/description for each resolvable related tool, in related_tools order.

        Ids with no content under the fallback rule are omitted, so the result
        may be empty when every reference dangles.
        """
        return {
            related_id: RelatedToolSummary(title=content.title, description=content.meta_description)
            for related_id in tool.related_tools
            if (content := self.resolve_content(related_id, locale)) is not None
        }


@dataclass(frozen=True, slots=True)
class ResolvedToolView:
    """Everything a page needs for one (tool, locale) request. Built per request, then discarded."""

    tool: Tool
    content: LocaleContent
    locale: str
    content_locale: str
    localized_related_tools: Mapping[str, RelatedToolSummary]

    @property
    def is_fallback(self) -> bool:
        """True when content came from the default locale instead of the requested one."""
        return self.content_locale != self.locale


class CatalogResolver:
    """Single-pass page resolution: tool, content and related tools, or a not-found error.

    Both failure kinds come back as `Err(CatalogError)`:
        TOOL_NOT_FOUND: id/slug not in the registry
        CONTENT_NOT_FOUND: tool exists but has no content in locale or default locale
    """

    __slots__ = ("_registry", "_content")

    def __init__(self, registry: ToolRegistry, content: ContentResolver) -> None:
        self._registry = registry
        self._content = content

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def content(self) -> ContentResolver:
        return self._content

    def resolve(self, tool_id: str, locale: str) -> Result[ResolvedToolView, CatalogError]:
        return (
            from_optional(self._registry.get_tool_by_id(tool_id), lambda: CatalogError.tool_not_found(tool_id, locale))
            .inspect_err(lambda _: _log.info("tool not found", tool=tool_id, locale=locale))
            .flat_map(lambda tool: self._view(tool, locale))
        )

    def resolve_slug(self, slug: str, locale: str) -> Result[ResolvedToolView, CatalogError]:
        """Same as resolve(), keyed by the routing slug."""
        return (
            from_optional(self._registry.get_tool_by_slug(slug), lambda: CatalogError.tool_not_found(slug, locale))
            .inspect_err(lambda _: _log.info("tool not found", slug=slug, locale=locale))
            .flat_map(lambda tool: self._view(tool, locale))
        )

    def _view(self, tool: Tool, locale: str) -> Result[ResolvedToolView, CatalogError]:
        if (found := self._content.resolve_with_locale(tool.id, locale)) is None:
            _log.info("content not found", tool=tool.id, locale=locale)
            return Err(CatalogError.content_not_found(tool.id, locale, self._content.default_locale))
        content, content_locale = found
        if content_locale != locale:
            _log.debug("content fallback", tool=tool.id, locale=locale, content_locale=content_locale)
        related = self._content.resolve_related_tools(tool, locale)
        return Ok(ResolvedToolView(
            tool=tool,
            content=content,
            locale=locale,
            content_locale=content_locale,
            localized_related_tools=MappingProxyType(related),
        ))
