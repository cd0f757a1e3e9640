"""The catalog value: registry, content and resolver bundled for injection.

Built once at startup with load_catalog() (or build_catalog() for custom data)
and passed explicitly to whatever renders pages. Nothing here is global.

Example:
    >>> catalog = load_catalog()
    >>> page = catalog.render_page("crop-pdf", "de").unwrap()
    >>> page.breadcrumb["itemListElement"][-1]["name"]
    'PDF zuschneiden'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from toolcatalog.content import CatalogResolver, ContentResolver, LocaleContentStore, ResolvedToolView
from toolcatalog.foundation.config import CatalogSettings, get_settings
from toolcatalog.foundation.core import DEFAULT_LOCALE, DEFAULT_SITE, SUPPORTED_LOCALES, LocaleContent, SiteInfo, Tool
from toolcatalog.foundation.errors import CatalogError, Result
from toolcatalog.foundation.registry import POPULAR_TOOL_IDS, IntegrityReport, ToolRegistry, check_integrity
from toolcatalog.runtime.observability import configure_from_settings, get_logger, timed
from toolcatalog.seo import StructuredDataSet, synthesize_all

from .content import CONTENT
from .tools import TOOLS

_log = get_logger("toolcatalog.catalog")


@dataclass(frozen=True, slots=True)
class Catalog:
    """Immutable bundle of everything needed to resolve and render tool pages."""

    registry: ToolRegistry
    store: LocaleContentStore
    resolver: CatalogResolver
    site: SiteInfo
    supported_locales: tuple[str, ...]
    integrity: IntegrityReport

    @property
    def default_locale(self) -> str:
        return self.resolver.content.default_locale

    @property
    def content(self) -> ContentResolver:
        return self.resolver.content

    def resolve(self, tool_id: str, locale: str) -> Result[ResolvedToolView, CatalogError]:
        return self.resolver.resolve(tool_id, locale)

    def resolve_slug(self, slug: str, locale: str) -> Result[ResolvedToolView, CatalogError]:
        return self.resolver.resolve_slug(slug, locale)

    def render_page(self, tool_id: str, locale: str) -> Result[StructuredDataSet, CatalogError]:
        """Resolve then synthesize every structured-data document for the page."""
        return self.resolve(tool_id, locale).map(lambda view: synthesize_all(view, self.site))

    def render_slug(self, slug: str, locale: str) -> Result[StructuredDataSet, CatalogError]:
        return self.resolve_slug(slug, locale).map(lambda view: synthesize_all(view, self.site))

    def popular_tools(self) -> tuple[Tool, ...]:
        return self.registry.get_popular_tools()

    def __repr__(self) -> str:
        return (f"Catalog(tools={len(self.registry)}, content={len(self.store)}, "
                f"locales={list(self.supported_locales)}, issues={len(self.integrity)})")


def build_catalog(
    tools: Iterable[Tool],
    content: Mapping[str, Mapping[str, LocaleContent]],
    *,
    default_locale: str = DEFAULT_LOCALE,
    supported_locales: Iterable[str] = SUPPORTED_LOCALES,
    site: SiteInfo = DEFAULT_SITE,
    popular_ids: Iterable[str] = POPULAR_TOOL_IDS,
) -> Catalog:
    """Assemble a Catalog from raw data and run the integrity check once.

    Raises:
        CatalogException: duplicate tool id or slug
    """
    registry = ToolRegistry(tools, popular_ids=tuple(popular_ids))
    store = LocaleContentStore(content)
    default_locale = str(default_locale)
    report = check_integrity(registry, store, default_locale)
    report.log(_log)
    return Catalog(
        registry=registry,
        store=store,
        resolver=CatalogResolver(registry, ContentResolver(store, default_locale)),
        site=site,
        supported_locales=tuple(str(loc) for loc in supported_locales),
        integrity=report,
    )


@timed(_log, level="debug", event="catalog build")
def load_catalog(settings: CatalogSettings | None = None, *, configure_logs: bool = True) -> Catalog:
    """Build the shipped catalog using `settings` (or the process settings).

    Logging is configured from `settings.logging` first unless `configure_logs`
    is False, for callers that set up their own renderer.
    """
    settings = settings or get_settings()
    if configure_logs:
        configure_from_settings(settings.logging)
    catalog = build_catalog(
        TOOLS,
        CONTENT,
        default_locale=settings.default_locale,
        supported_locales=settings.supported_locales,
        site=settings.site.site_info(),
    )
    _log.info(
        "catalog loaded",
        tools=len(catalog.registry),
        content_records=len(catalog.store),
        locales=len(catalog.supported_locales),
        default_locale=catalog.default_locale,
        integrity_issues=len(catalog.integrity),
    )
    return catalog
