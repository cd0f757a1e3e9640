"""Toolcatalog - localized tool catalog with schema.org structured data.

A registry of document tools, per-locale content with default-locale
fallback, and pure synthesis of the JSON-LD documents each tool page embeds.

Quick Start:
    >>> from toolcatalog import load_catalog, to_json_ld
    >>>
    >>> catalog = load_catalog()
    >>> view = catalog.resolve("sign-pdf", "de").unwrap()
    >>> view.content_locale  # no German copy yet, English serves the page
    'en'
    >>> page = catalog.render_page("sign-pdf", "de").unwrap()
    >>> page.types()
    ['SoftwareApplication', 'WebPage', 'BreadcrumbList', 'FAQPage', 'HowTo']
    >>> scripts = [to_json_ld(doc) for doc in page.documents()]

Not Found:
    >>> result = catalog.resolve("nonexistent-tool", "en")
    >>> result.is_err(), result.unwrap_err().code
    (True, <ErrorCode.TOOL_NOT_FOUND: 'TOOL_NOT_FOUND'>)

Batch Generation:
    >>> from toolcatalog import BatchConfig, generate_all
    >>> result = generate_all(catalog, BatchConfig(workers=8))
    >>> result.success_rate
    1.0

Configuration (environment):
    TOOLCATALOG_DEFAULT_LOCALE=en
    TOOLCATALOG_SITE_URL=https://pdf.example.org
    TOOLCATALOG_LOG_FORMAT=json
    TOOLCATALOG_BATCH_WORKERS=8
"""

from __future__ import annotations

__version__ = "0.1.0"

# Foundation
from .foundation import (
    DEFAULT_LOCALE,
    DEFAULT_SITE,
    SUPPORTED_LOCALES,
    UNBOUNDED,
    CatalogError,
    CatalogException,
    CatalogSettings,
    Err,
    ErrorCode,
    FAQItem,
    Locale,
    LocaleContent,
    Ok,
    RelatedToolSummary,
    Result,
    SiteInfo,
    Tool,
    ToolCategory,
    clear_settings_cache,
    get_settings,
)
from .foundation.registry import POPULAR_TOOL_IDS, IntegrityIssue, IntegrityReport, ToolRegistry, check_integrity

# Content
from .content import CatalogResolver, ContentResolver, LocaleContentStore, ResolvedToolView

# Structured data
from .seo import (
    StructuredDataSet,
    synthesize_all,
    synthesize_application,
    synthesize_breadcrumb,
    synthesize_faq,
    synthesize_how_to,
    synthesize_web_page,
    to_json_ld,
    to_script_tags,
)

# Catalog
from .catalog import CONTENT, TOOLS, Catalog, build_catalog, load_catalog

# Interfaces
from .interfaces import InterfaceRegistry, ToolInterface, default_interfaces

# Runtime
from .runtime.batch import BatchConfig, BatchResult, PageItem, generate_all, static_params
from .runtime.observability import configure_from_settings, configure_logging, get_logger

__all__ = [
    "__version__",
    # Models
    "Tool", "ToolCategory", "UNBOUNDED", "LocaleContent", "FAQItem", "RelatedToolSummary", "SiteInfo", "DEFAULT_SITE",
    "Locale", "DEFAULT_LOCALE", "SUPPORTED_LOCALES",
    # Errors
    "ErrorCode", "CatalogError", "CatalogException", "Result", "Ok", "Err",
    # Config
    "CatalogSettings", "get_settings", "clear_settings_cache",
    # Registry
    "ToolRegistry", "POPULAR_TOOL_IDS", "IntegrityIssue", "IntegrityReport", "check_integrity",
    # Content
    "LocaleContentStore", "ContentResolver", "CatalogResolver", "ResolvedToolView",
    # Structured data
    "StructuredDataSet", "synthesize_all", "synthesize_application", "synthesize_breadcrumb", "synthesize_faq",
    "synthesize_how_to", "synthesize_web_page", "to_json_ld", "to_script_tags",
    # Catalog
    "TOOLS", "CONTENT", "Catalog", "build_catalog", "load_catalog",
    # Interfaces
    "InterfaceRegistry", "ToolInterface", "default_interfaces",
    # Runtime
    "BatchConfig", "BatchResult", "PageItem", "generate_all", "static_params",
    "configure_logging", "configure_from_settings", "get_logger",
]
