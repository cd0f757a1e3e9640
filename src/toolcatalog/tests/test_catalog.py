"""Tests for loading the shipped catalog and rendering pages end to end."""

from __future__ import annotations

import orjson
import pytest

from toolcatalog.catalog import CONTENT, POPULAR_TOOL_IDS, TOOLS, load_catalog
from toolcatalog.foundation.config import CatalogSettings
from toolcatalog.foundation.core import Locale
from toolcatalog.foundation.errors import ErrorCode
from toolcatalog.runtime.observability import CaptureRenderer


def test_load_catalog_from_settings(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TOOLCATALOG_SITE_URL", "https://pdf.example.org")
    clean_env.setenv("TOOLCATALOG_SUPPORTED_LOCALES", '["en", "de"]')
    catalog = load_catalog(CatalogSettings())

    assert catalog.site.base_url == "https://pdf.example.org"
    assert catalog.supported_locales == ("en", "de")
    assert catalog.default_locale == "en"
    app = catalog.render_page("crop-pdf", "de").unwrap().application
    assert app["url"] == "https://pdf.example.org/de/tools/crop-pdf"


def test_load_catalog_uses_process_settings(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TOOLCATALOG_DEFAULT_LOCALE", "de")
    catalog = load_catalog()
    assert catalog.default_locale == "de"
    # sign-pdf has no German copy, and German is now the fallback
    assert catalog.resolve("sign-pdf", "fr").unwrap_err().code == ErrorCode.CONTENT_NOT_FOUND
    assert catalog.resolve("crop-pdf", "fr").unwrap().content.title == "PDF zuschneiden"


def test_load_catalog_applies_logging_settings(
    clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    clean_env.setenv("TOOLCATALOG_LOG_FORMAT", "json")
    load_catalog()
    records = [orjson.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert "catalog loaded" in [r["event"] for r in records]


def test_load_catalog_logs_summary(clean_env: pytest.MonkeyPatch, captured_logs: CaptureRenderer) -> None:
    catalog = load_catalog(CatalogSettings(), configure_logs=False)
    loaded = [e for e in captured_logs.entries if e.event == "catalog loaded"]
    assert len(loaded) == 1
    assert loaded[0].context["tools"] == 16
    assert loaded[0].context["integrity_issues"] == len(catalog.integrity)
    assert captured_logs.events("warning").count("catalog integrity issue") == len(catalog.integrity)
    assert "catalog build" in captured_logs.events("debug")


def test_shipped_data_shape() -> None:
    assert len(TOOLS) == 16
    assert set(CONTENT[Locale.EN]) == {t.id for t in TOOLS}
    assert "sign-pdf" not in CONTENT[Locale.DE]
    assert POPULAR_TOOL_IDS[0] == "edit-pdf"


def test_popular_tools(catalog) -> None:
    assert [t.id for t in catalog.popular_tools()] == list(POPULAR_TOOL_IDS)


def test_render_slug(catalog) -> None:
    assert catalog.render_slug("crop-pdf", "en").unwrap().breadcrumb["itemListElement"][-1]["name"] == "Crop PDF"
    assert catalog.render_slug("ghost-tool", "en").unwrap_err().code == ErrorCode.TOOL_NOT_FOUND


def test_every_page_renders_in_every_locale(catalog) -> None:
    for locale in catalog.supported_locales:
        for tool in catalog.registry:
            docs = catalog.render_page(tool.id, locale).unwrap()
            assert docs.application["inLanguage"] == locale
            assert docs.types()[:3] == ["SoftwareApplication", "WebPage", "BreadcrumbList"]
