"""Tests for locale fallback and single-pass page resolution."""

from __future__ import annotations

import pytest

from toolcatalog.catalog import Catalog, build_catalog
from toolcatalog.content import ContentResolver, LocaleContentStore
from toolcatalog.foundation.core import RelatedToolSummary
from toolcatalog.foundation.errors import ErrorCode
from toolcatalog.runtime.observability import CaptureRenderer

from .conftest import make_content, make_tool


@pytest.fixture
def resolver() -> ContentResolver:
    store = LocaleContentStore({
        "en": {"alpha": make_content("Alpha"), "beta": make_content("Beta")},
        "de": {"alpha": make_content("Alpha DE")},
    })
    return ContentResolver(store, "en")


# ═════════════════════════════════════════════════════════════════════════════
# Content fallback
# ═════════════════════════════════════════════════════════════════════════════


def test_exact_locale_wins(resolver: ContentResolver) -> None:
    assert resolver.resolve_content("alpha", "de").title == "Alpha DE"
    assert resolver.resolve_with_locale("alpha", "de")[1] == "de"


def test_falls_back_to_default_locale(resolver: ContentResolver) -> None:
    content, served_by = resolver.resolve_with_locale("beta", "de")
    assert content.title == "Beta"
    assert served_by == "en"


@pytest.mark.parametrize("locale", ["xx", "", "EN", "de-AT"])
def test_unsupported_locales_fall_back(resolver: ContentResolver, locale: str) -> None:
    assert resolver.resolve_content("beta", locale).title == "Beta"


def test_missing_everywhere_is_none(resolver: ContentResolver) -> None:
    assert resolver.resolve_content("gamma", "de") is None
    assert resolver.resolve_with_locale("gamma", "en") is None


def test_records_are_never_merged() -> None:
    store = LocaleContentStore({
        "en": {"alpha": make_content("Alpha", ("Q?", "A"), keywords=("alpha",))},
        "de": {"alpha": make_content("Alpha DE")},
    })
    content = ContentResolver(store, "en").resolve_content("alpha", "de")
    assert content.faq == ()
    assert content.keywords == ()


def test_resolution_is_deterministic(resolver: ContentResolver) -> None:
    assert resolver.resolve_content("beta", "fr") == resolver.resolve_content("beta", "fr")


# ═════════════════════════════════════════════════════════════════════════════
# Related tools
# ═════════════════════════════════════════════════════════════════════════════


def test_related_follow_declared_order_and_omit_unresolvable(resolver: ContentResolver) -> None:
    tool = make_tool("delta", related=("beta", "ghost", "alpha"))
    related = resolver.resolve_related_tools(tool, "de")
    assert list(related) == ["beta", "alpha"]
    assert related["alpha"] == RelatedToolSummary(title="Alpha DE", description="Alpha DE online.")
    assert related["beta"].title == "Beta"


def test_related_empty_when_all_dangle(resolver: ContentResolver) -> None:
    assert resolver.resolve_related_tools(make_tool("delta", related=("ghost-a", "ghost-b")), "en") == {}


# ═════════════════════════════════════════════════════════════════════════════
# Page resolution on the shipped catalog
# ═════════════════════════════════════════════════════════════════════════════


def test_sign_pdf_in_german_uses_english_copy(catalog: Catalog) -> None:
    view = catalog.resolve("sign-pdf", "de").unwrap()
    assert view.locale == "de"
    assert view.content_locale == "en"
    assert view.is_fallback
    assert view.content.title == "Sign PDF"


def test_related_titles_resolve_per_tool(catalog: Catalog) -> None:
    view = catalog.resolve("sign-pdf", "de").unwrap()
    assert {k: v.title for k, v in view.localized_related_tools.items()} == {
        "edit-pdf": "PDF bearbeiten",
        "form-filler": "PDF-Formulare ausfüllen",
        "add-stamps": "Add Stamps to PDF",
    }


def test_exact_locale_view(catalog: Catalog) -> None:
    view = catalog.resolve("crop-pdf", "de").unwrap()
    assert not view.is_fallback
    assert view.content.title == "PDF zuschneiden"


def test_resolve_by_slug(catalog: Catalog) -> None:
    assert catalog.resolve_slug("crop-pdf", "ja").unwrap().content.title == "PDFトリミング"


def test_unknown_tool_is_not_found(catalog: Catalog) -> None:
    result = catalog.resolve("nonexistent-tool", "en")
    assert result.is_err()
    error = result.unwrap_err()
    assert error.code == ErrorCode.TOOL_NOT_FOUND
    assert error.is_not_found
    assert error.tool_id == "nonexistent-tool"
    assert catalog.resolve_slug("nonexistent-tool", "en").unwrap_err().code == ErrorCode.TOOL_NOT_FOUND


def test_tool_without_any_content_is_not_found() -> None:
    catalog = build_catalog([make_tool("alpha")], {"en": {}})
    error = catalog.resolve("alpha", "de").unwrap_err()
    assert error.code == ErrorCode.CONTENT_NOT_FOUND
    assert error.is_not_found
    assert error.render() == "[CONTENT_NOT_FOUND] No content for tool 'alpha' in 'de' or default locale 'en' (de/alpha)"


def test_resolution_logs(catalog: Catalog, captured_logs: CaptureRenderer) -> None:
    catalog.resolve("sign-pdf", "de")
    catalog.resolve("nonexistent-tool", "en")
    assert captured_logs.events("debug") == ["content fallback"]
    assert captured_logs.events("info") == ["tool not found"]


# ═════════════════════════════════════════════════════════════════════════════
# Store
# ═════════════════════════════════════════════════════════════════════════════


def test_store_from_flat_records() -> None:
    store = LocaleContentStore.from_records({
        ("alpha", "en"): make_content("Alpha"),
        ("alpha", "de"): make_content("Alpha DE"),
        ("beta", "en"): make_content("Beta"),
    })
    assert len(store) == 3
    assert store.locales() == ("en", "de")
    assert store.tool_ids() == frozenset({"alpha", "beta"})
    assert store.tool_ids("de") == frozenset({"alpha"})
    assert ("alpha", "de") in store and ("beta", "de") not in store
    assert store.get("beta", "de") is None
