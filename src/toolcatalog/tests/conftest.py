"""Shared fixtures: shipped catalog, small hand-built data, log capture and a clean environment."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from toolcatalog.catalog import CONTENT, TOOLS, Catalog, build_catalog
from toolcatalog.foundation.config import clear_settings_cache
from toolcatalog.foundation.core import FAQItem, LocaleContent, Tool, ToolCategory
from toolcatalog.runtime.observability import CaptureRenderer, NoOpRenderer, configure_logging


def make_tool(tool_id: str, related: tuple[str, ...] = ("edit-pdf", "sign-pdf"), **overrides: object) -> Tool:
    fields: dict[str, object] = {
        "id": tool_id,
        "slug": tool_id,
        "category": ToolCategory.EDIT_ANNOTATE,
        "accepted_formats": (".pdf",),
        "output_format": "pdf",
        "features": ("annotate",),
        "related_tools": related,
    }
    return Tool(**(fields | overrides))


def make_content(title: str, *faq: tuple[str, str], **overrides: object) -> LocaleContent:
    fields: dict[str, object] = {
        "title": title,
        "meta_description": f"{title} online.",
        "faq": tuple(FAQItem(question=q, answer=a) for q, a in faq),
    }
    return LocaleContent(**(fields | overrides))


@pytest.fixture(autouse=True)
def quiet_logs() -> Iterator[None]:
    configure_logging(renderer=NoOpRenderer())
    yield
    configure_logging(renderer=NoOpRenderer())


@pytest.fixture
def captured_logs() -> CaptureRenderer:
    """Route every logger into memory at DEBUG level."""
    capture = CaptureRenderer()
    configure_logging(level="DEBUG", renderer=capture)
    return capture


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: os.PathLike[str]) -> Iterator[pytest.MonkeyPatch]:
    """No TOOLCATALOG_* variables, no .env file, fresh settings cache."""
    for key in list(os.environ):
        if key.startswith("TOOLCATALOG_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield monkeypatch
    clear_settings_cache()


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """The shipped catalog with default locale, locales and site."""
    return build_catalog(TOOLS, CONTENT)
