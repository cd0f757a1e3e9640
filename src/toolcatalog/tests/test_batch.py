"""Tests for batch page generation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from toolcatalog.catalog import Catalog, build_catalog
from toolcatalog.foundation.config import BatchSettings
from toolcatalog.foundation.errors import ErrorCode
from toolcatalog.runtime.batch import BatchConfig, generate_all, static_params, work_list
from toolcatalog.runtime.observability import CaptureRenderer

from .conftest import make_content, make_tool


@pytest.fixture
def half_broken() -> Catalog:
    """Two tools in two locales; 'alpha' has no content anywhere."""
    return build_catalog(
        [make_tool("alpha"), make_tool("beta")],
        {"en": {"beta": make_content("Beta")}},
        supported_locales=("en", "de"),
    )


# ═════════════════════════════════════════════════════════════════════════════
# Work list
# ═════════════════════════════════════════════════════════════════════════════


def test_work_list_covers_every_pair(catalog: Catalog) -> None:
    work = work_list(catalog)
    assert len(work) == 8 * 16
    assert len(set(work)) == len(work)
    assert work[0] == ("en", "edit-pdf")
    assert work[16] == ("ja", "edit-pdf")


def test_static_params(catalog: Catalog) -> None:
    params = static_params(catalog)
    assert len(params) == 128
    assert params[0] == {"locale": "en", "tool": "edit-pdf"}
    assert {"locale": "pt", "tool": "remove-blank-pages"} in params


# ═════════════════════════════════════════════════════════════════════════════
# Generation
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("workers", [1, 4, 16])
def test_generates_every_page_in_order(catalog: Catalog, workers: int) -> None:
    result = generate_all(catalog, BatchConfig(workers=workers))
    assert len(result) == 128
    assert result.all_ok
    assert result.success_rate == 1.0
    assert [(i.locale, i.tool_id) for i in result] == work_list(catalog)
    assert result.workers == workers
    assert result.to_result().is_ok()


def test_pages_match_direct_rendering(catalog: Catalog) -> None:
    result = generate_all(catalog)
    item = next(i for i in result if i.locale == "de" and i.tool_id == "sign-pdf")
    assert item.value == catalog.render_page("sign-pdf", "de").unwrap()
    assert item.elapsed_ms >= 0


def test_failures_are_collected(half_broken: Catalog) -> None:
    result = generate_all(half_broken, BatchConfig(workers=2))
    assert len(result) == 4
    assert [i.tool_id for i in result.failures] == ["alpha", "alpha"]
    assert [(i.locale, i.tool_id) for i in result.successes] == [("en", "beta"), ("de", "beta")]
    assert result.success_rate == 0.5
    assert not result.all_ok
    errors = result.to_result().unwrap_err()
    assert {e.code for e in errors} == {ErrorCode.CONTENT_NOT_FOUND}


def test_fail_fast_stops_requesting_pairs(half_broken: Catalog) -> None:
    result = generate_all(half_broken, BatchConfig(workers=1, fail_fast=True))
    assert len(result) == 4
    assert result.items[0].error.code == ErrorCode.CONTENT_NOT_FOUND
    assert len(result.cancelled) == 3
    assert [(i.locale, i.tool_id) for i in result.cancelled] == [("en", "beta"), ("de", "alpha"), ("de", "beta")]


def test_unexpected_exceptions_become_errors(catalog: Catalog, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(view, site):
        raise RuntimeError("synthesis exploded")

    monkeypatch.setattr("toolcatalog.catalog.catalog.synthesize_all", boom)
    result = generate_all(catalog, BatchConfig(workers=4))
    assert result.successes == []
    assert all(i.error.code == ErrorCode.UNKNOWN for i in result)
    assert "synthesis exploded" in result.items[0].error.message


def test_default_config_comes_from_settings(catalog: Catalog, clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TOOLCATALOG_BATCH_WORKERS", "3")
    result = generate_all(catalog)
    assert result.workers == 3
    assert len(result) == 128


def test_empty_catalog() -> None:
    result = generate_all(build_catalog([], {}))
    assert len(result) == 0
    assert result.success_rate == 0.0


def test_logs_summary(catalog: Catalog, captured_logs: CaptureRenderer) -> None:
    generate_all(catalog, BatchConfig(workers=2))
    summary = [e for e in captured_logs.entries if e.event == "batch generation finished"]
    assert len(summary) == 1
    assert summary[0].context["pages"] == 128
    assert summary[0].context["failed"] == 0


# ═════════════════════════════════════════════════════════════════════════════
# Config
# ═════════════════════════════════════════════════════════════════════════════


def test_config_bounds() -> None:
    with pytest.raises(ValidationError):
        BatchConfig(workers=0)
    with pytest.raises(ValidationError):
        BatchConfig(workers=4, retries=2)


def test_config_from_settings() -> None:
    config = BatchConfig.from_settings(BatchSettings(workers=7, fail_fast=True))
    assert config == BatchConfig(workers=7, fail_fast=True)
