"""Batch page generation over every (locale, tool) pair.

Runs Catalog.render_page on a fixed-size thread pool with:
- An explicit work list built up front (supported locales x registered tools)
- Partial failure handling (fail-fast or continue)
- Results returned in work-list order regardless of completion order

Design: pages share only immutable catalog data, so workers need no locks.
Fail-fast stops submitting new pairs; in-flight pairs finish, and pairs never
submitted come back as CANCELLED errors.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field

from toolcatalog.foundation.config import get_settings
from toolcatalog.foundation.errors import CatalogError, Err, ErrorCode, Ok, Result
from toolcatalog.runtime.observability import get_logger

if TYPE_CHECKING:
    from toolcatalog.catalog import Catalog
    from toolcatalog.foundation.config import BatchSettings
    from toolcatalog.seo import StructuredDataSet

_log = get_logger("toolcatalog.batch")

PageResult = Result["StructuredDataSet", CatalogError]
WorkItem = tuple[str, str]  # (locale, tool_id)


@dataclass(frozen=True, slots=True)
class PageItem:
    """Outcome for one (locale, tool) pair."""
    locale: str
    tool_id: str
    result: PageResult
    elapsed_ms: float

    @property
    def is_ok(self) -> bool: return self.result.is_ok()

    @property
    def is_err(self) -> bool: return self.result.is_err()

    @property
    def value(self) -> StructuredDataSet | None: return self.result.unwrap() if self.is_ok else None

    @property
    def error(self) -> CatalogError | None: return self.result.unwrap_err() if self.is_err else None


@dataclass(slots=True)
class BatchResult:
    """Aggregated page results with success/failure views and timing."""
    items: list[PageItem]
    total_ms: float
    workers: int

    @property
    def successes(self) -> list[PageItem]: return [i for i in self.items if i.is_ok]

    @property
    def failures(self) -> list[PageItem]: return [i for i in self.items if i.is_err]

    @property
    def cancelled(self) -> list[PageItem]:
        return [i for i in self.items if (e := i.error) is not None and e.code == ErrorCode.CANCELLED]

    @property
    def success_rate(self) -> float: return len(self.successes) / len(self.items) if self.items else 0.0

    @property
    def all_ok(self) -> bool: return all(i.is_ok for i in self.items)

    def values(self) -> list[StructuredDataSet]: return [v for i in self.items if (v := i.value) is not None]

    def errors(self) -> list[CatalogError]: return [e for i in self.items if (e := i.error) is not None]

    def to_result(self) -> Result[list[StructuredDataSet], list[CatalogError]]:
        """Ok with every page set if all succeeded, Err with all errors otherwise."""
        return Ok(self.values()) if self.all_ok else Err(self.errors())

    def __len__(self) -> int: return len(self.items)

    def __iter__(self) -> Iterator[PageItem]: return iter(self.items)


class BatchConfig(BaseModel):
    """Configuration for batch generation.

    Example:
        >>> result = generate_all(catalog, BatchConfig(workers=8, fail_fast=True))
        >>> print(f"Success rate: {result.success_rate:.0%}")
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", validate_default=True,
        json_schema_extra={"title": "Batch Configuration", "examples": [{"workers": 4, "fail_fast": False}]},
    )

    workers: Annotated[int, Field(ge=1, le=64)] = 4
    fail_fast: bool = False

    @classmethod
    def from_settings(cls, settings: BatchSettings) -> BatchConfig:
        return cls(workers=settings.workers, fail_fast=settings.fail_fast)


def work_list(catalog: Catalog) -> list[WorkItem]:
    """Every (locale, tool_id) pair, locales outermost, both in catalog order."""
    return [(locale, tool_id) for locale in catalog.supported_locales for tool_id in catalog.registry.ids()]


def static_params(catalog: Catalog) -> list[dict[str, str]]:
    """Route parameters for static generation: one {locale, tool} per pair, keyed by slug."""
    return [{"locale": locale, "tool": tool.slug} for locale in catalog.supported_locales for tool in catalog.registry]


def _render(catalog: Catalog, locale: str, tool_id: str) -> PageItem:
    t0 = time.perf_counter()
    try:
        result = catalog.render_page(tool_id, locale)
    except Exception as e:
        _log.exception("page generation failed", tool=tool_id, locale=locale)
        result = Err(CatalogError.from_exception(e, "page generation", tool_id=tool_id, locale=locale))
    return PageItem(locale, tool_id, result, (time.perf_counter() - t0) * 1000)


def _cancelled(locale: str, tool_id: str) -> PageItem:
    err = CatalogError.create("Batch cancelled due to fail_fast", ErrorCode.CANCELLED, tool_id=tool_id, locale=locale)
    return PageItem(locale, tool_id, Err(err), 0.0)


def generate_all(catalog: Catalog, config: BatchConfig | None = None) -> BatchResult:
    """Render every (locale, tool) page on a fixed-size worker pool.

    At most `config.workers` pairs are in flight at once. Without a config,
    workers and fail-fast come from TOOLCATALOG_BATCH_*. Output order matches
    work_list(catalog).

    Example:
        >>> result = generate_all(load_catalog())
        >>> result.all_ok, len(result)
        (True, 128)
    """
    cfg, start = config or BatchConfig.from_settings(get_settings().batch), time.perf_counter()
    work = work_list(catalog)
    if not work:
        return BatchResult([], 0.0, 0)

    items: list[PageItem | None] = [None] * len(work)
    pending: dict[Future[PageItem], int] = {}
    next_idx, stop = 0, False

    with ThreadPoolExecutor(max_workers=cfg.workers, thread_name_prefix="toolcatalog-batch-") as pool:
        while pending or (next_idx < len(work) and not stop):
            while not stop and next_idx < len(work) and len(pending) < cfg.workers:
                locale, tool_id = work[next_idx]
                pending[pool.submit(_render, catalog, locale, tool_id)] = next_idx
                next_idx += 1
            done, _ = wait(pending, return_when=FIRST_COMPLETED)
            for fut in done:
                item = items[pending.pop(fut)] = fut.result()
                if cfg.fail_fast and item.is_err:
                    stop = True

    for idx in range(next_idx, len(work)):
        items[idx] = _cancelled(*work[idx])

    result = BatchResult([i for i in items if i is not None], (time.perf_counter() - start) * 1000, cfg.workers)
    _log.info(
        "batch generation finished",
        pages=len(result),
        succeeded=len(result.successes),
        failed=len(result.failures),
        cancelled=len(result.cancelled),
        workers=cfg.workers,
        duration_ms=round(result.total_ms, 2),
    )
    return result
