"""Batch generation of structured data for every (locale, tool) page.

Usage:
    from toolcatalog.catalog import load_catalog
    from toolcatalog.runtime.batch import BatchConfig, generate_all

    result = generate_all(load_catalog(), BatchConfig(workers=8))
    for item in result.failures:
        print(f"[{item.locale}/{item.tool_id}] {item.error}")
"""

from .batch import (
    BatchConfig,
    BatchResult,
    PageItem,
    generate_all,
    static_params,
    work_list,
)

__all__ = [
    "BatchConfig",
    "BatchResult",
    "PageItem",
    "generate_all",
    "static_params",
    "work_list",
]
