"""Per-locale, per-tool content records.

The store is a flat `(tool_id, locale) -> LocaleContent` map built once from
nested `{locale: {tool_id: content}}` data. It knows nothing about fallback;
that rule lives in the resolver.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from toolcatalog.foundation.core import LocaleContent

ContentKey = tuple[str, str]  # (tool_id, locale)


class LocaleContentStore:
    """Read-only content lookup keyed by (tool_id, locale)."""

    __slots__ = ("_records", "_locales")

    def __init__(self, content: Mapping[str, Mapping[str, LocaleContent]]) -> None:
        records: dict[ContentKey, LocaleContent] = {}
        for locale, by_tool in content.items():
            for tool_id, record in by_tool.items():
                records[(tool_id, str(locale))] = record
        self._records = MappingProxyType(records)
        self._locales = tuple(str(loc) for loc in content)

    @classmethod
    def from_records(cls, records: Mapping[ContentKey, LocaleContent]) -> LocaleContentStore:
        nested: dict[str, dict[str, LocaleContent]] = {}
        for (tool_id, locale), record in records.items():
            nested.setdefault(locale, {})[tool_id] = record
        return cls(nested)

    def get(self, tool_id: str, locale: str) -> LocaleContent | None:
        return self._records.get((tool_id, locale))

    def locales(self) -> tuple[str, ...]:
        """Locales that have at least one record, in load order."""
        return self._locales

    def tool_ids(self, locale: str | None = None) -> frozenset[str]:
        """Tool ids with content, optionally restricted to one locale."""
        return frozenset(t for t, loc in self._records if locale is None or loc == locale)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ContentKey]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"LocaleContentStore({len(self._records)} records, locales={list(self._locales)})"
