"""Immutable registry of tool definitions.

The registry provides:
- Lookup by id and by slug (O(1), maps built once at construction)
- Category filtering in registration order
- A curated, explicitly ordered "popular tools" view
- Fail-closed lookups: unknown keys yield None, never an exception

Construction is the only point where the catalog can be rejected: duplicate
ids or slugs raise CatalogException. Everything else about a loaded registry
is read-only for the life of the process.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType
from typing import Final

from toolcatalog.foundation.core import Tool, ToolCategory
from toolcatalog.foundation.errors import CatalogException, ErrorCode

POPULAR_TOOL_IDS: Final[tuple[str, ...]] = (
    "edit-pdf",
    "sign-pdf",
    "crop-pdf",
    "page-numbers",
    "add-watermark",
    "form-filler",
)


class ToolRegistry:
    """Read-only catalog of tools keyed by id and slug.

    Example:
        >>> registry = ToolRegistry(TOOLS)
        >>> registry.get_tool_by_slug("crop-pdf").id
        'crop-pdf'
        >>> registry.get_tool_by_id("ghost-tool") is None
        True
        >>> [t.id for t in registry.get_popular_tools(["edit-pdf", "ghost-tool", "sign-pdf"])]
        ['edit-pdf', 'sign-pdf']
    """

    __slots__ = ("_tools", "_by_id", "_by_slug", "_by_category", "_popular_ids")

    def __init__(self, tools: Iterable[Tool], *, popular_ids: Sequence[str] = POPULAR_TOOL_IDS) -> None:
        ordered = tuple(tools)
        by_id: dict[str, Tool] = {}
        by_slug: dict[str, Tool] = {}
        by_category: dict[ToolCategory, list[Tool]] = {}
        for tool in ordered:
            if tool.id in by_id:
                raise CatalogException.create(f"Duplicate tool id '{tool.id}'", ErrorCode.INVALID_CATALOG, tool_id=tool.id)
            if (other := by_slug.get(tool.slug)) is not None:
                raise CatalogException.create(
                    f"Slug '{tool.slug}' used by both '{other.id}' and '{tool.id}'",
                    ErrorCode.INVALID_CATALOG,
                    tool_id=tool.id,
                )
            by_id[tool.id] = by_slug[tool.slug] = tool
            by_category.setdefault(tool.category, []).append(tool)

        self._tools = ordered
        self._by_id = MappingProxyType(by_id)
        self._by_slug = MappingProxyType(by_slug)
        self._by_category = MappingProxyType({c: tuple(ts) for c, ts in by_category.items()})
        self._popular_ids = tuple(popular_ids)

    # ─────────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────────

    def get_tool_by_id(self, tool_id: str) -> Tool | None:
        return self._by_id.get(tool_id)

    def get_tool_by_slug(self, slug: str) -> Tool | None:
        return self._by_slug.get(slug)

    def exists(self, tool_id: str) -> bool:
        return tool_id in self._by_id

    def get_tools_by_category(self, category: ToolCategory | str) -> tuple[Tool, ...]:
        """Tools in `category`, registration order. Unknown categories give ()."""
        try:
            key = ToolCategory(category)
        except ValueError:
            return ()
        return self._by_category.get(key, ())

    # ─────────────────────────────────────────────────────────────────
    # Listing
    # ─────────────────────────────────────────────────────────────────

    def list_all(self) -> tuple[Tool, ...]:
        """Every tool in registration order."""
        return self._tools

    def ids(self) -> tuple[str, ...]:
        return tuple(t.id for t in self._tools)

    def categories(self) -> tuple[ToolCategory, ...]:
        """Categories that have at least one tool, in first-seen order."""
        return tuple(self._by_category)

    def get_popular_tools(self, ids: Sequence[str] | None = None) -> tuple[Tool, ...]:
        """Resolve a curated id list in its own order, skipping unknown ids.

        Args:
            ids: Curated ids; defaults to the list the registry was built with
        """
        return tuple(t for tool_id in (self._popular_ids if ids is None else ids)
                     if (t := self.get_tool_by_id(tool_id)) is not None)

    @property
    def popular_ids(self) -> tuple[str, ...]:
        return self._popular_ids

    def describe(self) -> str:
        """Markdown summary grouped by category, for CLI and debugging output."""
        lines: list[str] = []
        for category, tools in self._by_category.items():
            lines.append(f"**{category}**")
            lines += [f"- {t.id} (/{t.slug}): {', '.join(t.features)}" for t in tools]
        return "\n".join(lines)

    # ─────────────────────────────────────────────────────────────────
    # Container protocol
    # ─────────────────────────────────────────────────────────────────

    def __getitem__(self, tool_id: str) -> Tool:
        """Get tool by id, raises KeyError if not found."""
        return self._by_id[tool_id]

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._by_id

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools)

    def __repr__(self) -> str:
        return f"ToolRegistry({len(self._tools)} tools)"
