"""Tool id -> interface component dispatch.

Pages look up the component that renders a tool's working UI here. Ids
without a registered component get the "coming soon" placeholder, so
resolve() never fails.

Example:
    >>> interfaces = default_interfaces()
    >>> interfaces.resolve("crop-pdf").component
    'CropPDFTool'
    >>> interfaces.resolve("merge-pdf").is_placeholder
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict

from toolcatalog.foundation.errors import CatalogException, ErrorCode

COMING_SOON: Final = "comingSoon"


class ToolInterface(BaseModel):
    """Component name to mount for a tool."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    component: str
    tool_id: str

    @property
    def is_placeholder(self) -> bool:
        return self.component == COMING_SOON


class InterfaceRegistry:
    """Mapping of tool id to ToolInterface, with a placeholder default."""

    __slots__ = ("_interfaces", "_default")

    def __init__(self, default_component: str = COMING_SOON) -> None:
        self._interfaces: dict[str, ToolInterface] = {}
        self._default = default_component

    def register(self, tool_id: str, component: str) -> ToolInterface:
        """Register `component` for `tool_id`.

        Raises:
            CatalogException: tool_id already has a component
        """
        if tool_id in self._interfaces:
            raise CatalogException.create(
                f"Interface for '{tool_id}' already registered as '{self._interfaces[tool_id].component}'",
                ErrorCode.INVALID_CATALOG,
                tool_id=tool_id,
            )
        self._interfaces[tool_id] = iface = ToolInterface(component=component, tool_id=tool_id)
        return iface

    def resolve(self, tool_id: str) -> ToolInterface:
        return self._interfaces.get(tool_id) or ToolInterface(component=self._default, tool_id=tool_id)

    def missing(self, tool_ids: Iterable[str]) -> tuple[str, ...]:
        """Ids from `tool_ids` that would fall through to the placeholder."""
        return tuple(t for t in tool_ids if t not in self._interfaces)

    def as_mapping(self) -> Mapping[str, str]:
        return {t: i.component for t, i in self._interfaces.items()}

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._interfaces

    def __len__(self) -> int:
        return len(self._interfaces)

    def __iter__(self) -> Iterator[ToolInterface]:
        return iter(self._interfaces.values())

    def __repr__(self) -> str:
        return f"InterfaceRegistry({len(self._interfaces)} components, default={self._default!r})"


_COMPONENTS: Final = (
    ("edit-pdf", "EditPDFTool"),
    ("sign-pdf", "SignPDFTool"),
    ("crop-pdf", "CropPDFTool"),
    ("bookmark", "BookmarkTool"),
    ("table-of-contents", "TableOfContentsTool"),
    ("page-numbers", "PageNumbersTool"),
    ("add-watermark", "WatermarkTool"),
    ("header-footer", "HeaderFooterTool"),
    ("invert-colors", "InvertColorsTool"),
    ("background-color", "BackgroundColorTool"),
    ("text-color", "TextColorTool"),
    ("add-stamps", "StampsTool"),
    ("remove-annotations", "RemoveAnnotationsTool"),
    ("form-filler", "FormFillerTool"),
    ("form-creator", "FormCreatorTool"),
    ("remove-blank-pages", "RemoveBlankPagesTool"),
)


def default_interfaces() -> InterfaceRegistry:
    """Registry wired with the component of every shipped tool."""
    registry = InterfaceRegistry()
    for tool_id, component in _COMPONENTS:
        registry.register(tool_id, component)
    return registry
