"""Catalog entities: tool definitions and their per-locale content.

Every model is frozen, so instances built at startup can be shared freely
between the resolver, the synthesizer and batch workers.

Example:
    >>> tool = Tool(
    ...     id="crop-pdf", slug="crop-pdf", icon="crop",
    ...     category=ToolCategory.EDIT_ANNOTATE,
    ...     accepted_formats=(".pdf",), output_format="pdf",
    ...     features=("trim-margins",), related_tools=("edit-pdf", "page-numbers"),
    ... )
    >>> tool.is_unbounded
    True
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator, model_validator

UNBOUNDED: Final = "unbounded"

_KEBAB = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
_MIN_RELATED = 2


class ToolCategory(StrEnum):
    """Closed set of tool categories. A tool belongs to exactly one."""
    EDIT_ANNOTATE = "edit-annotate"
    ORGANIZE_MANAGE = "organize-manage"
    CONVERT_TO_PDF = "convert-to-pdf"
    CONVERT_FROM_PDF = "convert-from-pdf"
    OPTIMIZE_REPAIR = "optimize-repair"
    SECURE_PDF = "secure-pdf"


class Tool(BaseModel):
    """Static definition of one document-editing tool.

    Attributes:
        id: Stable domain key, unique across the registry
        slug: URL-safe routing key, unique across the registry
        icon: Icon identifier passed through to the renderer
        category: Single category from ToolCategory
        accepted_formats: Accepted file extensions (".pdf"), non-empty
        output_format: Output format identifier
        max_file_size: Byte limit or UNBOUNDED
        max_files: Files per run, at least 1
        features: Display feature tags, non-empty
        related_tools: Ordered ids of related tools (>= 2, no self, no duplicates)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={
            "title": "Tool",
            "examples": [{
                "id": "sign-pdf",
                "slug": "sign-pdf",
                "category": "edit-annotate",
                "accepted_formats": [".pdf"],
                "output_format": "pdf",
                "features": ["draw-signature"],
                "related_tools": ["edit-pdf", "form-filler"],
            }],
        },
    )

    id: Annotated[str, Field(pattern=_KEBAB, description="Stable tool identifier")]
    slug: Annotated[str, Field(pattern=_KEBAB, description="URL routing key")]
    icon: str = Field(default="file", description="Icon identifier for the renderer")
    category: ToolCategory
    accepted_formats: Annotated[tuple[str, ...], Field(min_length=1)]
    output_format: Annotated[str, Field(min_length=1)]
    max_file_size: PositiveInt | Literal["unbounded"] = UNBOUNDED
    max_files: PositiveInt = 1
    features: Annotated[tuple[str, ...], Field(min_length=1)]
    related_tools: tuple[str, ...]

    @field_validator("accepted_formats")
    @classmethod
    def _check_formats(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(ext.lower() for ext in v)
        if bad := [ext for ext in normalized if not ext.startswith(".") or len(ext) < 2]:
            raise ValueError(f"extensions must look like '.pdf', got {bad}")
        if len(set(normalized)) != len(normalized):
            raise ValueError("accepted_formats contains duplicates")
        return normalized

    @model_validator(mode="after")
    def _check_related(self) -> Tool:
        related = self.related_tools
        if len(related) < _MIN_RELATED:
            raise ValueError(f"tool '{self.id}' needs at least {_MIN_RELATED} related tools, got {len(related)}")
        if self.id in related:
            raise ValueError(f"tool '{self.id}' lists itself as related")
        if len(set(related)) != len(related):
            raise ValueError(f"tool '{self.id}' has duplicate related tools")
        return self

    @property
    def is_unbounded(self) -> bool:
        """True when the tool has no file size limit."""
        return self.max_file_size == UNBOUNDED

    def accepts(self, extension: str) -> bool:
        """Check an extension (with or without the leading dot) against accepted_formats."""
        ext = extension.lower()
        return (ext if ext.startswith(".") else f".{ext}") in self.accepted_formats


class FAQItem(BaseModel):
    """One question/answer pair shown on a tool page."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    question: Annotated[str, Field(min_length=1)]
    answer: Annotated[str, Field(min_length=1)]


class LocaleContent(BaseModel):
    """Localized copy for a single tool in a single locale.

    Content resolution is all-or-nothing: a record is used whole or not at all,
    fields are never merged across locales.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    title: Annotated[str, Field(min_length=1)]
    meta_description: Annotated[str, Field(min_length=1)]
    description: Annotated[str, Field(min_length=1, description="Usage description, defaults to meta_description")]
    keywords: tuple[str, ...] = ()
    faq: tuple[FAQItem, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _default_description(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("description") and data.get("meta_description"):
            return {**data, "description": data["meta_description"]}
        return data

    @property
    def has_faq(self) -> bool:
        return bool(self.faq)


class RelatedToolSummary(BaseModel):
    """Title and description of a related tool, resolved in the page locale."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class SiteInfo(BaseModel):
    """Site identity used to build canonical URLs in structured data."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: Annotated[str, Field(pattern=r"^https?://\S+$")] = "https://example.com"
    name: Annotated[str, Field(min_length=1)] = "PDF Tools"

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def url(self, *segments: str) -> str:
        """Join path segments onto the base URL, skipping empty ones."""
        path = "/".join(s.strip("/") for s in segments if s and s.strip("/"))
        return f"{self.base_url}/{path}" if path else self.base_url


DEFAULT_SITE: Final = SiteInfo()
