"""Structured errors for catalog resolution.

Not-found outcomes are returned as `Err(CatalogError)` values, never raised.
`CatalogException` is reserved for broken catalog data detected while building
the registry or wiring interfaces.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ErrorCode(StrEnum):
    """Machine-readable codes for resolution failures and integrity findings."""
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    CONTENT_NOT_FOUND = "CONTENT_NOT_FOUND"
    INVALID_CATALOG = "INVALID_CATALOG"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    UNBOUNDED_FILE_SIZE = "UNBOUNDED_FILE_SIZE"
    MISSING_DEFAULT_CONTENT = "MISSING_DEFAULT_CONTENT"
    ORPHAN_CONTENT = "ORPHAN_CONTENT"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"


_NOT_FOUND_CODES: frozenset[ErrorCode] = frozenset({ErrorCode.TOOL_NOT_FOUND, ErrorCode.CONTENT_NOT_FOUND})


class CatalogError(BaseModel):
    """Structured failure for a (tool, locale) request.

    Attributes:
        message: Human-readable message
        code: Machine-readable classification
        tool_id: Requested tool id or slug, when known
        locale: Requested locale, when known
        details: Optional extra info (e.g., a stack trace)
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "Catalog Error",
            "examples": [{
                "message": "Tool 'ghost-tool' not found in registry",
                "code": "TOOL_NOT_FOUND",
                "tool_id": "ghost-tool",
                "locale": "en",
            }],
        },
    )

    message: Annotated[str, Field(min_length=1)]
    code: ErrorCode = ErrorCode.UNKNOWN
    tool_id: str | None = None
    locale: str | None = None
    details: str | None = Field(default=None, repr=False)

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        return str(v) if isinstance(v, Exception) else v

    @computed_field
    @property
    def is_not_found(self) -> bool:
        """Whether the page layer should answer with a not-found response."""
        return self.code in _NOT_FOUND_CODES

    @classmethod
    def create(
        cls,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        tool_id: str | None = None,
        locale: str | None = None,
        details: str | None = None,
    ) -> Self:
        return cls(message=message, code=code, tool_id=tool_id, locale=locale, details=details)

    @classmethod
    def tool_not_found(cls, tool_id: str, locale: str | None = None) -> Self:
        return cls(message=f"Tool '{tool_id}' not found in registry", code=ErrorCode.TOOL_NOT_FOUND,
                   tool_id=tool_id, locale=locale)

    @classmethod
    def content_not_found(cls, tool_id: str, locale: str, default_locale: str) -> Self:
        return cls(
            message=f"No content for tool '{tool_id}' in '{locale}' or default locale '{default_locale}'",
            code=ErrorCode.CONTENT_NOT_FOUND,
            tool_id=tool_id,
            locale=locale,
        )

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        context: str = "",
        *,
        tool_id: str | None = None,
        locale: str | None = None,
        include_trace: bool = True,
    ) -> Self:
        return cls(
            message=f"{context}: {exc}" if context else str(exc),
            code=ErrorCode.UNKNOWN,
            tool_id=tool_id,
            locale=locale,
            details=traceback.format_exc() if include_trace else None,
        )

    def render(self) -> str:
        """Single-line summary for logs and CLI output."""
        where = "/".join(p for p in (self.locale, self.tool_id) if p)
        return f"[{self.code}] {self.message}" + (f" ({where})" if where else "")

    __str__ = render


class CatalogException(Exception):
    """Exception wrapping a CatalogError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: CatalogError) -> None:
        self.error = error
        super().__init__(error.message)

    @classmethod
    def create(cls, message: str, code: ErrorCode = ErrorCode.INVALID_CATALOG, *, tool_id: str | None = None) -> Self:
        return cls(CatalogError(message=message, code=code, tool_id=tool_id))
