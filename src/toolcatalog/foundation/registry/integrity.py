"""Startup integrity check across the registry and the content store.

Findings are flagged and logged, never raised: a dangling related id or an
unbounded file size is legal catalog data, but worth surfacing once at load.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from toolcatalog.foundation.errors import ErrorCode
from toolcatalog.runtime.observability import BoundLogger, get_logger

if TYPE_CHECKING:
    from toolcatalog.content.store import LocaleContentStore

    from .registry import ToolRegistry

_log = get_logger("toolcatalog.integrity")


@dataclass(frozen=True, slots=True)
class IntegrityIssue:
    code: ErrorCode
    tool_id: str
    detail: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.tool_id}: {self.detail}"


@dataclass(frozen=True, slots=True)
class IntegrityReport:
    """Everything check_integrity() found, in discovery order."""

    issues: tuple[IntegrityIssue, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.issues

    def by_code(self, code: ErrorCode) -> tuple[IntegrityIssue, ...]:
        return tuple(i for i in self.issues if i.code == code)

    def log(self, log: BoundLogger | None = None) -> None:
        """Emit one warning per issue."""
        log = log or _log
        for issue in self.issues:
            log.warning("catalog integrity issue", code=str(issue.code), tool=issue.tool_id, detail=issue.detail)

    def __len__(self) -> int:
        return len(self.issues)

    def __iter__(self) -> Iterator[IntegrityIssue]:
        return iter(self.issues)


def check_integrity(registry: ToolRegistry, store: LocaleContentStore, default_locale: str) -> IntegrityReport:
    """Cross-check tools against each other and against the content store.

    Flags:
        DANGLING_REFERENCE: related id not in the registry
        UNBOUNDED_FILE_SIZE: tool without a file size limit
        MISSING_DEFAULT_CONTENT: tool without a default-locale record
        ORPHAN_CONTENT: content for an unregistered tool id
    """
    issues: list[IntegrityIssue] = []
    for tool in registry:
        issues += [IntegrityIssue(ErrorCode.DANGLING_REFERENCE, tool.id, f"related tool '{rid}' is not registered")
                   for rid in tool.related_tools if not registry.exists(rid)]
        if tool.is_unbounded:
            issues.append(IntegrityIssue(ErrorCode.UNBOUNDED_FILE_SIZE, tool.id, "max_file_size is unbounded"))
        if store.get(tool.id, default_locale) is None:
            issues.append(IntegrityIssue(ErrorCode.MISSING_DEFAULT_CONTENT, tool.id,
                                         f"no content in default locale '{default_locale}'"))
    for tool_id in sorted(store.tool_ids()):
        if not registry.exists(tool_id):
            issues.append(IntegrityIssue(ErrorCode.ORPHAN_CONTENT, tool_id, "content exists for an unregistered tool"))
    return IntegrityReport(tuple(issues))
