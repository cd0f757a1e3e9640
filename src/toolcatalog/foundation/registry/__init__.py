"""Tool registry and catalog integrity checks."""

from .integrity import IntegrityIssue, IntegrityReport, check_integrity
from .registry import POPULAR_TOOL_IDS, ToolRegistry

__all__ = ["ToolRegistry", "POPULAR_TOOL_IDS", "IntegrityIssue", "IntegrityReport", "check_integrity"]
