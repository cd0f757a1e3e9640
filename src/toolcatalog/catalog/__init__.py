"""Shipped catalog data and the Catalog value built from it.

Contents:
    TOOLS: every tool the site offers
    POPULAR_TOOL_IDS: curated ids for the homepage, in display order
    CONTENT: per-locale copy, keyed locale -> tool id
    load_catalog(): build the Catalog from the above and the process settings
"""

from toolcatalog.foundation.registry import POPULAR_TOOL_IDS

from .catalog import Catalog, build_catalog, load_catalog
from .content import CONTENT
from .tools import TOOLS

__all__ = ["TOOLS", "POPULAR_TOOL_IDS", "CONTENT", "Catalog", "build_catalog", "load_catalog"]
