"""Structured-data synthesis: schema.org documents for tool pages."""

from .jsonld import from_json_ld, to_json_ld, to_script_tags
from .phrases import HowToPhrases, how_to_phrases, humanize_feature
from .schemas import (
    SCHEMA_CONTEXT,
    StructuredDataSet,
    page_url,
    synthesize,
    synthesize_all,
    synthesize_application,
    synthesize_breadcrumb,
    synthesize_faq,
    synthesize_how_to,
    synthesize_web_page,
)

__all__ = [
    # Documents
    "synthesize_application", "synthesize_faq", "synthesize_how_to", "synthesize_web_page", "synthesize_breadcrumb",
    "synthesize", "synthesize_all", "StructuredDataSet", "page_url", "SCHEMA_CONTEXT",
    # Phrases
    "HowToPhrases", "how_to_phrases", "humanize_feature",
    # Encoding
    "to_json_ld", "to_script_tags", "from_json_ld",
]
