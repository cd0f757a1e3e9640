"""schema.org document synthesis for tool pages.

Each function maps `(tool, content, locale, site)` to one JSON-LD document
(a plain dict). The functions are pure: no global state, no I/O, and a fixed
key order so equal inputs serialize to identical bytes. Documents reference
each other through `@id` anchors on the canonical page URL.

Document kinds:
    SoftwareApplication  always
    FAQPage              only when content.faq is non-empty (else None)
    HowTo                always, steps synthesized from the tool definition
    WebPage              always
    BreadcrumbList       always, Home -> Tools -> tool
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from toolcatalog.foundation.core import DEFAULT_SITE, JsonDict, LocaleContent, SiteInfo, Tool

from .phrases import how_to_phrases, humanize_feature

if TYPE_CHECKING:
    from toolcatalog.content import ResolvedToolView

SCHEMA_CONTEXT: Final = "https://schema.org"
TOOLS_SEGMENT: Final = "tools"
HOME_LABEL: Final = "Home"
TOOLS_LABEL: Final = "Tools"
HOW_TO_TOTAL_TIME: Final = "PT1M"


# ─────────────────────────────────────────────────────────────────────────────
# URLs
# ─────────────────────────────────────────────────────────────────────────────


def page_url(tool: Tool, locale: str, site: SiteInfo = DEFAULT_SITE) -> str:
    """Canonical tool page URL: {base}/{locale}/tools/{slug}."""
    return site.url(locale, TOOLS_SEGMENT, tool.slug)


def _anchor(tool: Tool, locale: str, site: SiteInfo, name: str) -> str:
    return f"{page_url(tool, locale, site)}#{name}"


# ─────────────────────────────────────────────────────────────────────────────
# Documents
# ─────────────────────────────────────────────────────────────────────────────


def synthesize_application(tool: Tool, content: LocaleContent, locale: str, site: SiteInfo = DEFAULT_SITE) -> JsonDict:
    """SoftwareApplication: identity, category, description and features."""
    doc: JsonDict = {
        "@context": SCHEMA_CONTEXT,
        "@type": "SoftwareApplication",
        "@id": _anchor(tool, locale, site, "application"),
        "name": content.title,
        "description": content.meta_description,
        "url": page_url(tool, locale, site),
        "applicationCategory": "BusinessApplication",
        "applicationSubCategory": str(tool.category),
        "operatingSystem": "Web",
        "browserRequirements": "Requires JavaScript. Requires HTML5.",
        "inLanguage": locale,
        "featureList": list(tool.features),
        "fileFormat": list(tool.accepted_formats),
        "isAccessibleForFree": True,
        "offers": {"@type": "Offer", "price": "0", "priceCurrency": "USD"},
        "provider": {"@type": "Organization", "name": site.name, "url": site.base_url},
    }
    if content.keywords:
        doc["keywords"] = ", ".join(content.keywords)
    return doc


def synthesize_faq(tool: Tool, content: LocaleContent, locale: str, site: SiteInfo = DEFAULT_SITE) -> JsonDict | None:
    """FAQPage with one Question per pair, or None when there is no FAQ content."""
    if not content.faq:
        return None
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "@id": _anchor(tool, locale, site, "faq"),
        "inLanguage": locale,
        "mainEntity": [
            {"@type": "Question", "name": item.question, "acceptedAnswer": {"@type": "Answer", "text": item.answer}}
            for item in content.faq
        ],
    }


def synthesize_how_to(tool: Tool, content: LocaleContent, locale: str, site: SiteInfo = DEFAULT_SITE) -> JsonDict:
    """HowTo whose steps are derived from the tool: upload, one per feature, download."""
    phrases = how_to_phrases(locale)
    url = page_url(tool, locale, site)
    formats = ", ".join(tool.accepted_formats)
    steps = [(phrases.upload_name, phrases.upload_text.format(formats=formats, max_files=tool.max_files))]
    steps += [(humanize_feature(f), phrases.feature_text.format(feature=humanize_feature(f))) for f in tool.features]
    steps.append((phrases.download_name, phrases.download_text.format(output=tool.output_format.upper())))
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "HowTo",
        "@id": _anchor(tool, locale, site, "howto"),
        "name": phrases.name.format(title=content.title),
        "description": content.description,
        "inLanguage": locale,
        "totalTime": HOW_TO_TOTAL_TIME,
        "supply": [{"@type": "HowToSupply", "name": ext} for ext in tool.accepted_formats],
        "tool": [{"@type": "HowToTool", "name": site.name}],
        "step": [
            {"@type": "HowToStep", "position": i, "name": name, "text": text, "url": f"{url}#step-{i}"}
            for i, (name, text) in enumerate(steps, start=1)
        ],
    }


def synthesize_web_page(tool: Tool, content: LocaleContent, locale: str, site: SiteInfo = DEFAULT_SITE) -> JsonDict:
    """WebPage: title, description, canonical URL and links to the other documents."""
    url = page_url(tool, locale, site)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebPage",
        "@id": url,
        "name": content.title,
        "description": content.meta_description,
        "url": url,
        "inLanguage": locale,
        "isPartOf": {"@type": "WebSite", "name": site.name, "url": site.base_url},
        "breadcrumb": {"@id": _anchor(tool, locale, site, "breadcrumb")},
        "mainEntity": {"@id": _anchor(tool, locale, site, "application")},
    }


def synthesize_breadcrumb(tool: Tool, content: LocaleContent, locale: str, site: SiteInfo = DEFAULT_SITE) -> JsonDict:
    """BreadcrumbList: Home -> Tools -> tool, leaf labelled with the resolved title."""
    trail = (
        (HOME_LABEL, site.url(locale)),
        (TOOLS_LABEL, site.url(locale, TOOLS_SEGMENT)),
        (content.title, page_url(tool, locale, site)),
    )
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "@id": _anchor(tool, locale, site, "breadcrumb"),
        "itemListElement": [
            {"@type": "ListItem", "position": i, "name": name, "item": item}
            for i, (name, item) in enumerate(trail, start=1)
        ],
    }


# ─────────────────────────────────────────────────────────────────────────────
# Full page set
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class StructuredDataSet:
    """All documents for one page. `faq` is None when the content has no FAQ."""

    application: JsonDict
    web_page: JsonDict
    breadcrumb: JsonDict
    how_to: JsonDict
    faq: JsonDict | None = None

    def documents(self) -> list[JsonDict]:
        """Present documents in embedding order: application, page, breadcrumb, FAQ, how-to."""
        docs = [self.application, self.web_page, self.breadcrumb]
        if self.faq is not None:
            docs.append(self.faq)
        docs.append(self.how_to)
        return docs

    def types(self) -> list[str]:
        return [d["@type"] for d in self.documents()]


def synthesize(tool: Tool, content: LocaleContent, locale: str, site: SiteInfo = DEFAULT_SITE) -> StructuredDataSet:
    return StructuredDataSet(
        application=synthesize_application(tool, content, locale, site),
        web_page=synthesize_web_page(tool, content, locale, site),
        breadcrumb=synthesize_breadcrumb(tool, content, locale, site),
        how_to=synthesize_how_to(tool, content, locale, site),
        faq=synthesize_faq(tool, content, locale, site),
    )


def synthesize_all(view: ResolvedToolView, site: SiteInfo = DEFAULT_SITE) -> StructuredDataSet:
    """Documents for a resolved view. Related tools are not used."""
    return synthesize(view.tool, view.content, view.locale, site)
