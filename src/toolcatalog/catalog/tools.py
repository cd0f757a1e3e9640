"""Tool definitions shipped with the site.

Each tool has a unique id and slug, exactly one category and at least two
related tools. No tool sets a file size limit.
"""

from __future__ import annotations

from typing import Final

from toolcatalog.foundation.core import UNBOUNDED, Tool, ToolCategory

_PDF = (".pdf",)


def _pdf_tool(tool_id: str, icon: str, features: tuple[str, ...], related: tuple[str, ...]) -> Tool:
    """Single-file PDF -> PDF editing tool."""
    return Tool(
        id=tool_id,
        slug=tool_id,
        icon=icon,
        category=ToolCategory.EDIT_ANNOTATE,
        accepted_formats=_PDF,
        output_format="pdf",
        max_file_size=UNBOUNDED,
        max_files=1,
        features=features,
        related_tools=related,
    )


TOOLS: Final[tuple[Tool, ...]] = (
    _pdf_tool("edit-pdf", "pocket-knife",
              ("annotate", "highlight", "redact", "comment", "shapes", "images", "search"),
              ("sign-pdf", "add-watermark", "form-filler")),
    _pdf_tool("sign-pdf", "pen-tool",
              ("draw-signature", "type-signature", "upload-signature", "multiple-signatures"),
              ("edit-pdf", "form-filler", "add-stamps")),
    _pdf_tool("crop-pdf", "crop",
              ("trim-margins", "custom-crop", "all-pages"),
              ("edit-pdf", "remove-blank-pages", "page-numbers")),
    _pdf_tool("bookmark", "bookmark",
              ("add-bookmarks", "edit-bookmarks", "import-bookmarks", "delete-bookmarks", "extract-bookmarks"),
              ("table-of-contents", "edit-pdf", "page-numbers")),
    _pdf_tool("table-of-contents", "list",
              ("generate-toc", "from-bookmarks", "custom-style"),
              ("bookmark", "page-numbers", "header-footer")),
    _pdf_tool("page-numbers", "list-ordered",
              ("custom-position", "custom-format", "start-number", "skip-pages"),
              ("header-footer", "add-watermark", "table-of-contents")),
    _pdf_tool("add-watermark", "droplets",
              ("text-watermark", "image-watermark", "position", "opacity", "rotation"),
              ("header-footer", "page-numbers", "add-stamps")),
    _pdf_tool("header-footer", "pilcrow",
              ("custom-text", "page-numbers", "date", "position"),
              ("page-numbers", "add-watermark", "table-of-contents")),
    _pdf_tool("invert-colors", "contrast",
              ("dark-mode", "invert-all", "preserve-images"),
              ("background-color", "text-color", "edit-pdf")),
    _pdf_tool("background-color", "palette",
              ("custom-color", "page-range", "opacity"),
              ("invert-colors", "text-color", "add-watermark")),
    _pdf_tool("text-color", "type",
              ("change-text-color", "all-text", "selected-text"),
              ("background-color", "invert-colors", "edit-pdf")),
    _pdf_tool("add-stamps", "stamp",
              ("preset-stamps", "custom-stamps", "position", "opacity"),
              ("sign-pdf", "add-watermark", "edit-pdf")),
    _pdf_tool("remove-annotations", "eraser",
              ("remove-comments", "remove-highlights", "remove-markup"),
              ("edit-pdf", "add-stamps", "form-filler")),
    _pdf_tool("form-filler", "form-input",
              ("fill-fields", "save-form", "export"),
              ("form-creator", "sign-pdf", "edit-pdf")),
    _pdf_tool("form-creator", "layout-grid",
              ("text-fields", "checkboxes", "dropdowns", "drag-drop"),
              ("form-filler", "edit-pdf", "sign-pdf")),
    _pdf_tool("remove-blank-pages", "file-minus-2",
              ("auto-detect", "threshold-setting", "preview"),
              ("crop-pdf", "edit-pdf", "page-numbers")),
)
