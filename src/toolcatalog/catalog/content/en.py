"""English tool copy. English is the default locale, so every tool has a record here."""

from __future__ import annotations

from typing import Final

from toolcatalog.foundation.core import FAQItem, LocaleContent


def _faq(*pairs: tuple[str, str]) -> tuple[FAQItem, ...]:
    return tuple(FAQItem(question=q, answer=a) for q, a in pairs)


_PRIVACY = ("Are my files uploaded to a server?",
            "No. The file is processed in your browser and never leaves your device.")
_FREE = ("Is this tool free?", "Yes. There is no sign-up, watermark or usage limit.")


CONTENT: Final[dict[str, LocaleContent]] = {
    "edit-pdf": LocaleContent(
        title="Edit PDF",
        meta_description="Edit PDF files online: annotate, highlight, redact, comment and add shapes or images.",
        description="Open a PDF, mark it up with highlights, comments, shapes and images, redact sensitive text, "
                    "then download the edited file.",
        keywords=("edit pdf", "annotate pdf", "pdf editor"),
        faq=_faq(
            ("Can I redact text permanently?", "Yes. Redacted areas are flattened into the page when you download."),
            _PRIVACY,
            _FREE,
        ),
    ),
    "sign-pdf": LocaleContent(
        title="Sign PDF",
        meta_description="Sign PDF documents online by drawing, typing or uploading your signature.",
        description="Create a signature by drawing, typing or uploading an image, place it on any page and "
                    "download the signed document.",
        keywords=("sign pdf", "e-signature", "pdf signature"),
        faq=_faq(
            ("Can I add more than one signature?", "Yes. Place as many signatures as you need, on any page."),
            _PRIVACY,
        ),
    ),
    "crop-pdf": LocaleContent(
        title="Crop PDF",
        meta_description="Crop PDF pages online: trim margins or set a custom crop area for all pages.",
        description="Trim white margins automatically or draw a custom crop box, apply it to one or all pages "
                    "and download the cropped PDF.",
        keywords=("crop pdf", "trim pdf margins"),
        faq=_faq(
            ("Does cropping delete content?", "Content outside the crop box is hidden, not removed."),
            _FREE,
        ),
    ),
    "bookmark": LocaleContent(
        title="PDF Bookmarks",
        meta_description="Add, edit, import, delete and extract PDF bookmarks online.",
        description="Build or tidy the bookmark outline of a PDF, import bookmarks from a file or extract the "
                    "existing ones.",
        keywords=("pdf bookmarks", "pdf outline"),
        faq=_faq(("Can I nest bookmarks?", "Yes. Drag a bookmark onto another to create a child entry.")),
    ),
    "table-of-contents": LocaleContent(
        title="PDF Table of Contents",
        meta_description="Generate a table of contents page for your PDF, from bookmarks or custom entries.",
        description="Generate a linked table of contents from existing bookmarks or your own entries and "
                    "insert it at the start of the document.",
        keywords=("pdf table of contents", "pdf toc"),
        faq=_faq(("Are the entries clickable?", "Yes. Every entry links to its target page.")),
    ),
    "page-numbers": LocaleContent(
        title="Add Page Numbers to PDF",
        meta_description="Add page numbers to PDF files with custom position, format and starting number.",
        description="Choose where numbers appear, pick a format, set the first number and skip pages such as "
                    "a cover, then download the numbered PDF.",
        keywords=("pdf page numbers", "number pdf pages"),
        faq=_faq(
            ("Can I skip the cover page?", "Yes. List the pages to skip and numbering continues after them."),
            _FREE,
        ),
    ),
    "add-watermark": LocaleContent(
        title="Add Watermark to PDF",
        meta_description="Add a text or image watermark to PDF pages with custom position, opacity and rotation.",
        description="Stamp text or an image across your pages, adjusting position, opacity and rotation "
                    "before downloading.",
        keywords=("pdf watermark", "watermark pdf"),
        faq=_faq(("Can I use my logo?", "Yes. Upload a PNG or JPG and use it as an image watermark.")),
    ),
    "header-footer": LocaleContent(
        title="PDF Header and Footer",
        meta_description="Add headers and footers with custom text, page numbers and dates to PDF files.",
        description="Place custom text, page numbers or the date in the header or footer of every page.",
        keywords=("pdf header", "pdf footer"),
        faq=_faq(("Can headers differ on odd and even pages?", "Not yet. The same header applies to every page.")),
    ),
    "invert-colors": LocaleContent(
        title="Invert PDF Colors",
        meta_description="Invert PDF colors for a dark-mode reading copy, optionally preserving images.",
        description="Turn a bright document into a dark-mode copy by inverting colors, with the option to keep "
                    "images unchanged.",
        keywords=("invert pdf colors", "pdf dark mode"),
    ),
    "background-color": LocaleContent(
        title="Change PDF Background Color",
        meta_description="Change the background color of PDF pages with custom color, page range and opacity.",
        description="Pick a background color, choose which pages to apply it to and how strong it should be.",
        keywords=("pdf background color",),
        faq=_faq(_PRIVACY),
    ),
    "text-color": LocaleContent(
        title="Change PDF Text Color",
        meta_description="Change the color of text in a PDF, for all text or a selection.",
        description="Recolor all text in the document or only the passages you select.",
        keywords=("pdf text color",),
    ),
    "add-stamps": LocaleContent(
        title="Add Stamps to PDF",
        meta_description="Add preset or custom stamps such as Approved or Confidential to PDF pages.",
        description="Choose a preset stamp or design your own, then position it and set its opacity.",
        keywords=("pdf stamp", "approved stamp"),
        faq=_faq(("Which preset stamps are available?", "Approved, Rejected, Draft, Confidential and Final.")),
    ),
    "remove-annotations": LocaleContent(
        title="Remove PDF Annotations",
        meta_description="Remove comments, highlights and markup from PDF files in one step.",
        description="Strip comments, highlights and other markup to get a clean copy of the document.",
        keywords=("remove pdf annotations", "remove pdf comments"),
        faq=_faq(("Is the original text affected?", "No. Only annotations are removed, page content stays.")),
    ),
    "form-filler": LocaleContent(
        title="Fill PDF Forms",
        meta_description="Fill in PDF form fields online, save your progress and export the completed form.",
        description="Type into the form fields of any fillable PDF, save the form and export the result.",
        keywords=("fill pdf form", "pdf form filler"),
        faq=_faq(
            ("What if my PDF has no form fields?", "Use Form Creator to add fields first."),
            _PRIVACY,
        ),
    ),
    "form-creator": LocaleContent(
        title="Create PDF Forms",
        meta_description="Create fillable PDF forms with text fields, checkboxes and dropdowns by drag and drop.",
        description="Drag text fields, checkboxes and dropdowns onto your pages to turn a PDF into a fillable form.",
        keywords=("create pdf form", "fillable pdf"),
        faq=_faq(("Can others fill the form in any reader?", "Yes. Fields are standard AcroForm fields.")),
    ),
    "remove-blank-pages": LocaleContent(
        title="Remove Blank Pages from PDF",
        meta_description="Detect and remove blank pages from PDF files with an adjustable threshold.",
        description="Find empty pages automatically, tune the blankness threshold, preview and remove them.",
        keywords=("remove blank pages", "delete empty pdf pages"),
        faq=_faq(("What counts as blank?", "Pages whose ink coverage is under the threshold you set.")),
    ),
}
