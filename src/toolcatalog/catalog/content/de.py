"""German tool copy. Tools missing here (e.g. sign-pdf) fall back to English."""

from __future__ import annotations

from typing import Final

from toolcatalog.foundation.core import FAQItem, LocaleContent

CONTENT: Final[dict[str, LocaleContent]] = {
    "edit-pdf": LocaleContent(
        title="PDF bearbeiten",
        meta_description="PDF-Dateien online bearbeiten: kommentieren, markieren, schwärzen und Formen oder Bilder einfügen.",
        description="Öffnen Sie ein PDF, versehen Sie es mit Markierungen, Kommentaren, Formen und Bildern, "
                    "schwärzen Sie vertrauliche Stellen und laden Sie die Datei herunter.",
        keywords=("pdf bearbeiten", "pdf kommentieren"),
        faq=(
            FAQItem(question="Werden meine Dateien hochgeladen?",
                    answer="Nein. Die Datei wird in Ihrem Browser verarbeitet und verlässt Ihr Gerät nicht."),
        ),
    ),
    "crop-pdf": LocaleContent(
        title="PDF zuschneiden",
        meta_description="PDF-Seiten online zuschneiden: Ränder entfernen oder einen eigenen Bereich festlegen.",
        keywords=("pdf zuschneiden",),
    ),
    "page-numbers": LocaleContent(
        title="Seitenzahlen zum PDF hinzufügen",
        meta_description="Seitenzahlen mit eigener Position, eigenem Format und Startwert in PDF-Dateien einfügen.",
        faq=(
            FAQItem(question="Kann ich das Deckblatt überspringen?",
                    answer="Ja. Geben Sie die Seiten an, die übersprungen werden sollen."),
        ),
    ),
    "add-watermark": LocaleContent(
        title="Wasserzeichen zum PDF hinzufügen",
        meta_description="Text- oder Bildwasserzeichen mit Position, Deckkraft und Drehung in PDF-Seiten einfügen.",
    ),
    "form-filler": LocaleContent(
        title="PDF-Formulare ausfüllen",
        meta_description="PDF-Formularfelder online ausfüllen, speichern und das fertige Formular exportieren.",
    ),
}
