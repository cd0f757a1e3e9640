"""Spanish tool copy."""

from __future__ import annotations

from typing import Final

from toolcatalog.foundation.core import LocaleContent

CONTENT: Final[dict[str, LocaleContent]] = {
    "edit-pdf": LocaleContent(
        title="Editar PDF",
        meta_description="Edita archivos PDF en línea: anota, resalta, censura, comenta y añade formas o imágenes.",
        keywords=("editar pdf",),
    ),
    "sign-pdf": LocaleContent(
        title="Firmar PDF",
        meta_description="Firma documentos PDF en línea dibujando, escribiendo o subiendo tu firma.",
        keywords=("firmar pdf", "firma electrónica"),
    ),
}
