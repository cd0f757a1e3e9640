"""Per-locale tool copy, keyed by locale then tool id.

Locales without a module here (ko, fr, zh, pt) resolve entirely through the
default-locale fallback.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from toolcatalog.foundation.core import Locale, LocaleContent

from . import de, en, es, ja

CONTENT: Final[Mapping[str, Mapping[str, LocaleContent]]] = MappingProxyType({
    Locale.EN: en.CONTENT,
    Locale.JA: ja.CONTENT,
    Locale.ES: es.CONTENT,
    Locale.DE: de.CONTENT,
})

__all__ = ["CONTENT"]
