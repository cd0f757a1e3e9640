"""Shared type aliases for JSON-shaped payloads and locales."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Final, Mapping, Union

# JSON type aliases - Any for recursive slots to keep pydantic resolution simple
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]
JsonMapping = Mapping[str, Any]


class Locale(StrEnum):
    """Closed set of locales the catalog ships content for."""
    EN = "en"
    JA = "ja"
    KO = "ko"
    ES = "es"
    FR = "fr"
    DE = "de"
    ZH = "zh"
    PT = "pt"


DEFAULT_LOCALE: Final = Locale.EN
SUPPORTED_LOCALES: Final[tuple[Locale, ...]] = tuple(Locale)
