"""JSON-LD encoding for embedding documents in a page.

orjson keeps dict insertion order, so a document always encodes to the same
bytes. `<`, `>` and `&` are escaped so the payload cannot close the script
element it is embedded in.
"""

from __future__ import annotations

from collections.abc import Iterable

import orjson

from toolcatalog.foundation.core import JsonDict

_ESCAPES = str.maketrans({"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"})


def to_json_ld(document: JsonDict, *, pretty: bool = False) -> str:
    """Encode one document as script-safe JSON text."""
    option = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(document, option=option).decode().translate(_ESCAPES)


def to_script_tags(documents: Iterable[JsonDict]) -> str:
    """One `application/ld+json` script element per document, newline separated."""
    return "\n".join(f'<script type="application/ld+json">{to_json_ld(d)}</script>' for d in documents)


def from_json_ld(text: str | bytes) -> JsonDict:
    """Decode JSON-LD text produced by to_json_ld()."""
    return orjson.loads(text)
