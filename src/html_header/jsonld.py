from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from html_header.errors import InvalidInput

# JSON string escapes that keep the payload from closing the surrounding <script>.
_SCRIPT_SAFE = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def encode_jsonld(schema: Mapping[str, Any]) -> str:
    """
    Pretty-printed JSON for a linked-data block.

    Keys keep insertion order and forward slashes stay unescaped. `<`, `>` and `&` can only
    appear inside JSON strings, so swapping them for `\\uXXXX` escapes leaves the value intact.
    """
    try:
        payload = json.dumps(dict(schema), indent=4, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise InvalidInput(f"Invalid json: {e}", code=type(e).__name__) from e

    for raw, escaped in _SCRIPT_SAFE.items():
        payload = payload.replace(raw, escaped)
    return payload


def jsonld_script(schema: Mapping[str, Any]) -> str:
    return '<script type="application/ld+json">\n' + encode_jsonld(schema) + "\n</script>"
