from __future__ import annotations

import html
import re
from collections.abc import Mapping

_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")
_UNSAFE_NEAR_BACKTICK = frozenset(" <>\"'")


def _substitute_invalid(s: str) -> str:
    # Lone surrogates cannot be encoded as UTF-8.
    return _SURROGATE_RE.sub("\ufffd", s)


def escape_text(s: str) -> str:
    """Escape element text content (`&`, `<`, `>`); quotes are left alone."""
    return html.escape(_substitute_invalid(s), quote=False)


def escape_attr(s: str) -> str:
    """
    Escape a value for use inside a double-quoted attribute.

    A value holding a backtick but no space, angle bracket or quote gets a trailing space,
    otherwise some innerHTML serializers re-emit it unquoted and the backtick can open a new
    attribute (mXSS).
    """
    if "`" in s and not _UNSAFE_NEAR_BACKTICK.intersection(s):
        s += " "
    return html.escape(_substitute_invalid(s), quote=True)


def create_tag(tag_name: str, attributes: Mapping[str, object | None] | None = None) -> str:
    items = [
        f'{escape_attr(str(key))}="{escape_attr(str(value))}"'
        for key, value in (attributes or {}).items()
        if value is not None
    ]
    if not items:
        return f"<{tag_name}>"
    return f"<{tag_name} {' '.join(items)}>"
