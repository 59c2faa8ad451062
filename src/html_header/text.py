from __future__ import annotations

import re
from html.parser import HTMLParser

ELLIPSIS = "\u2026"

# ASCII whitespace and punctuation a cut may stop in front of.
_BOUNDARY = r"[\s!-/:-@\[-`{-~]"
_RULE_RE = re.compile(r"[*\-=]{2,}")
_WS_RE = re.compile(r"\s+")


class _TextOnly(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._chunks: list[str] = []

    def handle_data(self, data: str) -> None:
        self._chunks.append(data)

    def text(self) -> str:
        return "".join(self._chunks)


def strip_tags(text: str) -> str:
    """
    Drop markup tags and comments, keeping the text between them.

    Character references are decoded, so the result is plain text that gets escaped once on output.
    """
    if "<" not in text and "&" not in text:
        return text
    parser = _TextOnly()
    parser.feed(text)
    parser.close()
    return parser.text()


def normalize(text: str | None) -> str:
    s = strip_tags(text or "")
    s = _RULE_RE.sub(" ", s)
    s = _WS_RE.sub(" ", s)
    return s.strip()


def truncate(s: str, max_len: int, ellipsis: str = ELLIPSIS) -> str:
    """
    Shorten `s` to at most `max_len` code points, ellipsis included.

    Prefers cutting right before whitespace or ASCII punctuation; falls back to a hard cut.
    """
    if len(s) <= max_len:
        return s

    budget = max_len - len(ellipsis)
    if budget < 1:
        return ellipsis

    m = re.match(rf"^.{{1,{budget}}}(?={_BOUNDARY})", s, re.DOTALL)
    if m:
        return m.group(0) + ellipsis
    return s[:budget] + ellipsis
