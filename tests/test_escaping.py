from __future__ import annotations

from html.parser import HTMLParser

from hypothesis import given
from hypothesis import strategies as st

from html_header.escaping import create_tag, escape_attr, escape_text


class _AttrCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.attrs: dict[str, str | None] = {}

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.attrs.update(attrs)


def _reparse(tag: str) -> dict[str, str | None]:
    parser = _AttrCollector()
    parser.feed(tag)
    parser.close()
    return parser.attrs


def test_create_tag_keeps_attribute_order() -> None:
    tag = create_tag("meta", {"name": "robots", "content": "noindex"})
    assert tag == '<meta name="robots" content="noindex">'


def test_create_tag_skips_none_values() -> None:
    assert create_tag("link", {"rel": "icon", "href": None}) == '<link rel="icon">'


def test_create_tag_without_attributes() -> None:
    assert create_tag("br") == "<br>"


def test_escape_attr_escapes_quotes() -> None:
    assert escape_attr('say "hi"') == "say &quot;hi&quot;"
    assert escape_attr("it's") == "it&#x27;s"
    assert escape_attr("a<b>&c") == "a&lt;b&gt;&amp;c"


def test_escape_attr_pads_lone_backtick() -> None:
    assert escape_attr("`") == "` "
    assert escape_attr("x`y") == "x`y "


def test_escape_attr_leaves_backtick_with_space_or_quote_alone() -> None:
    assert escape_attr("a `b") == "a `b"
    assert escape_attr("`<") == "`&lt;"


def test_escape_text_leaves_quotes() -> None:
    assert escape_text('a < b & "c"') == 'a &lt; b &amp; "c"'


def test_escape_substitutes_lone_surrogates() -> None:
    assert escape_text("a\ud800b") == "a\ufffdb"
    assert escape_attr("a\udfffb") == "a\ufffdb"


def test_escaped_quote_reparses_to_original() -> None:
    value = 'He said "stop" & left'
    tag = create_tag("meta", {"content": value})
    assert "&quot;" in tag
    assert _reparse(tag)["content"] == value


@given(
    value=st.text(
        alphabet=st.characters(blacklist_categories=("Cs", "Cc")),
        max_size=40,
    )
)
def test_attribute_escaping_round_trips(value: str) -> None:
    expected = value
    if "`" in value and not set(" <>\"'") & set(value):
        expected += " "
    assert _reparse(create_tag("meta", {"content": value}))["content"] == expected
