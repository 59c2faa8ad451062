from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from html_header.config import HeaderSettings
from html_header.escaping import create_tag, escape_text
from html_header.groups import Group, group_name
from html_header.jsonld import jsonld_script
from html_header.text import normalize, truncate

logger = logging.getLogger(__name__)

AttributeValue = str | Mapping[str, Any] | None

_KNOWN_GROUPS = frozenset(g.value for g in Group)

# Single key for the groups that are plain ordered sequences (title, json-ld).
_SEQUENCE = ""


class HtmlHeader:
    """
    Builds the contents of an HTML <head> from structured calls.

        header = HtmlHeader()
        header.title("My webpage")
        header.meta_description("Awesome page...")
        header.link("canonical", "https://example.com")
        header.link("alternate", {"hreflang": "cs", "href": "https://example.com/cs"})
        header.jsonld({"@context": "http://schema.org", "@type": "Person", "name": "Jan"})
        html = header.render()

    Tags are grouped (title, meta, og, twitter, link, json-ld) and rendered group by group in
    a configurable order. Registering the same key twice keeps both tags, in insertion order.
    Empty or missing values are ignored, so optional metadata can be passed through unchecked.

    Not safe for concurrent mutation; use one instance per document.
    """

    def __init__(self, settings: HeaderSettings | None = None) -> None:
        self._settings = settings if settings is not None else HeaderSettings()
        self._order: list[str] = [group_name(g) for g in self._settings.order]
        self._tags: dict[str, dict[str, list[str]]] = {}
        self._title: str | None = None
        self._description: str | None = None
        self._automatic_open_graph = self._settings.automatic_open_graph

    def __str__(self) -> str:
        return self.render()

    @property
    def current_title(self) -> str | None:
        return self._title

    @property
    def current_description(self) -> str | None:
        return self._description

    @property
    def order(self) -> tuple[str, ...]:
        return tuple(self._order)

    @property
    def automatic_open_graph(self) -> bool:
        return self._automatic_open_graph

    # --- configuration ---

    def set_custom_ordering_strategy(self, order: Iterable[Group | str]) -> None:
        """Replace the render order. Names outside the known groups simply render nothing."""
        self._order = [group_name(g) for g in order]

    def set_automatic_open_graph(self, enabled: bool) -> None:
        self._automatic_open_graph = enabled

    # --- registration ---

    def title(self, value: str | None) -> None:
        if value is None:
            return
        normalized = normalize(value)
        if not normalized:
            logger.debug("Ignoring empty title")
            return

        self._title = normalized
        self._tags[Group.TITLE.value] = {_SEQUENCE: [f"<title>{escape_text(normalized)}</title>"]}

    def meta_description(self, content: str | None) -> None:
        normalized = normalize(content)
        if not normalized:
            logger.debug("Ignoring empty meta description")
            return

        self._description = self._truncate(normalized, self._settings.description_max_length)
        self.meta("description", normalized)

    def meta(self, key: str, value: AttributeValue) -> None:
        if not value:
            logger.debug("Ignoring empty meta %r", key)
            return

        attributes: dict[str, Any] = {"name": key}
        if isinstance(value, str):
            if key == "description":
                value = self._truncate(value, self._settings.description_max_length)
            attributes["content"] = value
        else:
            attributes.update(value)

        self._add(Group.META, key, create_tag("meta", attributes))

    def og(self, key: str, value: str, prefixed: bool = True) -> None:
        if not value:
            logger.debug("Ignoring empty og %r", key)
            return
        key = f"og:{key}" if prefixed else key
        self._add(Group.OG, key, create_tag("meta", {"property": key, "content": value}))

    def twitter(self, key: str, value: str, prefixed: bool = True) -> None:
        if not value:
            logger.debug("Ignoring empty twitter %r", key)
            return
        key = f"twitter:{key}" if prefixed else key
        self._add(Group.TWITTER, key, create_tag("meta", {"name": key, "content": value}))

    def link(self, key: str, value: AttributeValue) -> None:
        if not value:
            logger.debug("Ignoring empty link %r", key)
            return

        attributes: dict[str, Any] = {"rel": key}
        if isinstance(value, str):
            attributes["href"] = value
        else:
            attributes.update(value)

        self._add(Group.LINK, key, create_tag("link", attributes))

    def jsonld(self, schema: Mapping[str, Any]) -> None:
        """
        Append a JSON-LD <script> block. Every call adds a new block.

        Raises InvalidInput when the schema cannot be serialized; nothing is added in that case.
        """
        if not schema:
            return
        script = jsonld_script(schema)
        self._tags.setdefault(Group.JSON_LD.value, {}).setdefault(_SEQUENCE, []).append(script)

    # --- rendering ---

    def render(self, groups: Iterable[Group | str] | Group | str | None = None) -> str:
        """
        Render every group in the configured order, or only the given groups in the given order.
        """
        if self._automatic_open_graph:
            self._derive_social_tags()

        if groups is None:
            sequence: Iterable[Group | str] = self._order
        elif isinstance(groups, str):
            sequence = [groups]
        else:
            sequence = groups

        return "".join(self._render_group(group_name(g)) for g in sequence).strip()

    def _render_group(self, group: str) -> str:
        if group not in _KNOWN_GROUPS:
            logger.debug("Unknown header group %r renders nothing", group)

        tags = [tag for entries in self._tags.get(group, {}).values() for tag in entries]
        if not tags:
            return ""
        return "\n".join(tags) + "\n"

    def _derive_social_tags(self) -> None:
        """
        Fill in Open Graph / Twitter tags from the stored title and description.

        Every step is skipped when its check key is already present. The twitter:title step is
        keyed on twitter:description, so an explicit twitter:description also suppresses it.
        """
        s = self._settings
        title, description = self._title, self._description

        if title and not self._has(Group.OG, "og:title"):
            logger.debug("Deriving og:title")
            self.og("title", self._truncate(title, s.og_title_max_length))
        if description and not self._has(Group.OG, "og:description"):
            logger.debug("Deriving og:description")
            self.og("description", self._truncate(description, s.og_description_max_length))
        if not self._has(Group.TWITTER, "twitter:card"):
            logger.debug("Deriving twitter:card")
            self.twitter("card", s.twitter_card)
        if title and not self._has(Group.TWITTER, "twitter:description"):
            logger.debug("Deriving twitter:title")
            self.twitter("title", self._truncate(title, s.twitter_title_max_length))
        if description and not self._has(Group.TWITTER, "twitter:description"):
            logger.debug("Deriving twitter:description")
            self.twitter(
                "description", self._truncate(description, s.twitter_description_max_length)
            )

    def _has(self, group: Group, key: str) -> bool:
        return key in self._tags.get(group.value, {})

    def _add(self, group: Group, key: str, tag: str) -> None:
        self._tags.setdefault(group.value, {}).setdefault(key, []).append(tag)

    def _truncate(self, s: str, max_len: int) -> str:
        return truncate(s, max_len, self._settings.ellipsis)
