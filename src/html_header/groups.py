from __future__ import annotations

from enum import Enum


class Group(str, Enum):
    TITLE = "title"
    META = "meta"
    OG = "og"
    TWITTER = "twitter"
    LINK = "link"
    JSON_LD = "json-ld"


DEFAULT_ORDER: tuple[str, ...] = tuple(g.value for g in Group)


def group_name(group: Group | str) -> str:
    """
    Plain string name of a group.

    Enum members hash by member name, so the tag store is keyed by the value instead.
    Unknown names pass through untouched.
    """
    if isinstance(group, Group):
        return group.value
    return str(group)
