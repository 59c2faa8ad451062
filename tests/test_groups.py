from html_header.groups import DEFAULT_ORDER, Group, group_name


def test_default_order() -> None:
    assert DEFAULT_ORDER == ("title", "meta", "og", "twitter", "link", "json-ld")


def test_group_name() -> None:
    assert group_name(Group.JSON_LD) == "json-ld"
    assert group_name("og") == "og"
    assert group_name("custom") == "custom"
