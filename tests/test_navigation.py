"""Unit tests for menu trees built from ``navigation`` front matter."""

from __future__ import annotations

import datetime as dt
from pathlib import Path, PurePosixPath

from folio_site.content import ContentItem
from folio_site.navigation import navigation_tree


def _item(name: str, url: str | None, **data: object) -> ContentItem:
    return ContentItem(
        source=Path("/site/src") / name,
        input_path=PurePosixPath(name),
        template_format="md",
        body="",
        data=dict(data),
        tags=None,
        date=dt.datetime(2024, 1, 1, tzinfo=dt.UTC),
        url=url,
        output_path=None,
    )


def test_top_level_entries_are_ordered() -> None:
    """Entries sort by ``order`` then ``key``; pages without a key are ignored."""
    items = [
        _item("about.md", "/about/", navigation={"key": "About", "order": 2}),
        _item("index.md", "/", navigation={"key": "Home", "order": 1}),
        _item("contact.md", "/contact/", navigation={"key": "Contact", "order": 2}),
        _item("plain.md", "/plain/"),
        _item("broken.md", "/broken/", navigation="About"),
    ]
    tree = navigation_tree(items)
    assert [entry["key"] for entry in tree] == ["Home", "About", "Contact"]
    assert tree[0]["url"] == "/"


def test_children_nest_under_their_parent() -> None:
    """Child pages appear under the parent key and can be listed directly."""
    items = [
        _item("about.md", "/about/", navigation={"key": "About"}),
        _item(
            "cameras.md",
            "/about/cameras/",
            navigation={"key": "Cameras", "parent": "About", "title": "My cameras"},
        ),
    ]
    tree = navigation_tree(items)
    assert [entry["key"] for entry in tree] == ["About"]
    child = tree[0]["children"][0]
    assert (child["title"], child["url"]) == ("My cameras", "/about/cameras/")
    assert [entry["key"] for entry in navigation_tree(items, "About")] == ["Cameras"]


def test_orphans_and_self_parents_are_dropped() -> None:
    """Unknown parents and self references never enter the tree."""
    items = [
        _item("a.md", "/a/", navigation={"key": "A", "parent": "Missing"}),
        _item("b.md", "/b/", navigation={"key": "B", "parent": "B"}),
    ]
    assert navigation_tree(items) == []
