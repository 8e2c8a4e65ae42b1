"""Unit tests for content loading, front matter, and permalinks."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import PurePosixPath

import pytest

from folio_site.config import load_site_config
from folio_site.content import (
    ContentError,
    load_content_items,
    normalize_tags,
    split_front_matter,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_split_front_matter() -> None:
    """Leading YAML blocks are parsed and removed from the body."""
    data, body = split_front_matter("---\ntitle: Hi\ntags: [a, b]\n---\nBody\n")
    assert data == {"title": "Hi", "tags": ["a", "b"]}
    assert body == "Body\n"


def test_text_without_front_matter_is_untouched() -> None:
    """Files without a front-matter fence keep their whole text."""
    assert split_front_matter("# Title\n---\n") == ({}, "# Title\n---\n")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (["travel", "food"], ("travel", "food")),
        (["travel", 3, None], ("travel",)),
        ([], ()),
        ("travel", None),
        (None, None),
        ({"a": 1}, None),
    ],
)
def test_normalize_tags(value: object, expected: tuple[str, ...] | None) -> None:
    """Tags become an optional tuple of strings; malformed values become None."""
    assert normalize_tags(value) == expected


def test_items_load_with_urls_and_dates(site_root: Path) -> None:
    """Items carry permalinks, tags, and UTC dates, sorted by date."""
    config = load_site_config(site_root / "site.yaml")
    items = load_content_items(config)
    by_path = {item.input_path.as_posix(): item for item in items}

    assert "drafts/_hidden.md" not in by_path
    assert not any(p.startswith("_includes") for p in by_path)

    trip = by_path["posts/first-trip.md"]
    assert trip.url == "/posts/first-trip/"
    assert trip.output_path == config.output_dir / "posts/first-trip/index.html"
    assert trip.tags == ("travel", "post", "posts")
    assert trip.date == dt.datetime(2024, 3, 9, tzinfo=dt.UTC)
    assert trip.file_slug == "first-trip"
    assert trip.input_path == PurePosixPath("posts/first-trip.md")

    assert by_path["index.html"].url == "/"
    assert by_path["404.html"].url == "/404.html"
    assert by_path["404.html"].output_path == config.output_dir / "404.html"
    assert by_path["feed.jinja"].url is None
    assert by_path["feed.jinja"].output_path is None

    dated = [item for item in items if item.input_path.parts[0] == "posts"]
    assert [item.input_path.name for item in dated] == [
        "first-trip.md",
        "noodles.md",
    ]


def test_invalid_front_matter_raises(site_root: Path) -> None:
    """Broken YAML is reported with the offending path."""
    bad = site_root / "src" / "bad.md"
    bad.write_text("---\ntitle: [unclosed\n---\nbody\n", encoding="utf-8")
    config = load_site_config(site_root / "site.yaml")
    with pytest.raises(ContentError, match="bad.md"):
        load_content_items(config)
