"""Build menu trees from ``navigation`` front matter.

A page opts into menus with a mapping in its front matter::

    navigation:
      key: Cameras
      parent: About
      order: 2

``navigation_tree`` turns the opted-in pages into nested entry dicts ordered
by ``order`` and then ``key``. Pages whose ``parent`` names no known key are
left out, as are pages pointing at themselves.

Example
-------
>>> navigation_tree([])
[]
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from folio_site.content import ContentItem

NAVIGATION_KEY = "navigation"


def navigation_tree(
    items: cabc.Iterable[ContentItem], start: str | None = None
) -> list[dict[str, typ.Any]]:
    """Return the menu entries below ``start`` (the top level when ``None``).

    Parameters
    ----------
    items : Iterable[ContentItem]
        Content to scan, usually ``collections.all``.
    start : str, optional
        Key whose children are returned.

    Returns
    -------
    list[dict[str, Any]]
        Entries with ``key``, ``title``, ``url``, ``order``, ``parent`` and a
        nested ``children`` list.
    """
    candidates = [_entry_for(item) for item in items]
    entries = [entry for entry in candidates if entry is not None]
    by_key = {entry["key"]: entry for entry in entries}
    top: list[dict[str, typ.Any]] = []
    for entry in sorted(entries, key=_sort_key):
        parent = entry["parent"]
        if parent == start:
            top.append(entry)
        elif parent is not None and parent != entry["key"] and parent in by_key:
            by_key[parent]["children"].append(entry)
    return top


def _entry_for(item: ContentItem) -> dict[str, typ.Any] | None:
    meta = item.data.get(NAVIGATION_KEY)
    if not isinstance(meta, dict) or not meta.get("key"):
        return None
    key = str(meta["key"])
    order = meta.get("order", 0)
    parent = meta.get("parent")
    return {
        "key": key,
        "title": str(meta.get("title") or key),
        "url": item.url,
        "order": order if isinstance(order, int) else 0,
        "parent": str(parent) if parent is not None else None,
        "children": [],
    }


def _sort_key(entry: dict[str, typ.Any]) -> tuple[int, str]:
    return entry["order"], entry["key"]


__all__ = ["NAVIGATION_KEY", "navigation_tree"]
