"""Group loaded content into the collections templates iterate over."""

from __future__ import annotations

import typing as typ

from folio_site.tags import collect_tags

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from folio_site.content import ContentItem


def build_collections(items: cabc.Sequence[ContentItem]) -> dict[str, typ.Any]:
    """Return ``all``, one entry per declared tag, and the navigable ``tag_list``.

    Per-tag collections include reserved names such as ``posts`` so templates
    can list every post; only ``tag_list`` omits them.
    """
    collections: dict[str, typ.Any] = {"all": list(items)}
    for item in items:
        for tag in item.tags or ():
            collections.setdefault(tag, []).append(item)
    collections["tag_list"] = collect_tags(items)
    return collections


__all__ = ["build_collections"]
