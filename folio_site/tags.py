"""Collect navigation tags declared by content items.

Every content item may declare an ordered ``tags`` sequence in its front
matter. :func:`collect_tags` gathers them across the whole site, drops the
reserved names used for structural collections, and returns one entry per tag
in first-seen order so rendered tag lists stay stable between builds.

Examples
--------
>>> from types import SimpleNamespace
>>> items = [
...     SimpleNamespace(tags=("travel", "post")),
...     SimpleNamespace(tags=("food", "nav")),
... ]
>>> collect_tags(items)
['travel', 'food']
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ._constants import RESERVED_TAGS


class Tagged(typ.Protocol):
    """Anything exposing an optional ordered sequence of tag strings."""

    @property
    def tags(self) -> cabc.Sequence[str] | None: ...


def collect_tags(items: cabc.Iterable[Tagged]) -> list[str]:
    """Return the de-duplicated, non-reserved tags declared across ``items``.

    Parameters
    ----------
    items : Iterable[Tagged]
        Loaded content items. Items without tags contribute nothing.

    Returns
    -------
    list[str]
        Tags in first-insertion order, never containing ``all``, ``nav``,
        ``post``, or ``posts``.
    """
    seen: dict[str, None] = {}
    for item in items:
        tags = getattr(item, "tags", None)
        if not tags:
            continue
        for tag in filter_tag_list(tags):
            seen.setdefault(tag, None)
    return list(seen)


def filter_tag_list(tags: object) -> list[str]:
    """Drop reserved names from a single tag sequence, keeping order."""
    if isinstance(tags, str) or not isinstance(tags, cabc.Sequence):
        return []
    return [tag for tag in tags if isinstance(tag, str) and tag not in RESERVED_TAGS]


__all__ = ["RESERVED_TAGS", "Tagged", "collect_tags", "filter_tag_list"]
