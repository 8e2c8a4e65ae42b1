"""Strict slugification shared by tag URLs, accordion ids, and heading anchors."""

from __future__ import annotations

from slugify import slugify as _slugify


def slugify(value: object) -> str:
    """Return a lowercase, hyphen-separated slug limited to ``[a-z0-9-]``.

    >>> slugify("My FAQ!")
    'my-faq'
    """
    return _slugify(str(value), lowercase=True, separator="-")


__all__ = ["slugify"]
