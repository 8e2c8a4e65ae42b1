"""Date, sequence, and feed filters registered on the template environment."""

from __future__ import annotations

import datetime as dt
import typing as typ
from urllib.parse import urljoin

if typ.TYPE_CHECKING:
    import collections.abc as cabc

READABLE_DATE_PATTERN = "%d %b %Y"
HTML_DATE_PATTERN = "%Y-%m-%d"
POST_DATE_PATTERN = "%m-%d-%Y"


def format_date(
    value: dt.date | dt.datetime | str, pattern: str = READABLE_DATE_PATTERN
) -> str:
    """Format ``value`` in UTC using a ``strftime`` pattern.

    >>> format_date("2024-03-09T10:00:00Z")
    '09 Mar 2024'
    """
    return _to_utc(value).strftime(pattern)


def html_date_string(value: dt.date | dt.datetime | str) -> str:
    """Format ``value`` for ``<time datetime>`` attributes."""
    return format_date(value, HTML_DATE_PATTERN)


def post_date_string(value: dt.date | dt.datetime | str) -> str:
    """Format ``value`` as the month-first stamp shown beside post titles.

    >>> post_date_string("2024-03-09")
    '03-09-2024'
    """
    return format_date(value, POST_DATE_PATTERN)


def rfc3339(value: dt.date | dt.datetime | str) -> str:
    """Return ``value`` as an RFC 3339 UTC timestamp for Atom and JSON feeds.

    >>> rfc3339("2024-03-09T10:00:00.250+02:00")
    '2024-03-09T08:00:00Z'
    """
    stamp = _to_utc(value).replace(microsecond=0)
    return stamp.isoformat().replace("+00:00", "Z")


def absolute_url(url: str, base: str) -> str:
    """Resolve a site-relative ``url`` against the public ``base`` URL.

    >>> absolute_url("/posts/harbour/", "https://folio.example")
    'https://folio.example/posts/harbour/'
    """
    if not base:
        msg = "absolute_url needs a base URL; set site.url in the configuration."
        raise ValueError(msg)
    return urljoin(f"{base.rstrip('/')}/", url)


def newest_date(items: cabc.Iterable[typ.Any]) -> dt.datetime | None:
    """Return the latest ``date`` among ``items``, or ``None`` when empty."""
    dates = [item.date for item in items]
    return max(dates) if dates else None


def head(values: cabc.Sequence[typ.Any], count: int) -> list[typ.Any]:
    """Return the first ``count`` items, or the last ``-count`` when negative."""
    items = list(values)
    if count < 0:
        return items[count:]
    return items[:count]


def _to_utc(value: dt.date | dt.datetime | str) -> dt.datetime:
    """Normalize dates, datetimes, and ISO strings into aware UTC datetimes."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            parsed = dt.datetime.fromisoformat(sanitized)
        case _:
            msg = f"Cannot format {type(value).__name__!r} as a date."
            raise TypeError(msg)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "HTML_DATE_PATTERN",
    "POST_DATE_PATTERN",
    "READABLE_DATE_PATTERN",
    "absolute_url",
    "format_date",
    "head",
    "html_date_string",
    "newest_date",
    "post_date_string",
    "rfc3339",
]
