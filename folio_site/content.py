r"""Load content templates and their front matter from the input directory.

Each recognised file becomes a :class:`ContentItem`: front matter is parsed
with ruamel.yaml, ``tags`` are normalised into an optional tuple of strings,
and the output URL is derived from the file path unless a ``permalink`` is
declared.

Example
-------
>>> data, body = split_front_matter("---\ntitle: Hello\n---\nBody\n")
>>> data["title"], body
('Hello', 'Body\n')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import re
import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

if typ.TYPE_CHECKING:
    from .config import SiteConfig

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


class ContentError(ValueError):
    """Raised when a content file cannot be parsed."""


@dc.dataclass(slots=True)
class ContentItem:
    """One page of site content with its metadata.

    Attributes
    ----------
    source : Path
        Absolute path of the template file.
    input_path : PurePosixPath
        Path relative to the input directory.
    template_format : str
        File extension without the dot (``md``, ``html``, ...).
    body : str
        Template text following the front matter.
    data : dict[str, Any]
        Parsed front matter.
    tags : tuple[str, ...] | None
        Declared tags, or ``None`` when absent or malformed.
    date : datetime
        Front-matter ``date`` or the file modification time, in UTC.
    url : str | None
        Public URL, or ``None`` when ``permalink: false``.
    output_path : Path | None
        Destination file inside the output directory.
    """

    source: Path
    input_path: PurePosixPath
    template_format: str
    body: str
    data: dict[str, typ.Any]
    tags: tuple[str, ...] | None
    date: dt.datetime
    url: str | None
    output_path: Path | None

    @property
    def file_slug(self) -> str:
        """Return the file stem, or the parent folder name for index files."""
        stem = self.input_path.stem
        if stem == "index" and self.input_path.parent.name:
            return self.input_path.parent.name
        return stem


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Split a leading ``---`` YAML block from the template body."""
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(match.group(1)) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise TypeError(msg)
    return dict(loaded), text[match.end() :]


def normalize_tags(value: object) -> tuple[str, ...] | None:
    """Return string tags in declaration order, or ``None`` when malformed."""
    if isinstance(value, str) or not isinstance(value, cabc.Sequence):
        return None
    return tuple(tag for tag in value if isinstance(tag, str))


def load_content_items(config: SiteConfig) -> list[ContentItem]:
    """Load every recognised template under ``config.input_dir``.

    Files inside the includes directory, and any path with a segment starting
    with ``_`` or ``.``, are skipped. Items are ordered by date, then path.

    Raises
    ------
    ContentError
        If a file's front matter is not a valid YAML mapping.
    """
    items: list[ContentItem] = []
    if not config.input_dir.is_dir():
        return items
    for source in sorted(config.input_dir.rglob("*")):
        if not source.is_file() or _is_ignored(source, config):
            continue
        extension = source.suffix.lstrip(".").lower()
        if config.engine_for(extension) is None:
            continue
        items.append(_load_item(source, extension, config))
    items.sort(key=lambda item: (item.date, item.input_path.as_posix()))
    return items


def _is_ignored(source: Path, config: SiteConfig) -> bool:
    if source.is_relative_to(config.includes_dir):
        return True
    relative = source.relative_to(config.input_dir)
    return any(part.startswith(("_", ".")) for part in relative.parts)


def _load_item(source: Path, extension: str, config: SiteConfig) -> ContentItem:
    text = source.read_text(encoding="utf-8")
    try:
        data, body = split_front_matter(text)
    except (YAMLError, TypeError) as exc:
        msg = f"Invalid front matter in '{source}': {exc}"
        raise ContentError(msg) from exc

    input_path = PurePosixPath(source.relative_to(config.input_dir).as_posix())
    url = _resolve_url(input_path, data.get("permalink"))
    return ContentItem(
        source=source,
        input_path=input_path,
        template_format=extension,
        body=body,
        data=data,
        tags=normalize_tags(data.get("tags")),
        date=_resolve_date(data.get("date"), source),
        url=url,
        output_path=_output_path(url, config.output_dir) if url else None,
    )


def _resolve_url(input_path: PurePosixPath, permalink: object) -> str | None:
    """Return the public URL for ``input_path`` honouring ``permalink``."""
    if permalink is False:
        return None
    if isinstance(permalink, str) and permalink.strip():
        return "/" + permalink.strip().lstrip("/")
    stem = input_path.with_suffix("")
    if stem.name == "index":
        parent = stem.parent.as_posix()
        return "/" if parent == "." else f"/{parent}/"
    return f"/{stem.as_posix()}/"


def _output_path(url: str, output_dir: Path) -> Path:
    relative = url.lstrip("/")
    if not relative or relative.endswith("/"):
        relative = f"{relative}index.html"
    return output_dir / relative


def _resolve_date(value: object, source: Path) -> dt.datetime:
    """Return the front-matter date as aware UTC, defaulting to the file mtime."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text if text.strip():
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                parsed = None
        case _:
            parsed = None
    if parsed is None:
        return dt.datetime.fromtimestamp(source.stat().st_mtime, dt.UTC)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "ContentError",
    "ContentItem",
    "load_content_items",
    "normalize_tags",
    "split_front_matter",
]
