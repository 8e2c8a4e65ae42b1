"""Utility helpers shared by the folio configuration loader."""

from __future__ import annotations

import typing as typ

from folio_site._constants import TEMPLATE_ENGINES

from .models import MarkdownOptions, SiteConfigError, SiteMetadata


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(value: object, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Section '{section}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _build_site_metadata(payload: typ.Mapping[str, typ.Any]) -> SiteMetadata:
    """Build a SiteMetadata instance from the provided mapping payload."""
    base = SiteMetadata()
    return SiteMetadata(
        title=_optional_str(payload.get("title")) or base.title,
        url=(_optional_str(payload.get("url")) or base.url).rstrip("/"),
        author=_optional_str(payload.get("author")) or base.author,
        description=_optional_str(payload.get("description")) or base.description,
        language=_optional_str(payload.get("language")) or base.language,
    )


def _build_markdown_options(payload: typ.Mapping[str, typ.Any]) -> MarkdownOptions:
    """Build MarkdownOptions, validating that switches are booleans."""
    base = MarkdownOptions()
    flags: dict[str, bool] = {}
    for name in ("html", "breaks", "linkify", "anchors", "anchor_permalink"):
        value = payload.get(name, getattr(base, name))
        if not isinstance(value, bool):
            msg = f"markdown.{name} must be true or false, got {value!r}."
            raise SiteConfigError(msg)
        flags[name] = value
    style = _optional_str(payload.get("pygments_style")) or base.pygments_style
    return MarkdownOptions(pygments_style=style, **flags)


def _build_passthrough(
    payload: object, defaults: typ.Mapping[str, str]
) -> dict[str, str]:
    """Return the passthrough mapping, replacing defaults when one is given."""
    if payload is None:
        return dict(defaults)
    if not isinstance(payload, dict):
        msg = "Section 'passthrough' must map source paths to output paths."
        raise SiteConfigError(msg)
    mapping: dict[str, str] = {}
    for source, target in payload.items():
        src = _optional_str(source)
        dest = _optional_str(target)
        if not src or not dest:
            msg = f"Invalid passthrough entry {source!r}: {target!r}."
            raise SiteConfigError(msg)
        mapping[src] = dest.lstrip("/")
    return mapping


def _build_layout_aliases(payload: object) -> dict[str, str]:
    """Return the layout alias mapping, validating names and targets."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        msg = "Section 'layouts' must map alias names to template paths."
        raise SiteConfigError(msg)
    aliases: dict[str, str] = {}
    for alias, target in payload.items():
        name = _optional_str(alias)
        template = _optional_str(target)
        if not name or not template:
            msg = f"Invalid layout alias {alias!r}: {target!r}."
            raise SiteConfigError(msg)
        aliases[name] = template
    return aliases


def _normalize_formats(value: object) -> list[str]:
    """Normalize the recognised template extensions, rejecting unknown ones."""
    if value is None:
        return list(TEMPLATE_ENGINES)
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        msg = "'formats' must be a list of file extensions."
        raise SiteConfigError(msg)
    formats: list[str] = []
    for entry in value:
        ext = str(entry).strip().lstrip(".").lower()
        if not ext:
            continue
        if ext not in TEMPLATE_ENGINES:
            known = ", ".join(sorted(TEMPLATE_ENGINES))
            msg = f"Unknown template format '{ext}'. Known formats: {known}"
            raise SiteConfigError(msg)
        if ext not in formats:
            formats.append(ext)
    if not formats:
        msg = "At least one template format must be enabled."
        raise SiteConfigError(msg)
    return formats


__all__ = [
    "_build_layout_aliases",
    "_build_markdown_options",
    "_build_passthrough",
    "_build_site_metadata",
    "_normalize_formats",
    "_optional_str",
    "_require_mapping",
]
