"""Typed dataclasses describing folio site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from folio_site._constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_PASSTHROUGH,
    TEMPLATE_ENGINES,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteMetadata:
    """Site-wide values exposed to templates as ``site``."""

    title: str = "Folio"
    url: str = ""
    author: str = ""
    description: str = ""
    language: str = "en"


@dc.dataclass(slots=True)
class MarkdownOptions:
    """Switches applied to the markdown renderer."""

    html: bool = True
    breaks: bool = True
    linkify: bool = True
    anchors: bool = True
    anchor_permalink: bool = True
    pygments_style: str = "monokai"


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved build configuration.

    Attributes
    ----------
    root : Path
        Directory the configuration file lives in; passthrough sources are
        resolved against it.
    input_dir : Path
        Directory scanned for content templates.
    output_dir : Path
        Directory receiving rendered pages and passthrough copies.
    includes_dir : Path
        Directory holding layouts and partials for the Jinja loader.
    icons_dir : Path
        Directory holding ``<name>.svg`` files for the ``icon`` shortcode.
    not_found : Path
        Rendered document served by the preview server for unknown paths.
    passthrough : dict[str, str]
        Source to destination mapping copied verbatim into ``output_dir``.
    layouts : dict[str, str]
        Short layout names mapped to template paths under ``includes_dir``.
    formats : list[str]
        Recognised template extensions (without the leading dot).
    environment : str
        Build mode; only ``"production"`` enables JS minification.
    """

    root: Path
    input_dir: Path
    output_dir: Path
    includes_dir: Path
    icons_dir: Path
    not_found: Path
    site: SiteMetadata = dc.field(default_factory=SiteMetadata)
    markdown: MarkdownOptions = dc.field(default_factory=MarkdownOptions)
    passthrough: dict[str, str] = dc.field(
        default_factory=lambda: dict(DEFAULT_PASSTHROUGH)
    )
    layouts: dict[str, str] = dc.field(default_factory=dict)
    formats: list[str] = dc.field(default_factory=lambda: list(TEMPLATE_ENGINES))
    environment: str = DEFAULT_ENVIRONMENT

    def engine_for(self, extension: str) -> str | None:
        """Return the rendering engine for ``extension`` when it is enabled."""
        key = extension.lstrip(".").lower()
        if key not in self.formats:
            return None
        return TEMPLATE_ENGINES.get(key)


__all__ = ["MarkdownOptions", "SiteConfig", "SiteConfigError", "SiteMetadata"]
