"""Render markdown with the site's line-break, autolink, and anchor options."""

from __future__ import annotations

import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from folio_site.config import MarkdownOptions

from .anchors import EscapeHtmlExtension, HeadingAnchorExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any


class MarkdownRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(self, options: MarkdownOptions | None = None) -> None:
        """Initialize a renderer from the configured markdown switches.

        Parameters
        ----------
        options : MarkdownOptions, optional
            Raw-HTML passthrough, line breaks, autolinking, heading anchors,
            and the Pygments style. Defaults to :class:`MarkdownOptions`.
        """
        self.options = options or MarkdownOptions()
        self._formatter = HtmlFormatter(
            style=self.options.pygments_style, cssclass="codehilite"
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=self._extensions(),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.options.pygments_style,
                },
            },
        )
        return md.convert(text)

    def _extensions(self) -> list[Extension | str]:
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
        ]
        if self.options.breaks:
            extensions.append("nl2br")
        if self.options.linkify:
            extensions.append("pymdownx.magiclink")
        if self.options.anchors:
            extensions.append(
                HeadingAnchorExtension(permalink=self.options.anchor_permalink)
            )
        if not self.options.html:
            extensions.append(EscapeHtmlExtension())
        return extensions


__all__ = ["MarkdownRenderer"]
