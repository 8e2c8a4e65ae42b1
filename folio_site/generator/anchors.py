"""Markdown extensions for heading anchors and raw-HTML escaping."""

from __future__ import annotations

import html
import typing as typ
from xml.etree.ElementTree import SubElement

from markdown.extensions import Extension
from markdown.extensions.toc import render_inner_html, strip_tags
from markdown.treeprocessors import Treeprocessor

from folio_site.slugs import slugify

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
PERMALINK_CLASS = "direct-link"


class HeadingAnchorExtension(Extension):
    """Give every heading a slug id so sections can be linked directly.

    Ids come from :func:`folio_site.slugs.slugify`, the same helper used for
    tag URLs and accordion ids. Duplicate slugs within a document receive
    ``-2``, ``-3`` suffixes. With ``permalink`` enabled, a trailing
    ``<a class="direct-link">`` link is appended to each heading.
    """

    def __init__(self, *, permalink: bool = True, symbol: str = "#") -> None:
        super().__init__()
        self.permalink = permalink
        self.symbol = symbol

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading-anchor treeprocessor on the Markdown instance."""
        processor = HeadingAnchorTreeprocessor(
            md, permalink=self.permalink, symbol=self.symbol
        )
        md.treeprocessors.register(processor, "folio_heading_anchors", 6)


class HeadingAnchorTreeprocessor(Treeprocessor):
    """Assign unique slug ids to heading elements."""

    def __init__(self, md: Markdown, *, permalink: bool, symbol: str) -> None:
        super().__init__(md)
        self.permalink = permalink
        self.symbol = symbol

    def run(self, root: Element) -> Element:
        """Set ids (and optional permalinks) on every heading in the tree."""
        used: set[str] = set()
        headings = [el for el in root.iter() if el.tag in HEADING_TAGS]
        for element in headings:
            existing = element.get("id")
            if existing:
                used.add(existing)
        for element in headings:
            anchor = element.get("id")
            if not anchor:
                text = html.unescape(strip_tags(render_inner_html(element, self.md)))
                anchor = _unique_anchor(slugify(text) or "section", used)
                element.set("id", anchor)
            if self.permalink:
                link = SubElement(element, "a")
                link.set("class", PERMALINK_CLASS)
                link.set("href", f"#{anchor}")
                link.set("aria-hidden", "true")
                link.text = self.symbol
        return root


class EscapeHtmlExtension(Extension):
    """Disable raw HTML passthrough so markup in sources renders as text."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Remove the block and inline raw-HTML handlers."""
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")


def _unique_anchor(base: str, used: set[str]) -> str:
    """Return a unique anchor, appending numeric suffixes and mutating ``used``."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


__all__ = [
    "EscapeHtmlExtension",
    "HeadingAnchorExtension",
    "HeadingAnchorTreeprocessor",
]
