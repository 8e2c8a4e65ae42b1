"""High-level orchestration for a folio site build.

This module coordinates loading content, grouping it into collections,
rendering each page through the shared Jinja environment (and the markdown
renderer for markdown sources), wrapping pages in their layouts, and copying
passthrough assets. It exposes :class:`SiteBuilder`, which consumes a
:class:`~folio_site.config.SiteConfig` and returns the paths it wrote.

Example
-------
>>> from pathlib import Path
>>> from folio_site.config import load_site_config
>>> from folio_site.generator import SiteBuilder
>>> config = load_site_config(Path("example/site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('example/_site/images'), PosixPath('example/_site/index.html'), ...]
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ

from jinja2 import TemplateNotFound
from markupsafe import Markup

from folio_site.content import ContentItem, load_content_items

from .collections import build_collections
from .environment import build_environment
from .passthrough import copy_passthrough
from .renderer import MarkdownRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment, Template

    from folio_site.config import SiteConfig

logger = logging.getLogger(__name__)

LAYOUT_SUFFIXES = ("", ".jinja", ".html")


class SiteBuilder:
    """Render every content item and copy static assets into the output."""

    def __init__(self, config: SiteConfig) -> None:
        """Initialize the builder with configuration and template context.

        Parameters
        ----------
        config : SiteConfig
            Build configuration describing paths, passthrough copies, markdown
            options, and the build mode.
        """
        self.config = config
        self.renderer = MarkdownRenderer(config.markdown)
        self.env: Environment = build_environment(config, renderer=self.renderer)

    def run(self) -> list[Path]:
        """Run :meth:`build` to completion on a fresh event loop."""
        return asyncio.run(self.build())

    async def build(self) -> list[Path]:
        """Render the whole site.

        Returns
        -------
        list[Path]
            Passthrough destinations followed by rendered pages, in date order.

        Notes
        -----
        Side effects include creating the output directory and writing files
        into it. Template, layout, and filter failures propagate and stop the
        build.
        """
        out_dir = self.config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)
        written = copy_passthrough(
            self.config.passthrough, root=self.config.root, output_dir=out_dir
        )

        items = load_content_items(self.config)
        collections = build_collections(items)
        logger.info(
            "Loaded %d content items with %d tags",
            len(items),
            len(collections["tag_list"]),
        )
        for item in items:
            if item.output_path is None:
                logger.debug("Skipping %s (permalink disabled)", item.input_path)
                continue
            html = await self.render_item(item, collections)
            if not html.endswith("\n"):
                html += "\n"
            item.output_path.parent.mkdir(parents=True, exist_ok=True)
            item.output_path.write_text(html, encoding="utf-8")
            written.append(item.output_path)
        return written

    async def render_item(
        self, item: ContentItem, collections: dict[str, typ.Any]
    ) -> str:
        """Render ``item`` through its engine and wrap it in its layout."""
        context = self._build_context(item, collections)
        template = self.env.from_string(item.body)
        body = await template.render_async(**context)
        if self.config.engine_for(item.template_format) == "markdown":
            body = self.renderer.markdown(body)

        layout_name = item.data.get("layout")
        if not layout_name:
            return body
        layout = self._resolve_layout(str(layout_name))
        return await layout.render_async(**context, content=Markup(body))

    def _build_context(
        self, item: ContentItem, collections: dict[str, typ.Any]
    ) -> dict[str, typ.Any]:
        """Merge front matter with the page, collection, and site variables."""
        context: dict[str, typ.Any] = dict(item.data)
        context.update(
            {
                "page": {
                    "url": item.url,
                    "input_path": item.input_path.as_posix(),
                    "date": item.date,
                    "file_slug": item.file_slug,
                },
                "collections": collections,
                "site": self.config.site,
                "environment": self.config.environment,
            }
        )
        return context

    def _resolve_layout(self, name: str) -> Template:
        """Return the layout template, trying ``.jinja`` and ``.html`` suffixes.

        Configured aliases such as ``post`` are expanded first.
        """
        name = self.config.layouts.get(name, name)
        for suffix in LAYOUT_SUFFIXES:
            try:
                return self.env.get_template(f"{name}{suffix}")
            except TemplateNotFound:
                continue
        raise TemplateNotFound(name)


__all__ = ["SiteBuilder"]
