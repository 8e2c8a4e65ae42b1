"""Build the Jinja environment carrying the site's filters and shortcodes."""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from folio_site import exif, filters, minify, shortcodes
from folio_site.navigation import navigation_tree
from folio_site.slugs import slugify
from folio_site.tags import filter_tag_list

from .renderer import MarkdownRenderer

if typ.TYPE_CHECKING:
    from folio_site.config import SiteConfig


def build_environment(
    config: SiteConfig, *, renderer: MarkdownRenderer | None = None
) -> Environment:
    """Return an async Jinja environment with every template hook registered.

    Parameters
    ----------
    config : SiteConfig
        Resolved build configuration; supplies the includes directory, the
        icons directory, the input directory for EXIF lookups, and the build
        mode gating JS minification.
    renderer : MarkdownRenderer, optional
        Renderer backing the ``markdown`` filter. Built from
        ``config.markdown`` when omitted.

    Returns
    -------
    Environment
        Environment with ``enable_async`` set; render with ``render_async``.
        The ``pygments_css`` global carries the highlight stylesheet for
        ``config.markdown.pygments_style``.
    """
    renderer = renderer or MarkdownRenderer(config.markdown)
    env = Environment(
        loader=FileSystemLoader(str(config.includes_dir)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        enable_async=True,
    )
    env.filters.update(
        {
            "date": filters.format_date,
            "html_date": filters.html_date_string,
            "post_date": filters.post_date_string,
            "rfc3339": filters.rfc3339,
            "absolute_url": filters.absolute_url,
            "newest_date": filters.newest_date,
            "head": filters.head,
            "slug": slugify,
            "cssmin": minify.minify_css,
            "jsmin": functools.partial(
                minify.minify_js, environment=config.environment
            ),
            "exif": functools.partial(
                _exif_filter, input_dir=config.input_dir, root=config.root
            ),
            "fstop": exif.format_fstop,
            "filter_tag_list": filter_tag_list,
            "navigation": navigation_tree,
            "markdown": lambda text: Markup(renderer.markdown(str(text))),
        }
    )
    env.globals.update(
        {
            "icon": functools.partial(shortcodes.icon, icons_dir=config.icons_dir),
            "accordion": shortcodes.accordion,
            "year": shortcodes.year,
            "pygments_css": Markup(renderer.stylesheet),
        }
    )
    return env


async def _exif_filter(
    path: str | Path, *, input_dir: Path, root: Path
) -> exif.ExifSummary:
    """Read EXIF data for ``path``.

    Site-root URLs such as ``/images/p.jpg`` and relative paths resolve
    against ``input_dir``. Absolute filesystem paths are only honoured when
    they exist inside the project ``root``.
    """
    candidate = Path(path)
    if not (
        candidate.is_absolute()
        and candidate.is_relative_to(root)
        and candidate.exists()
    ):
        candidate = input_dir / str(path).lstrip("/")
    return await exif.read_exif(candidate)


__all__ = ["build_environment"]
