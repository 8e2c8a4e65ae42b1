"""Template shortcodes: accordion panels, inline icons, and the year stamp.

The accordion markup follows Bootstrap's collapse component. The body region
id is ``accordion-<slug>`` and the header id ``accordion-header-<slug>``,
where the slug is the strict slug of the title. The prefix keeps panel ids
apart from heading anchors built from the same slug.

Usage from a Jinja template::

    {% call accordion("My FAQ!", "#faq") %}
      <p>Answer body.</p>
    {% endcall %}
"""

from __future__ import annotations

import datetime as dt
import inspect
import typing as typ

from markupsafe import Markup

from .slugs import slugify

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

ACCORDION_FALLBACK_ID = "panel"

ACCORDION_TEMPLATE = Markup(
    '<div class="accordion-item">\n'
    '  <h2 class="accordion-header" id="accordion-header-{id}">\n'
    '    <button class="accordion-button collapsed" type="button"'
    ' data-bs-toggle="collapse" data-bs-target="#accordion-{id}"'
    ' aria-expanded="false" aria-controls="accordion-{id}">{title}</button>\n'
    "  </h2>\n"
    '  <div id="accordion-{id}" class="accordion-collapse collapse"'
    ' aria-labelledby="accordion-header-{id}" data-bs-parent="{parent}">\n'
    '    <div class="accordion-body">{content}</div>\n'
    "  </div>\n"
    "</div>"
)


def render_accordion(content: str, title: str, parent_selector: str) -> Markup:
    """Return a collapsible panel wrapping ``content``.

    Parameters
    ----------
    content : str
        Pre-rendered markup inserted verbatim; callers own its safety.
    title : str
        Toggle label; also the source of the panel id. Titles with no
        slug characters fall back to ``panel``.
    parent_selector : str
        Selector of the accordion container, used for exclusive-open grouping.

    Returns
    -------
    Markup
        The HTML fragment. ``title`` and ``parent_selector`` are escaped.
    """
    return ACCORDION_TEMPLATE.format(
        id=slugify(title) or ACCORDION_FALLBACK_ID,
        title=title,
        parent=parent_selector,
        content=Markup(content),
    )


async def accordion(
    title: str,
    parent_selector: str,
    caller: cabc.Callable[[], typ.Any] | None = None,
) -> Markup:
    """Paired shortcode wrapping the body of a ``{% call %}`` block."""
    content = caller() if caller is not None else ""
    if inspect.isawaitable(content):
        content = await content
    return render_accordion(str(content), title, parent_selector)


def icon(name: str, *, icons_dir: Path) -> Markup:
    """Return the raw SVG markup stored at ``<icons_dir>/<name>.svg``."""
    path = icons_dir / f"{name}.svg"
    return Markup(path.read_text(encoding="utf-8").strip())


def year() -> str:
    """Return the current year, used for copyright stamps."""
    return str(dt.datetime.now(dt.UTC).year)


__all__ = ["accordion", "icon", "render_accordion", "year"]
