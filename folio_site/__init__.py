"""Build configuration and template hooks for the folio blog and portfolio.

This package wires the site's template filters, shortcodes, passthrough copies,
and markdown options onto a Jinja environment, and exposes the ``folio`` CLI
that builds and previews the site.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``collect_tags``: Navigation tag aggregation across content items.
- ``render_accordion``: Collapsible panel markup keyed by a title slug.

Examples
--------
>>> from folio_site import render_accordion
>>> 'id="my-faq"' in render_accordion("<p>Hi</p>", "My FAQ!", "#faq")
True
"""

from __future__ import annotations

from .cli import app, main
from .shortcodes import render_accordion
from .tags import collect_tags

__all__ = ["app", "collect_tags", "main", "render_accordion"]
