"""Common literal values used across folio_site.

These constants keep reserved tag names, placeholders, and default path
mappings centralized so the builder, template hooks, and tests import the same
values without drifting. Intended for internal use within the folio_site
package.

Examples
--------
>>> from folio_site import _constants
>>> "posts" in _constants.RESERVED_TAGS
True
>>> _constants.TEMPLATE_ENGINES["md"]
'markdown'
"""

RESERVED_TAGS = frozenset({"all", "nav", "post", "posts"})

EXIF_PLACEHOLDER = "--"

PRODUCTION = "production"
DEFAULT_ENVIRONMENT = "development"

TEMPLATE_ENGINES: dict[str, str] = {
    "md": "markdown",
    "markdown": "markdown",
    "html": "jinja",
    "jinja": "jinja",
}

DEFAULT_PASSTHROUGH: dict[str, str] = {
    "src/images": "images",
    "src/manifest.json": "manifest.json",
    "src/robots.txt": "robots.txt",
    "vendor/bootstrap/bootstrap.min.css": "css/bootstrap.min.css",
    "vendor/bootstrap/bootstrap.bundle.min.js": "js/bootstrap.bundle.min.js",
}
