"""Load and validate site configuration YAML for folio builds.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
paths, passthrough copies, and markdown switches, and produces typed
dataclasses (:class:`SiteConfig`, :class:`MarkdownOptions`, and
:class:`SiteMetadata`) that the builder and template hooks consume. The
primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from folio_site.config import load_site_config
>>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> config.environment  # doctest: +SKIP
'development'
"""

from .loader import load_site_config
from .models import MarkdownOptions, SiteConfig, SiteConfigError, SiteMetadata

__all__ = [
    "MarkdownOptions",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "load_site_config",
]
