"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from folio_site._constants import DEFAULT_ENVIRONMENT, DEFAULT_PASSTHROUGH

from .helpers import (
    _build_layout_aliases,
    _build_markdown_options,
    _build_passthrough,
    _build_site_metadata,
    _normalize_formats,
    _optional_str,
    _require_mapping,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(
    path: Path,
    *,
    environment: str | None = None,
    output_dir: Path | None = None,
) -> SiteConfig:
    """Load the YAML configuration describing a folio site build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``site.yaml``).
    environment : str, optional
        Build mode override. When ``None`` the ``ENVIRONMENT`` variable is
        consulted, falling back to ``"development"``.
    output_dir : Path, optional
        Override for the configured output directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with every path resolved against the directory
        containing ``path``.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or names an unknown template format.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio_site.config import load_site_config
    >>> config = load_site_config(Path("example/site.yaml"))  # doctest: +SKIP
    >>> config.output_dir.name  # doctest: +SKIP
    '_site'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    root = path.resolve().parent
    paths = _require_mapping(raw.get("paths"), "paths")
    input_dir = root / (_optional_str(paths.get("input")) or "src")
    configured_output = root / (_optional_str(paths.get("output")) or "_site")
    resolved_output = output_dir or configured_output
    includes_dir = input_dir / (_optional_str(paths.get("includes")) or "_includes")
    icons_dir = input_dir / (_optional_str(paths.get("icons")) or "icons")
    not_found = resolved_output / (
        _optional_str(paths.get("not_found")) or "404.html"
    )

    return SiteConfig(
        root=root,
        input_dir=input_dir,
        output_dir=resolved_output,
        includes_dir=includes_dir,
        icons_dir=icons_dir,
        not_found=not_found,
        site=_build_site_metadata(_require_mapping(raw.get("site"), "site")),
        markdown=_build_markdown_options(
            _require_mapping(raw.get("markdown"), "markdown")
        ),
        passthrough=_build_passthrough(raw.get("passthrough"), DEFAULT_PASSTHROUGH),
        layouts=_build_layout_aliases(raw.get("layouts")),
        formats=_normalize_formats(raw.get("formats")),
        environment=_resolve_environment(environment),
    )


def _resolve_environment(override: str | None) -> str:
    """Return the build mode from the override or the ``ENVIRONMENT`` variable.

    The value is kept verbatim; ``" production "`` is not production.
    """
    value = override if override is not None else os.getenv("ENVIRONMENT")
    return value or DEFAULT_ENVIRONMENT


__all__ = ["SiteConfigError", "load_site_config"]
