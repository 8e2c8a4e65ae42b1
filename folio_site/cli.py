"""Cyclopts CLI entrypoint for building and previewing the folio site.

The ``folio`` console script defined here renders the site described by
``site.yaml`` into its output directory and can serve the result locally.
``ENVIRONMENT=production folio build`` produces the deployable bundle with
minified scripts; ``folio serve`` builds and then previews the output.

Examples
--------
Build the site with the default configuration:

>>> from folio_site.cli import main
>>> main()  # doctest: +SKIP

Build into a scratch directory in production mode:

>>> from folio_site.cli import app
>>> app(
...     ["build", "--environment", "production", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter
from rich.logging import RichHandler

from .config import load_site_config
from .generator import SiteBuilder
from .preview import serve as serve_preview

DEFAULT_CONFIG = Path("site.yaml")

app = App(name="folio", help="Build and preview the folio static site.")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.command(help="Render the site into its output directory.")
def build(
    *,
    config: typ.Annotated[Path, Parameter(help="Path to site config")] = DEFAULT_CONFIG,
    environment: typ.Annotated[
        str | None,
        Parameter(help="Build mode; 'production' minifies JS", env_var="ENVIRONMENT"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    environment : str or None, optional
        Build mode. Falls back to the ``ENVIRONMENT`` variable and then to
        ``"development"``.
    output_dir : Path or None, optional
        Override for the configured output directory.
    verbose : bool, optional
        Log at DEBUG instead of INFO.

    Returns
    -------
    None
        Writes rendered pages and passthrough copies, printing each path.
    """
    _setup_logging(verbose)
    site_config = load_site_config(
        config, environment=environment, output_dir=output_dir
    )
    for path in SiteBuilder(site_config).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Build the site and serve it locally.")
def serve(
    *,
    config: typ.Annotated[Path, Parameter(help="Path to site config")] = DEFAULT_CONFIG,
    environment: typ.Annotated[
        str | None,
        Parameter(help="Build mode; 'production' minifies JS", env_var="ENVIRONMENT"),
    ] = None,
    host: typ.Annotated[str, Parameter(help="Interface to bind")] = "127.0.0.1",
    port: typ.Annotated[int, Parameter(help="Port to listen on")] = 8080,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build once, then serve the output directory until interrupted."""
    _setup_logging(verbose)
    site_config = load_site_config(config, environment=environment)
    SiteBuilder(site_config).run()
    serve_preview(
        site_config.output_dir, site_config.not_found, host=host, port=port
    )


def main() -> None:
    """Invoke the Cyclopts application that powers the ``folio`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
