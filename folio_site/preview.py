"""Local preview server for a built site.

Files under the output directory are served as-is. Any request that would
otherwise 404 receives the contents of the site's not-found document with a
404 status and no redirect, mirroring how the page behaves once deployed.
"""

from __future__ import annotations

import functools
import logging
import typing as typ
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class NotFoundFallbackHandler(SimpleHTTPRequestHandler):
    """Serve static files, answering unknown paths with the 404 document."""

    not_found_page: Path | None = None

    def send_error(
        self, code: int, message: str | None = None, explain: str | None = None
    ) -> None:
        """Write the not-found document for 404s; defer to the default otherwise."""
        page = self.not_found_page
        if code != HTTPStatus.NOT_FOUND or page is None or not page.is_file():
            super().send_error(code, message, explain)
            return
        body = page.read_bytes()
        self.send_response(HTTPStatus.NOT_FOUND, message)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)

    def log_message(self, format: str, *args: typ.Any) -> None:  # noqa: A002
        """Route request logs through the module logger."""
        logger.info("%s - %s", self.address_string(), format % args)


def make_handler(
    output_dir: Path, not_found: Path | None
) -> typ.Callable[..., NotFoundFallbackHandler]:
    """Return a handler factory bound to ``output_dir`` and ``not_found``."""
    handler_cls = type(
        "BoundNotFoundFallbackHandler",
        (NotFoundFallbackHandler,),
        {"not_found_page": not_found},
    )
    return functools.partial(handler_cls, directory=str(output_dir))


def create_server(
    output_dir: Path,
    not_found: Path | None,
    *,
    host: str = "127.0.0.1",
    port: int = 8080,
) -> ThreadingHTTPServer:
    """Bind a preview server without starting it."""
    return ThreadingHTTPServer((host, port), make_handler(output_dir, not_found))


def serve(
    output_dir: Path,
    not_found: Path | None,
    *,
    host: str = "127.0.0.1",
    port: int = 8080,
) -> None:
    """Serve ``output_dir`` until interrupted."""
    with create_server(output_dir, not_found, host=host, port=port) as server:
        bound_host, bound_port = server.server_address[:2]
        logger.info("Serving %s at http://%s:%s/", output_dir, bound_host, bound_port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Preview server stopped")


__all__ = ["NotFoundFallbackHandler", "create_server", "make_handler", "serve"]
