"""CSS and JavaScript minification hooks."""

from __future__ import annotations

import asyncio
import logging

import csscompressor
import rjsmin

from ._constants import PRODUCTION

logger = logging.getLogger(__name__)


def minify_css(source: str) -> str:
    """Return ``source`` minified with special ``/*! */`` comments stripped."""
    return csscompressor.compress(source, preserve_exclamation_comments=False)


async def minify_js(source: str, environment: str) -> str:
    """Minify ``source`` in production; return it untouched otherwise.

    Minifier failures are logged and the original source is returned so the
    build keeps going.
    """
    if environment != PRODUCTION:
        return source
    try:
        return await asyncio.to_thread(rjsmin.jsmin, source)
    except Exception:  # noqa: BLE001 - fall back to the unminified source
        logger.exception("JS minification failed; using unminified source")
        return source


__all__ = ["minify_css", "minify_js"]
