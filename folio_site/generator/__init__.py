"""Utilities for rendering content and assembling the folio site output."""

from .anchors import EscapeHtmlExtension, HeadingAnchorExtension
from .collections import build_collections
from .environment import build_environment
from .passthrough import copy_passthrough
from .renderer import MarkdownRenderer
from .site_builder import SiteBuilder

__all__ = [
    "EscapeHtmlExtension",
    "HeadingAnchorExtension",
    "MarkdownRenderer",
    "SiteBuilder",
    "build_collections",
    "build_environment",
    "copy_passthrough",
]
