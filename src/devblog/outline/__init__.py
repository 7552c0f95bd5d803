"""Table-of-contents outlines: build a heading tree and render it as navigation."""

from __future__ import annotations

from devblog.outline.builder import (
    build_outline,
    build_outline_by_scan,
    iter_outline,
    outline_depth,
    outline_to_headings,
)
from devblog.outline.renderer import render_outline, render_outline_html

__all__ = [
    "build_outline",
    "build_outline_by_scan",
    "iter_outline",
    "outline_depth",
    "outline_to_headings",
    "render_outline",
    "render_outline_html",
]
