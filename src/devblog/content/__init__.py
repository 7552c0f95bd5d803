"""Content pipeline: Markdown documents, front matter and the post catalog."""

from __future__ import annotations

from devblog.content.cache import ContentCache
from devblog.content.errors import ContentError, FrontMatterError, PostNotFoundError
from devblog.content.frontmatter import split_frontmatter
from devblog.content.markdown import MarkdownRenderer, RenderedDocument, extract_headings_from_html
from devblog.content.posts import PostLibrary, sort_posts

__all__ = [
    "ContentCache",
    "ContentError",
    "FrontMatterError",
    "MarkdownRenderer",
    "PostLibrary",
    "PostNotFoundError",
    "RenderedDocument",
    "extract_headings_from_html",
    "sort_posts",
    "split_frontmatter",
]
