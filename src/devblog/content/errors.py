"""Content pipeline errors."""

from __future__ import annotations


class ContentError(RuntimeError):
    pass


class FrontMatterError(ContentError):
    pass


class PostNotFoundError(ContentError, LookupError):
    pass
