"""Document head metadata."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class MetaTag(BaseModel):
    """A `<meta>` element.

    Exactly one of `name` / `property` is usually set; `property` is used for OpenGraph tags.
    """

    name: str | None = None
    property: str | None = None
    content: str | None = None


class LinkTag(BaseModel):
    """A `<link>` element."""

    rel: str
    href: str
    type: str | None = None


class DocumentHead(BaseModel):
    """Everything a page contributes to the document `<head>`."""

    title: str
    meta: list[MetaTag] = Field(default_factory=list)
    links: list[LinkTag] = Field(default_factory=list)
    frontmatter: dict[str, Any] = Field(default_factory=dict)
