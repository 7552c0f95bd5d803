"""Pydantic models used across the project."""

from __future__ import annotations

from devblog.models.head import DocumentHead, LinkTag, MetaTag
from devblog.models.heading import HeadingRecord
from devblog.models.outline import OutlineNode
from devblog.models.post import Post, PostFrontmatter
from devblog.models.project import Project

__all__ = [
    "DocumentHead",
    "HeadingRecord",
    "LinkTag",
    "MetaTag",
    "OutlineNode",
    "Post",
    "PostFrontmatter",
    "Project",
]
