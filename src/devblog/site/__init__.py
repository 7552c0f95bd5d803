"""Site pages and chrome."""

from __future__ import annotations

from devblog.site.pages import (
    ArticlePage,
    BlogIndexPage,
    HomePage,
    Page,
    ProjectsPage,
    render_document,
)
from devblog.site.projects import DEFAULT_PROJECTS, load_projects

__all__ = [
    "ArticlePage",
    "BlogIndexPage",
    "DEFAULT_PROJECTS",
    "HomePage",
    "Page",
    "ProjectsPage",
    "load_projects",
    "render_document",
]
