"""Blog post models."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devblog.models.heading import HeadingRecord


class PostFrontmatter(BaseModel):
    """YAML front matter at the top of a Markdown document.

    Unknown keys are kept so pages can surface them as extra metadata.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str | None = None
    date: dt.date | None = None
    author: str | None = None
    description: str | None = None
    image: str | None = None
    not_a_blog: bool = Field(default=False, alias="notABlog")

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_datetime(cls, value: object) -> object:
        # YAML turns `2023-05-01 10:00` into a datetime
        if isinstance(value, dt.datetime):
            return value.date()
        return value


class Post(BaseModel):
    """A rendered Markdown document."""

    slug: str
    source_path: Path
    frontmatter: PostFrontmatter = Field(default_factory=PostFrontmatter)
    html: str
    headings: tuple[HeadingRecord, ...] = Field(default_factory=tuple)

    @property
    def title(self) -> str:
        return self.frontmatter.title or self.slug

    @property
    def date(self) -> dt.date | None:
        return self.frontmatter.date
