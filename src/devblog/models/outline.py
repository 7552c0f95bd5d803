"""Outline models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from devblog.models.heading import HeadingRecord


class OutlineNode(BaseModel):
    """A heading placed in the table-of-contents tree.

    `id`, `level` and `text` are copied verbatim from the source heading.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    level: int
    text: str

    children: tuple["OutlineNode", ...] = Field(default_factory=tuple)

    def to_heading(self) -> HeadingRecord:
        return HeadingRecord(id=self.id, level=self.level, text=self.text)

