"""Heading records produced by the content pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HeadingRecord(BaseModel):
    """A single document heading, in document order.

    `level` is a rank: smaller is shallower. It is not validated here, the content pipeline
    is responsible for producing sensible values.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    level: int
    text: str
