"""Project gallery models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Project(BaseModel):
    """A showcased side project."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    description: str
    image_path: str
