"""Project gallery catalog."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from devblog.content.errors import ContentError
from devblog.logging import get_logger
from devblog.models.project import Project

logger = get_logger(__name__)

DEFAULT_PROJECTS: tuple[Project, ...] = (
    Project(
        title="Alfred",
        url="https://alfred.saxymofo.dev/",
        image_path="alfred_with_bgc.png",
        description=(
            "A chat bot. Because of course I made a chat bot.\n\n"
            "Alfred is here to answer your questions, and he likes to give you complete "
            "insight into his thought process."
        ),
    ),
    Project(
        title="What a Drag",
        url="https://what-a-drag.saxymofo.dev/",
        image_path="what-a-drag.png",
        description=(
            "Try out the different effects and play with the color slider. It's strangely "
            "addictive and calming, which makes for a nice break from Twitter."
        ),
    ),
    Project(
        title="Strongly Typed",
        url="https://strongly-typed.saxymofo.dev/",
        image_path="strongly-typed.png",
        description=(
            "Type in the words as they fall from the sky to shoot them down before they destroy "
            "your base. Zap the bonus to capture all the words on the screen!"
        ),
    ),
    Project(
        title="So Fly",
        url="https://so-fly.saxymofo.dev/",
        image_path="so-fly.png",
        description=(
            "Help the frog catch its dinner so it can grow healthy and strong. Keep feeding it or "
            "it will surely waste away! Play during work hours if you want to have a very "
            "unproductive day. It's habit forming."
        ),
    ),
)

_PROJECT_LIST = TypeAdapter(list[Project])


def load_projects(path: Path | None = None) -> list[Project]:
    """Load the gallery from a YAML list.

    The built-in catalog is used only when no file is configured.

    Raises:
        ContentError: If the configured file is missing, unreadable or not a list of projects.
    """

    if path is None:
        return list(DEFAULT_PROJECTS)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"cannot read projects file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as e:
        raise ContentError(f"invalid projects file {path}: {e}") from e

    try:
        projects = _PROJECT_LIST.validate_python(data or [])
    except ValidationError as e:
        raise ContentError(f"invalid projects file {path}: {e}") from e

    logger.info("Loaded %d projects from %s", len(projects), path)
    return projects
