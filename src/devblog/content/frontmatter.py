"""YAML front matter parsing."""

from __future__ import annotations

import re
from typing import Any

import yaml

from devblog.content.errors import FrontMatterError

_FRONTMATTER_RE = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(?P<body>.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a document into its front matter mapping and the Markdown body.

    A document without a leading `---` block has empty front matter.

    Raises:
        FrontMatterError: If the block is not valid YAML or is not a mapping.
    """

    m = _FRONTMATTER_RE.match(text)
    if not m:
        return {}, text

    try:
        data = yaml.safe_load(m.group("body"))
    except (yaml.YAMLError, ValueError) as e:
        # PyYAML raises a bare ValueError for impossible timestamps such as 2023-13-45
        raise FrontMatterError(f"invalid front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(f"front matter must be a mapping, got {type(data).__name__}")
    return data, text[m.end():]
