"""Markdown rendering.

Converts a Markdown document into the HTML body of a page plus the flat heading list used for the
"On This Page" outline. Rendering happens in two steps: Python-Markdown produces HTML (heading ids
come from the `toc` extension), then BeautifulSoup rewrites it:

- absolute links open in a new tab;
- code blocks are wrapped in a frame next to a copy button carrying the raw code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import markdown
from bs4 import BeautifulSoup

from devblog.content.frontmatter import split_frontmatter
from devblog.logging import get_logger
from devblog.models.heading import HeadingRecord

logger = get_logger(__name__)

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_EXTERNAL_PREFIXES = ("http://", "https://", "//")


@dataclass(frozen=True)
class RenderedDocument:
    """Output of the Markdown pipeline."""

    html: str
    headings: tuple[HeadingRecord, ...] = ()
    frontmatter: dict[str, Any] = field(default_factory=dict)


class MarkdownRenderer:
    """Render Markdown documents into HTML fragments."""

    def __init__(
        self,
        *,
        highlight_code: bool = True,
        pygments_style: str = "monokai",
        external_link_target: str = "_blank",
    ) -> None:
        self._highlight_code = highlight_code
        self._pygments_style = pygments_style
        self._external_link_target = external_link_target

    def _markdown(self) -> markdown.Markdown:
        # Markdown instances keep per-document state, so each render gets its own
        extensions: list[str] = ["extra", "fenced_code", "tables", "toc"]
        configs: dict[str, dict[str, Any]] = {"toc": {"anchorlink": True}}
        if self._highlight_code:
            extensions.append("codehilite")
            configs["codehilite"] = {
                "noclasses": True,
                "guess_lang": False,
                "pygments_style": self._pygments_style,
            }
        return markdown.Markdown(extensions=extensions, extension_configs=configs)

    def render(self, text: str) -> RenderedDocument:
        """Render a full document, front matter included.

        Raises:
            FrontMatterError: If the front matter block is malformed.
        """

        frontmatter, body = split_frontmatter(text)
        html = self._markdown().convert(body)
        soup = BeautifulSoup(html, "lxml")

        self._rewrite_external_links(soup)
        self._wrap_code_blocks(soup)
        headings = extract_headings(soup)

        container = soup.body
        rendered = container.decode_contents() if container is not None else ""
        logger.debug("Rendered markdown: %d chars, %d headings", len(rendered), len(headings))
        return RenderedDocument(html=rendered, headings=headings, frontmatter=frontmatter)

    def _rewrite_external_links(self, soup: BeautifulSoup) -> None:
        for link in soup.find_all("a", href=True):
            if link["href"].startswith(_EXTERNAL_PREFIXES):
                link["target"] = self._external_link_target
                link["rel"] = "noopener noreferrer"

    @staticmethod
    def _wrap_code_blocks(soup: BeautifulSoup) -> None:
        for pre in soup.find_all("pre"):
            code = pre.find("code")
            if code is None:
                continue

            frame = soup.new_tag("div", attrs={"class": "frame code-frame"})
            pre.wrap(frame)
            button = soup.new_tag(
                "button",
                attrs={"class": "copy-button", "type": "button", "data-raw-text": code.get_text()},
            )
            button.string = "Copy"
            frame.append(button)


def extract_headings(soup: BeautifulSoup) -> tuple[HeadingRecord, ...]:
    """Collect `h1`-`h6` elements that carry an id, in document order."""

    headings: list[HeadingRecord] = []
    for tag in soup.find_all(_HEADING_TAGS):
        anchor = tag.get("id")
        if not anchor:
            continue
        text = " ".join(tag.get_text().split())
        headings.append(HeadingRecord(id=anchor, level=int(tag.name[1]), text=text))
    return tuple(headings)


def extract_headings_from_html(html: str) -> tuple[HeadingRecord, ...]:
    """Same as `extract_headings`, for an HTML string."""

    return extract_headings(BeautifulSoup(html, "lxml"))
