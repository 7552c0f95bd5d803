"""Page variants.

Every page exposes the same small surface: the metadata it contributes to `<head>`, the headings
that feed its outline sidebar and a `render()` that produces its body markup. `render_document`
wraps any of them in the site chrome.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from bs4 import BeautifulSoup, Tag

from devblog.config import Settings
from devblog.models.head import DocumentHead, MetaTag
from devblog.models.heading import HeadingRecord
from devblog.models.post import Post
from devblog.models.project import Project
from devblog.site.chrome import append_html, fill_head, new_document, site_layout


class Page(Protocol):
    """Anything that can be rendered as a site page."""

    def head(self) -> DocumentHead: ...

    def headings(self) -> Sequence[HeadingRecord]: ...

    def render(self, soup: BeautifulSoup) -> Tag: ...


def format_post_date(post: Post) -> str | None:
    """Format a post date like `May 1, 2023`."""

    d = post.date
    if d is None:
        return None
    return f"{d:%B} {d.day}, {d.year}"


@dataclass(frozen=True)
class ArticlePage:
    """A single blog post with date/author chrome.

    Posts flagged `notABlog` in their front matter are rendered bare.
    """

    post: Post
    settings: Settings

    @property
    def author(self) -> str:
        return self.post.frontmatter.author or self.settings.site_author or "unknown author"

    def head(self) -> DocumentHead:
        fm = self.post.frontmatter
        meta = [
            MetaTag(name="author", content=self.author),
            MetaTag(property="og:title", content=self.post.title),
            MetaTag(property="og:type", content="article"),
        ]
        if fm.description:
            meta.append(MetaTag(name="description", content=fm.description))
            meta.append(MetaTag(property="og:description", content=fm.description))
        if fm.image:
            meta.append(MetaTag(property="og:image", content=fm.image))
        return DocumentHead(
            title=self.post.title,
            meta=meta,
            frontmatter=fm.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    def headings(self) -> Sequence[HeadingRecord]:
        return self.post.headings

    def render(self, soup: BeautifulSoup) -> Tag:
        if self.post.frontmatter.not_a_blog:
            return append_html(soup.new_tag("div", attrs={"class": "page"}), self.post.html)

        post = soup.new_tag("div", attrs={"class": "post"})
        head = soup.new_tag("div", attrs={"class": "head"})
        date_text = format_post_date(self.post)
        if date_text is not None:
            time_tag = soup.new_tag("time", datetime=self.post.date.isoformat())  # type: ignore[union-attr]
            time_tag.string = date_text
            head.append(time_tag)
        byline = soup.new_tag("small")
        byline.string = f"By {self.author}"
        head.append(byline)
        post.append(head)

        title = soup.new_tag("h1", attrs={"class": "title"})
        title.string = self.post.title
        post.append(title)
        return append_html(post, self.post.html)


@dataclass(frozen=True)
class HomePage:
    """Landing page rendered from `content/index.md` when present."""

    settings: Settings
    post: Post | None = None

    def head(self) -> DocumentHead:
        return DocumentHead(
            title=self.settings.site_title,
            meta=[MetaTag(name="author", content=self.settings.site_author)],
        )

    def headings(self) -> Sequence[HeadingRecord]:
        return self.post.headings if self.post is not None else ()

    def render(self, soup: BeautifulSoup) -> Tag:
        page = soup.new_tag("div", attrs={"class": "page"})
        if self.post is None:
            title = soup.new_tag("h1")
            title.string = self.settings.site_title
            page.append(title)
            return page
        return append_html(page, self.post.html)


@dataclass(frozen=True)
class BlogIndexPage:
    """Full previews of every post, newest first."""

    posts: Sequence[Post]
    settings: Settings

    def head(self) -> DocumentHead:
        return DocumentHead(title=self.settings.site_title, frontmatter={"notABlog": True})

    def headings(self) -> Sequence[HeadingRecord]:
        return ()

    def render(self, soup: BeautifulSoup) -> Tag:
        page = soup.new_tag("div", attrs={"class": "blog-index"})
        for post in self.posts:
            preview = soup.new_tag("div", attrs={"class": "blog-preview"})
            h1 = soup.new_tag("h1")
            link = soup.new_tag("a", href=f"/blog/{post.slug}")
            link.string = post.title
            h1.append(link)
            preview.append(h1)
            append_html(preview, post.html)
            preview.append(soup.new_tag("div", attrs={"class": "bottom"}))
            page.append(preview)
        return page


@dataclass(frozen=True)
class ProjectsPage:
    """Gallery of side projects."""

    projects: Sequence[Project]

    def head(self) -> DocumentHead:
        return DocumentHead(title="Projects")

    def headings(self) -> Sequence[HeadingRecord]:
        return ()

    def render(self, soup: BeautifulSoup) -> Tag:
        page = soup.new_tag("div", attrs={"class": "projects"})
        title = soup.new_tag("h1")
        title.string = "Projects"
        page.append(title)
        intro = soup.new_tag("p")
        intro.string = "Some things I've built mostly for fun"
        page.append(intro)

        for project in self.projects:
            card = soup.new_tag(
                "a", attrs={"class": "project", "href": project.url, "target": "_blank"}
            )
            inner = soup.new_tag("div")
            name = soup.new_tag("h2")
            name.string = project.title
            inner.append(name)

            contents = soup.new_tag("div", attrs={"class": "project-contents"})
            contents.append(
                soup.new_tag(
                    "div",
                    attrs={
                        "class": "project-image",
                        "style": f"background-image: url(/{project.image_path})",
                    },
                )
            )
            description = soup.new_tag("p")
            description.string = project.description
            contents.append(description)
            inner.append(contents)
            card.append(inner)
            page.append(card)
        return page


def render_document(
    page: Page,
    *,
    url: str,
    origin: str,
    settings: Settings,
    current_path: str | None = None,
) -> str:
    """Render a page inside the site chrome and return the full HTML document."""

    soup = new_document()
    fill_head(soup, page.head(), url=url, origin=origin, settings=settings)
    body = soup.body
    assert body is not None
    body.append(
        site_layout(
            soup,
            page.render(soup),
            headings=page.headings(),
            settings=settings,
            current_path=current_path,
        )
    )
    return str(soup)
