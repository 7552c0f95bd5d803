"""Page chrome: document head, site navigation, author card and the outline sidebar."""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from devblog.config import Settings
from devblog.models.head import DocumentHead, MetaTag
from devblog.models.heading import HeadingRecord
from devblog.outline import build_outline, render_outline

_SKELETON = '<!DOCTYPE html><html lang="en"><head></head><body></body></html>'

NAV_ITEMS: tuple[tuple[str, str], ...] = (
    ("/", "Home"),
    ("/blog", "Blog"),
    ("/projects", "Projects"),
)


def new_document() -> BeautifulSoup:
    """Create an empty HTML document."""

    return BeautifulSoup(_SKELETON, "lxml")


def _resolve_meta_content(meta: MetaTag, origin: str) -> str | None:
    if meta.property == "og:image":
        return urljoin(origin, meta.content or "")
    return meta.content


def fill_head(
    soup: BeautifulSoup,
    head: DocumentHead,
    *,
    url: str,
    origin: str,
    settings: Settings,
) -> Tag:
    """Populate `<head>` from the page's DocumentHead.

    `og:image` content is resolved against `origin` so crawlers get an absolute URL.
    """

    head_tag = soup.head
    assert head_tag is not None

    head_tag.append(soup.new_tag("meta", charset="utf-8"))
    title = soup.new_tag("title")
    title.string = head.title
    head_tag.append(title)

    head_tag.append(soup.new_tag("link", rel="canonical", href=url))
    head_tag.append(
        soup.new_tag(
            "meta", attrs={"name": "viewport", "content": "width=device-width, initial-scale=1.0"}
        )
    )
    head_tag.append(soup.new_tag("link", rel="icon", type="image/svg+xml", href="/logo.svg"))
    for href in settings.stylesheets:
        head_tag.append(soup.new_tag("link", rel="stylesheet", href=href))

    for meta in head.meta:
        attrs = {k: v for k, v in (("name", meta.name), ("property", meta.property)) if v}
        content = _resolve_meta_content(meta, origin)
        if content is not None:
            attrs["content"] = content
        head_tag.append(soup.new_tag("meta", attrs=attrs))

    for link in head.links:
        attrs = link.model_dump(exclude_none=True)
        head_tag.append(soup.new_tag("link", attrs=attrs))

    return head_tag


def site_header(soup: BeautifulSoup) -> Tag:
    header = soup.new_tag("header")
    home = soup.new_tag("a", href="/")
    logo = soup.new_tag("img", attrs={"class": "site-logo", "src": "/logo.svg", "alt": "Home"})
    home.append(logo)
    header.append(home)
    return header


def site_nav(soup: BeautifulSoup, *, current_path: str | None = None) -> Tag:
    """Primary navigation; the entry matching `current_path` is marked with aria-current."""

    nav = soup.new_tag("nav", attrs={"class": "site-nav"})
    for href, label in NAV_ITEMS:
        h5 = soup.new_tag("h5")
        link = soup.new_tag("a", href=href)
        if current_path is not None and _is_current(href, current_path):
            link["aria-current"] = "page"
        link.string = label
        h5.append(link)
        nav.append(h5)
    return nav


def _is_current(href: str, path: str) -> bool:
    if href == "/":
        return path == "/"
    return path == href or path.startswith(href + "/")


def author_card(soup: BeautifulSoup, settings: Settings) -> Tag:
    card = soup.new_tag("div", attrs={"class": "my-card"})
    card.append(
        soup.new_tag(
            "img",
            attrs={"src": settings.avatar_url, "height": "60", "width": "60", "alt": ""},
        )
    )

    details = soup.new_tag("div", attrs={"class": "details"})
    name = soup.new_tag("h5")
    name.string = settings.site_author
    role = soup.new_tag("p")
    role.string = settings.author_role
    details.append(name)
    details.append(role)
    card.append(details)

    social = soup.new_tag(
        "a", attrs={"class": "twitter-link", "href": settings.social_url, "target": "_blank"}
    )
    social.string = settings.social_label
    card.append(social)
    return card


def outline_sidebar(soup: BeautifulSoup, headings: Sequence[HeadingRecord]) -> Tag | None:
    """The "On This Page" navigation, or None when the page has no headings."""

    ol = render_outline(build_outline(headings), soup=soup)
    if ol is None:
        return None

    nav = soup.new_tag("nav", attrs={"class": "page-outline"})
    label = soup.new_tag("strong")
    label.string = "On This Page"
    nav.append(label)
    nav.append(ol)
    return nav


def site_layout(
    soup: BeautifulSoup,
    content: Tag,
    *,
    headings: Sequence[HeadingRecord],
    settings: Settings,
    current_path: str | None = None,
) -> Tag:
    """Wrap page content in the site shell."""

    container = soup.new_tag("div", attrs={"class": "site-container"})
    container.append(site_header(soup))
    container.append(site_nav(soup, current_path=current_path))

    main = soup.new_tag("main")
    article = soup.new_tag("article")
    article.append(content)
    main.append(article)

    aside = soup.new_tag("aside")
    aside.append(author_card(soup, settings))
    sidebar = outline_sidebar(soup, headings)
    if sidebar is not None:
        aside.append(sidebar)
    main.append(aside)

    container.append(main)
    return container


def append_html(parent: Tag, html: str) -> Tag:
    """Parse an HTML fragment and move its nodes under `parent`."""

    fragment = BeautifulSoup(html, "lxml")
    source = fragment.body
    if source is None:
        return parent
    for node in list(source.contents):
        parent.append(node.extract())
    return parent
