"""Tests for the post catalog."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from devblog.content import (
    ContentError,
    MarkdownRenderer,
    PostLibrary,
    PostNotFoundError,
    sort_posts,
)
from devblog.models.post import Post, PostFrontmatter


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture()
def content_dir(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    _write(root / "index.md", "# Welcome\n\n## About\n")
    _write(root / "blog" / "index.md", "---\nnotABlog: true\n---\n")
    _write(
        root / "blog" / "first" / "index.md",
        "---\ntitle: First\ndate: 2023-01-01\nauthor: Ada\n---\n# Intro\n\n## Part\n",
    )
    _write(
        root / "blog" / "second" / "index.md",
        "---\ntitle: Second\ndate: 2024-03-05\n---\nBody\n",
    )
    _write(root / "blog" / "series" / "part-1" / "index.md", "---\ntitle: Part One\n---\nBody\n")
    _write(root / "blog" / "broken" / "index.md", "---\ntitle: [oops\n---\nBody\n")
    _write(root / "blog" / "bad-date" / "index.md", "---\ntitle: Bad\ndate: 2023-13-45\n---\nBody\n")
    bad_encoding = root / "blog" / "bad-encoding" / "index.md"
    bad_encoding.parent.mkdir(parents=True)
    bad_encoding.write_bytes(b"# Caf\xe9\n")
    return root


def _library(content_dir: Path) -> PostLibrary:
    return PostLibrary(content_dir, renderer=MarkdownRenderer(highlight_code=False))


def test_discover_finds_nested_slugs(content_dir: Path) -> None:
    """It should derive slugs from directories and skip the blog index file."""

    slugs = [slug for slug, _ in _library(content_dir).discover()]
    assert slugs == ["bad-date", "bad-encoding", "broken", "first", "second", "series/part-1"]


def test_list_posts_newest_first_and_skips_broken(content_dir: Path) -> None:
    """It should order dated posts newest first, put undated ones last and skip invalid posts."""

    posts = _library(content_dir).list_posts()
    assert [p.slug for p in posts] == ["second", "first", "series/part-1"]


def test_get_post_renders_headings_and_frontmatter(content_dir: Path) -> None:
    """It should load a post with its front matter and headings."""

    post = _library(content_dir).get("first")
    assert post.title == "First"
    assert post.date == date(2023, 1, 1)
    assert post.frontmatter.author == "Ada"
    assert [h.id for h in post.headings] == ["intro", "part"]


def test_get_nested_slug(content_dir: Path) -> None:
    """It should resolve slugs containing slashes."""

    assert _library(content_dir).get("series/part-1/").slug == "series/part-1"


@pytest.mark.parametrize("slug", ["missing", "../index.md", "", "first/../second"])
def test_get_unknown_post_raises(content_dir: Path, slug: str) -> None:
    """It should raise PostNotFoundError for unknown or unsafe slugs."""

    with pytest.raises(PostNotFoundError):
        _library(content_dir).get(slug)


def test_get_reuses_cached_post(content_dir: Path) -> None:
    """It should serve repeated loads from the cache."""

    library = _library(content_dir)
    assert library.get("first") is library.get("first")
    assert library.cache.size() == 1


def test_page_loads_home(content_dir: Path) -> None:
    """It should load standalone pages from the content root."""

    library = _library(content_dir)
    home = library.page()
    assert home is not None
    assert [h.text for h in home.headings] == ["Welcome", "About"]
    assert library.page("missing.md") is None


def test_missing_blog_dir(tmp_path: Path) -> None:
    """It should list no posts when there is no blog directory."""

    assert _library(tmp_path).list_posts() == []


def test_not_a_blog_alias() -> None:
    """It should read the camelCase notABlog flag."""

    assert PostFrontmatter.model_validate({"notABlog": True}).not_a_blog is True


def test_sort_posts_ties_keep_slug_order() -> None:
    """It should keep posts with the same date in slug order."""

    def post(slug: str, d: date | None) -> Post:
        return Post(
            slug=slug,
            source_path=Path(f"{slug}.md"),
            frontmatter=PostFrontmatter(date=d),
            html="",
        )

    posts = [
        post("c", date(2022, 1, 1)),
        post("z", None),
        post("b", date(2023, 1, 1)),
        post("a", date(2022, 1, 1)),
        post("y", None),
    ]
    assert [p.slug for p in sort_posts(posts)] == ["b", "a", "c", "y", "z"]


@pytest.mark.parametrize("slug", ["bad-date", "bad-encoding", "broken"])
def test_get_broken_post_raises_content_error(content_dir: Path, slug: str) -> None:
    """It should report undecodable files and impossible dates as content errors."""

    library = _library(content_dir)
    with pytest.raises(ContentError):
        library.get(slug)
    assert library.cache.size() == 0
