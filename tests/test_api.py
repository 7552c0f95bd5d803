"""Tests for the HTTP surface."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from devblog.api import cache_control_header, create_app
from devblog.config import Settings
from devblog.content import ContentError


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    content = tmp_path / "content"
    public = tmp_path / "public"
    _write(content / "index.md", "# Welcome\n\nHello there.\n")
    _write(
        content / "blog" / "first" / "index.md",
        "---\ntitle: First Post\ndate: 2023-01-01\nauthor: Ada\nimage: /cover.png\n---\n"
        "# Intro\n\n## Details\n\n### Deeper\n\n## More\n",
    )
    _write(content / "blog" / "second" / "index.md", "---\ntitle: Second\ndate: 2024-02-02\n---\nNo headings.\n")
    _write(public / "logo.svg", "<svg></svg>")
    return Settings(
        content_dir=content,
        public_dir=public,
        highlight_code=False,
        site_title="Test Blog",
        site_author="Test Author",
    )


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


def test_health(client: TestClient) -> None:
    """It should report ok."""

    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_pages_carry_cache_control(client: TestClient, settings: Settings) -> None:
    """It should send the cache-control header on rendered pages."""

    expected = cache_control_header(settings)
    assert expected == "public, max-age=5, stale-while-revalidate=604800"
    for path in ("/", "/blog", "/blog/first", "/projects"):
        resp = client.get(path)
        assert resp.status_code == 200, path
        assert resp.headers["cache-control"] == expected
        assert resp.headers["content-type"].startswith("text/html")


def test_blog_index_newest_first(client: TestClient) -> None:
    """It should list posts newest first."""

    soup = BeautifulSoup(client.get("/blog").text, "lxml")
    titles = [a.get_text() for a in soup.select("div.blog-preview h1 a")]
    assert titles == ["Second", "First Post"]


def test_article_sidebar_outline(client: TestClient) -> None:
    """It should render the article with its nested outline."""

    soup = BeautifulSoup(client.get("/blog/first").text, "lxml")
    assert soup.select_one("h1.title").get_text() == "First Post"
    assert soup.find("meta", property="og:image")["content"] == "http://testserver/cover.png"

    outline = soup.select_one("nav.page-outline > ol")
    assert [a["href"] for a in outline.find_all("a")] == ["#intro", "#details", "#deeper", "#more"]
    intro = outline.li
    assert [li.a["href"] for li in intro.ol.find_all("li", recursive=False)] == ["#details", "#more"]


def test_article_without_headings_has_no_outline(client: TestClient) -> None:
    """It should omit the outline navigation for posts without headings."""

    soup = BeautifulSoup(client.get("/blog/second").text, "lxml")
    assert soup.select_one("nav.page-outline") is None


def test_outline_json(client: TestClient) -> None:
    """It should expose the outline forest as JSON."""

    resp = client.get("/blog/first/outline")
    assert resp.status_code == 200
    data = resp.json()
    assert [n["id"] for n in data] == ["intro"]
    assert [c["id"] for c in data[0]["children"]] == ["details", "more"]
    assert data[0]["children"][0]["children"][0] == {
        "id": "deeper",
        "level": 3,
        "text": "Deeper",
        "children": [],
    }


def test_blog_trailing_slash_redirects_to_index(client: TestClient) -> None:
    """It should send /blog/ to the blog index instead of looking up an empty slug."""

    resp = client.get("/blog/", follow_redirects=False)
    assert resp.status_code == 308
    assert resp.headers["location"] == "/blog"
    assert client.get("/blog/").status_code == 200


def test_blog_index_survives_undecodable_post(client: TestClient, settings: Settings) -> None:
    """It should list the readable posts and answer 500 for a post with invalid UTF-8 or dates."""

    bad = settings.content_dir / "blog" / "latin1" / "index.md"
    bad.parent.mkdir(parents=True)
    bad.write_bytes(b"---\ntitle: Caf\xe9\n---\nBody\n")
    _write(settings.content_dir / "blog" / "bad-date" / "index.md", "---\ndate: 2023-13-45\n---\nBody\n")

    resp = client.get("/blog")
    assert resp.status_code == 200
    soup = BeautifulSoup(resp.text, "lxml")
    assert "Second" in soup.get_text()
    assert client.get("/blog/latin1").status_code == 500
    assert client.get("/blog/bad-date").status_code == 500


def test_unknown_post_is_404(client: TestClient) -> None:
    """It should return 404 for posts that do not exist."""

    assert client.get("/blog/missing").status_code == 404
    assert client.get("/blog/missing/outline").status_code == 404


def test_projects_and_static_files(client: TestClient) -> None:
    """It should render the gallery and serve files from the public directory."""

    soup = BeautifulSoup(client.get("/projects").text, "lxml")
    assert len(soup.select("a.project")) == 4

    logo = client.get("/logo.svg")
    assert logo.status_code == 200
    assert "<svg>" in logo.text


def test_request_id_header(client: TestClient) -> None:
    """It should echo or assign a request id."""

    assert client.get("/health", headers={"X-Request-ID": "abc"}).headers["x-request-id"] == "abc"
    assert client.get("/health").headers["x-request-id"]


def test_projects_file_override(settings: Settings, tmp_path: Path) -> None:
    """It should load the gallery from a YAML file when configured."""

    projects_file = tmp_path / "projects.yaml"
    projects_file.write_text(
        "- title: Only One\n  url: https://one.example\n  description: Just one.\n  image_path: one.png\n",
        encoding="utf-8",
    )
    settings.projects_file = projects_file
    client = TestClient(create_app(settings))

    soup = BeautifulSoup(client.get("/projects").text, "lxml")
    assert [h2.get_text() for h2 in soup.select("a.project h2")] == ["Only One"]


def test_missing_projects_file_fails_at_startup(settings: Settings, tmp_path: Path) -> None:
    """It should refuse to start when the configured projects file does not exist."""

    settings.projects_file = tmp_path / "missing.yaml"
    with pytest.raises(ContentError, match="cannot read projects file"):
        create_app(settings)
