"""Tests for the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from devblog.cli import app

runner = CliRunner()

DOC = "---\ntitle: Doc\n---\n# Top\n\n## Child A\n\n## Child B\n\n# Second\n"


@pytest.fixture()
def doc(tmp_path: Path) -> Path:
    path = tmp_path / "doc.md"
    path.write_text(DOC, encoding="utf-8")
    return path


def test_toc_json(doc: Path) -> None:
    """It should print the outline forest as JSON."""

    result = runner.invoke(app, ["toc", str(doc), "--format", "json"])
    assert result.exit_code == 0, result.output

    data = json.loads(result.output)
    assert [n["id"] for n in data] == ["top", "second"]
    assert [c["text"] for c in data[0]["children"]] == ["Child A", "Child B"]


def test_toc_html(doc: Path) -> None:
    """It should print the rendered navigation list."""

    result = runner.invoke(app, ["toc", str(doc), "-f", "html"])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("<ol>")
    assert 'href="#child-a"' in result.output


def test_toc_tree(doc: Path) -> None:
    """It should print a tree with every heading."""

    result = runner.invoke(app, ["toc", str(doc)])
    assert result.exit_code == 0, result.output
    for text in ("doc.md", "Top", "Child A", "Child B", "Second"):
        assert text in result.output


def test_toc_rejects_bad_front_matter(tmp_path: Path) -> None:
    """It should fail with a usage error for malformed front matter."""

    bad = tmp_path / "bad.md"
    bad.write_text("---\n- not a mapping\n---\n# T\n", encoding="utf-8")
    result = runner.invoke(app, ["toc", str(bad)])
    assert result.exit_code != 0


def test_posts_lists_newest_first(tmp_path: Path) -> None:
    """It should list posts with dates, newest first."""

    for slug, day in (("old", "2020-01-01"), ("new", "2022-06-15")):
        path = tmp_path / "blog" / slug / "index.md"
        path.parent.mkdir(parents=True)
        path.write_text(f"---\ntitle: {slug.title()}\ndate: {day}\n---\nBody\n", encoding="utf-8")

    result = runner.invoke(app, ["posts", "--content-dir", str(tmp_path)])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines[0].split("\t") == ["new", "June 15, 2022", "New"]
    assert lines[1].startswith("old\t")
