"""CLI entrypoints for devblog."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from devblog.api.serve import main as serve_main
from devblog.config import load_settings
from devblog.content.errors import ContentError
from devblog.content.markdown import MarkdownRenderer
from devblog.content.posts import PostLibrary
from devblog.logging import configure_logging, get_logger
from devblog.models.outline import OutlineNode
from devblog.outline import build_outline, render_outline_html
from devblog.site.pages import format_post_date

app = typer.Typer(add_completion=False, help="devblog site tools")
logger = get_logger(__name__)


class OutlineFormat(str, Enum):
    tree = "tree"
    json = "json"
    html = "html"


def _add_branches(tree: Tree, nodes: tuple[OutlineNode, ...] | list[OutlineNode]) -> None:
    for node in nodes:
        branch = tree.add(f"{escape(node.text)} [dim]#{escape(node.id)}[/dim]")
        _add_branches(branch, node.children)


@app.command()
def toc(
    path: Path = typer.Argument(..., help="Markdown file to outline", exists=True, dir_okay=False),
    fmt: OutlineFormat = typer.Option(OutlineFormat.tree, "--format", "-f", help="Output format"),
) -> None:
    """Print the table of contents of a Markdown document."""

    settings = load_settings()
    configure_logging(settings.log_level)

    renderer = MarkdownRenderer(highlight_code=False)
    try:
        rendered = renderer.render(path.read_text(encoding="utf-8"))
    except ContentError as e:
        raise typer.BadParameter(str(e), param_hint="PATH") from e

    forest = build_outline(rendered.headings)
    logger.debug("Built outline with %d roots from %s", len(forest), path)

    if fmt is OutlineFormat.json:
        typer.echo(json.dumps([n.model_dump() for n in forest], indent=2, ensure_ascii=False))
    elif fmt is OutlineFormat.html:
        typer.echo(render_outline_html(forest))
    else:
        tree = Tree(f"[bold]{escape(path.name)}[/bold]")
        _add_branches(tree, forest)
        Console().print(tree)


@app.command()
def posts(
    content_dir: Path | None = typer.Option(
        None,
        "--content-dir",
        help="Content directory (overrides DEVBLOG_CONTENT_DIR)",
    ),
) -> None:
    """List blog posts, newest first."""

    settings = load_settings()
    if content_dir is not None:
        settings.content_dir = content_dir
    configure_logging(settings.log_level)

    library = PostLibrary.from_settings(settings)
    for post in library.list_posts():
        date_text = format_post_date(post) or "undated"
        typer.echo(f"{post.slug}\t{date_text}\t{post.title}")


app.command("serve")(serve_main)


if __name__ == "__main__":
    app()
