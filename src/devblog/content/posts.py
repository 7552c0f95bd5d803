"""Blog post catalog.

Posts live under `<content_dir>/blog/<slug>/index.md`; the slug is the directory path relative to
`blog/` and may contain `/`. The site home page is `<content_dir>/index.md`.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from devblog.config import Settings
from devblog.content.cache import ContentCache
from devblog.content.errors import ContentError, PostNotFoundError
from devblog.content.markdown import MarkdownRenderer
from devblog.logging import get_logger, log_exception
from devblog.models.post import Post, PostFrontmatter

logger = get_logger(__name__)

POST_FILENAME = "index.md"


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    """Order posts newest first.

    Undated posts follow the dated ones, in slug order.
    """

    items = sorted(posts, key=lambda p: p.slug)
    dated = [p for p in items if p.date is not None]
    undated = [p for p in items if p.date is None]
    dated.sort(key=lambda p: p.date, reverse=True)  # type: ignore[arg-type, return-value]
    return dated + undated


class PostLibrary:
    """Load, cache and list Markdown documents from the content directory."""

    def __init__(
        self,
        content_dir: Path,
        *,
        renderer: MarkdownRenderer | None = None,
        cache: ContentCache[Post] | None = None,
    ) -> None:
        self._content_dir = content_dir
        self._renderer = renderer or MarkdownRenderer()
        self._cache: ContentCache[Post] = cache if cache is not None else ContentCache()

    @classmethod
    def from_settings(cls, settings: Settings) -> PostLibrary:
        renderer = MarkdownRenderer(
            highlight_code=settings.highlight_code,
            pygments_style=settings.pygments_style,
        )
        return cls(
            settings.content_dir,
            renderer=renderer,
            cache=ContentCache(max_size=settings.content_cache_size),
        )

    @property
    def blog_dir(self) -> Path:
        return self._content_dir / "blog"

    @property
    def cache(self) -> ContentCache[Post]:
        return self._cache

    def load(self, path: Path, *, slug: str) -> Post:
        """Render a single Markdown file (through the cache).

        Raises:
            FileNotFoundError: If the file does not exist.
            ContentError: If it cannot be decoded or its front matter is malformed.
        """

        def _load(resolved: Path) -> Post:
            try:
                text = resolved.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ContentError(f"unreadable post {resolved}: {e}") from e
            rendered = self._renderer.render(text)
            try:
                frontmatter = PostFrontmatter.model_validate(rendered.frontmatter)
            except ValidationError as e:
                raise ContentError(f"invalid front matter in {resolved}: {e}") from e
            return Post(
                slug=slug,
                source_path=resolved,
                frontmatter=frontmatter,
                html=rendered.html,
                headings=rendered.headings,
            )

        return self._cache.get_or_load(path, _load)

    def discover(self) -> list[tuple[str, Path]]:
        """Find post files, returning `(slug, path)` pairs in slug order."""

        if not self.blog_dir.is_dir():
            return []

        found: list[tuple[str, Path]] = []
        for path in self.blog_dir.rglob(POST_FILENAME):
            rel = path.parent.relative_to(self.blog_dir)
            if not rel.parts:
                # blog/index.md is the index page itself, not a post
                continue
            found.append(("/".join(rel.parts), path))
        found.sort(key=lambda item: item[0])
        return found

    def list_posts(self) -> list[Post]:
        """Load every post, newest first. Broken posts are logged and skipped."""

        posts: list[Post] = []
        for slug, path in self.discover():
            try:
                posts.append(self.load(path, slug=slug))
            except ContentError:
                log_exception(logger, "Skipping post with invalid content", slug=slug)
        return sort_posts(posts)

    def get(self, slug: str) -> Post:
        """Load the post published under `slug`.

        Raises:
            PostNotFoundError: If there is no such post.
        """

        path = self._post_path(slug)
        if path is None or not path.is_file():
            raise PostNotFoundError(f"post not found: {slug}")
        return self.load(path, slug=slug.strip("/"))

    def page(self, name: str = POST_FILENAME) -> Post | None:
        """Load a standalone page from the content root, or None if it does not exist."""

        path = self._content_dir / name
        if not path.is_file():
            return None
        return self.load(path, slug=path.stem)

    def _post_path(self, slug: str) -> Path | None:
        parts = [p for p in slug.strip("/").split("/") if p]
        if not parts or any(p in (".", "..") for p in parts):
            return None
        return self.blog_dir.joinpath(*parts, POST_FILENAME)
