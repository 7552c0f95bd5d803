"""FastAPI app serving the site."""

from __future__ import annotations

import uuid
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from devblog import __version__
from devblog.config import Settings, load_settings
from devblog.content.errors import ContentError, PostNotFoundError
from devblog.content.posts import PostLibrary
from devblog.logging import configure_logging, get_logger, log_exception, request_context
from devblog.models.outline import OutlineNode
from devblog.models.post import Post
from devblog.outline import build_outline
from devblog.site.pages import (
    ArticlePage,
    BlogIndexPage,
    HomePage,
    Page,
    ProjectsPage,
    render_document,
)
from devblog.site.projects import load_projects


def cache_control_header(settings: Settings) -> str:
    """Cache-Control value for rendered pages."""

    return (
        f"public, max-age={settings.cache_max_age_s}, "
        f"stale-while-revalidate={settings.cache_stale_while_revalidate_s}"
    )


def create_app(settings: Settings | None = None, library: PostLibrary | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    library = library or PostLibrary.from_settings(settings)
    projects = load_projects(settings.projects_file)
    cache_control = cache_control_header(settings)

    app = FastAPI(title="devblog", version=__version__)

    @app.middleware("http")
    async def bind_request_context(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        with request_context(request_id=request_id, path=request.url.path):
            response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    def page_response(request: Request, page: Page) -> HTMLResponse:
        url = request.url
        html = render_document(
            page,
            url=str(url),
            origin=f"{url.scheme}://{url.netloc}",
            settings=settings,
            current_path=url.path,
        )
        return HTMLResponse(html, headers={"Cache-Control": cache_control})

    def get_post(slug: str) -> Post:
        try:
            return library.get(slug)
        except PostNotFoundError as e:
            raise HTTPException(status_code=404, detail="post not found") from e
        except ContentError as e:
            log_exception(logger, "Failed to load post", slug=slug)
            raise HTTPException(status_code=500, detail="post could not be rendered") from e

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request) -> HTMLResponse:
        try:
            post = library.page()
        except ContentError as e:
            log_exception(logger, "Failed to load home page")
            raise HTTPException(status_code=500, detail="page could not be rendered") from e
        return page_response(request, HomePage(settings=settings, post=post))

    @app.get("/blog", response_class=HTMLResponse)
    def blog_index(request: Request) -> HTMLResponse:
        posts = library.list_posts()
        logger.info("Rendering blog index", extra={"posts": len(posts)})
        return page_response(request, BlogIndexPage(posts=posts, settings=settings))

    @app.get("/blog/{slug:path}/outline", response_model=list[OutlineNode])
    def blog_outline(slug: str) -> list[OutlineNode]:
        return build_outline(get_post(slug).headings)

    @app.get("/blog/{slug:path}", response_class=HTMLResponse)
    def blog_post(request: Request, slug: str) -> Response:
        if not slug.strip("/"):
            return RedirectResponse(url="/blog", status_code=308)
        return page_response(request, ArticlePage(post=get_post(slug), settings=settings))

    @app.get("/projects", response_class=HTMLResponse)
    def projects_page(request: Request) -> HTMLResponse:
        return page_response(request, ProjectsPage(projects=projects))

    # Mounted last so the page routes above take precedence
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir), name="public")

    return app
