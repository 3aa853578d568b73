"""FastAPI application serving the blog pages and the JSON API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from quire import __version__
from quire.core.config import QuireConfig
from quire.core.exceptions import CategoryNotFoundError, MalformedPostError, PostNotFoundError
from quire.site.pages import PageRenderer
from quire.web import api, pages

logger = logging.getLogger(__name__)

API_PREFIX = "/api/posts"


def _error_response(request: Request, status_code: int, message: str) -> Response:
    if request.url.path.startswith(API_PREFIX):
        return JSONResponse(status_code=status_code, content={"detail": message})
    renderer: PageRenderer = request.app.state.pages
    return HTMLResponse(renderer.render_error(status_code, message), status_code=status_code)


async def _not_found(request: Request, exc: Exception) -> Response:
    logger.info("404 %s: %s", request.url.path, exc)
    return _error_response(request, 404, str(exc))


async def _malformed(request: Request, exc: Exception) -> Response:
    logger.error("Malformed post while serving %s: %s", request.url.path, exc)
    return _error_response(request, 500, str(exc))


def create_app(config: QuireConfig | None = None) -> FastAPI:
    """Build the application for the site described by ``config``."""
    config = config or QuireConfig.load()

    app = FastAPI(title=config.site.title, version=__version__)
    app.state.config = config
    app.state.pages = PageRenderer(config)

    app.include_router(api.router, prefix=API_PREFIX)
    app.include_router(pages.router)

    app.add_exception_handler(PostNotFoundError, _not_found)
    app.add_exception_handler(CategoryNotFoundError, _not_found)
    app.add_exception_handler(MalformedPostError, _malformed)

    logger.info("Serving posts from %s", config.paths.abs_posts_dir)
    return app
