"""Request-scoped accessors for application state."""

from __future__ import annotations

from pathlib import Path

from fastapi import Request

from quire.core.config import QuireConfig
from quire.site.pages import PageRenderer


def get_config(request: Request) -> QuireConfig:
    return request.app.state.config


def get_posts_dir(request: Request) -> Path:
    return get_config(request).paths.abs_posts_dir


def get_pages(request: Request) -> PageRenderer:
    return request.app.state.pages
