"""HTML pages for the index, single posts and errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quire.core.utils import category_slugs
from quire.site.templates import TemplateLoader

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quire.core.config import QuireConfig
    from quire.core.types import Post, PostMetadata


def slugs_for(posts: Iterable[PostMetadata]) -> dict[str, str]:
    """Category name to page path segment, for every category the posts use."""
    return category_slugs(name for post in posts for name in post.categories)


def find_category(slugs: dict[str, str], category_slug: str) -> str | None:
    """Return the category name addressed by ``category_slug``, if any."""
    for name, slug in slugs.items():
        if slug == category_slug:
            return name
    return None


class PageRenderer:
    """Renders the blog pages with the site settings in every template context."""

    def __init__(self, config: QuireConfig) -> None:
        self.loader = TemplateLoader(
            override_dir=config.paths.abs_templates_dir,
            globals_={"site": config.site},
        )

    def render_index(
        self, posts: list[PostMetadata], slugs: dict[str, str], category: str | None = None
    ) -> str:
        return self.loader.render_template(
            "index.html", posts=posts, category_slugs=slugs, category=category
        )

    def render_post(self, post: Post, slugs: dict[str, str]) -> str:
        return self.loader.render_template("post.html", post=post, category_slugs=slugs)

    def render_error(self, status_code: int, message: str) -> str:
        return self.loader.render_template("error.html", status_code=status_code, message=message)
