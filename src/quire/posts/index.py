"""Build the post index: metadata for every post, newest first."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quire.markdown.frontmatter import read_frontmatter_only
from quire.posts.loader import build_metadata
from quire.posts.source import discover_sources

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from quire.core.types import PostMetadata

logger = logging.getLogger(__name__)


def sort_posts(posts: Iterable[PostMetadata]) -> list[PostMetadata]:
    """Order posts by creation date, most recent first.

    Posts created at the same instant are ordered by slug.
    """
    by_slug = sorted(posts, key=lambda post: post.slug)
    return sorted(by_slug, key=lambda post: post.created_at, reverse=True)


def build_index(posts_dir: Path, category: str | None = None) -> list[PostMetadata]:
    """Read the metadata of every post in ``posts_dir`` and sort it.

    Bodies are never read or rendered. When ``category`` is given only posts
    tagged with it are returned.

    Raises:
        MalformedPostError: If any post's frontmatter is missing or invalid.

    """
    posts = [build_metadata(path, read_frontmatter_only(path)) for path in discover_sources(posts_dir)]
    if category is not None:
        posts = [post for post in posts if post.has_category(category)]
    logger.info("Indexed %d posts from %s", len(posts), posts_dir)
    return sort_posts(posts)


def categories_index(posts: Iterable[PostMetadata]) -> dict[str, list[PostMetadata]]:
    """Group already indexed posts by category.

    Categories are sorted alphabetically; each group keeps index order.
    """
    ordered = sort_posts(posts)
    names = sorted({name for post in ordered for name in post.categories})
    return {name: [post for post in ordered if post.has_category(name)] for name in names}
