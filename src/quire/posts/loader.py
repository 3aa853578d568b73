"""Load a single post, metadata and rendered body."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from quire.core.exceptions import MalformedPostError
from quire.core.rendering import render_html
from quire.core.types import Post, PostMetadata
from quire.markdown.frontmatter import parse_frontmatter_file
from quire.posts.source import resolve_slug, slug_for

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def _describe(exc: ValidationError) -> str:
    """Flatten a pydantic error into one line naming the offending keys."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


def build_metadata(path: Path, metadata: dict[str, Any]) -> PostMetadata:
    """Validate raw frontmatter for the post stored at ``path``.

    The slug always comes from the file name, never from the frontmatter.

    Raises:
        MalformedPostError: If required fields are missing or values are invalid.

    """
    fields = {key: value for key, value in metadata.items() if key not in ("slug", "content")}
    try:
        return PostMetadata.model_validate({**fields, "slug": slug_for(path)})
    except ValidationError as exc:
        raise MalformedPostError(str(path), _describe(exc)) from exc


def load_post_file(path: Path) -> Post:
    """Parse and render the post stored at ``path``."""
    raw_metadata, body = parse_frontmatter_file(path)
    metadata = build_metadata(path, raw_metadata)
    logger.debug("Rendering %s (%d chars of markdown)", path, len(body))
    return Post(**metadata.model_dump(), content=render_html(body))


def load_post(posts_dir: Path, slug: str) -> Post:
    """Load the post identified by ``slug`` with its content rendered.

    Raises:
        PostNotFoundError: If no source file matches the slug.
        MalformedPostError: If the frontmatter is missing or invalid.

    """
    return load_post_file(resolve_slug(posts_dir, slug))
