"""Mapping between slugs and post source files."""

from __future__ import annotations

import logging
from pathlib import Path

from quire.core.exceptions import PostNotFoundError

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


def slug_for(path: Path) -> str:
    """Return the slug of a post source file (its file stem)."""
    return path.stem


def _is_post_file(path: Path) -> bool:
    return path.is_file() and path.suffix == POST_SUFFIX and not path.name.startswith(".")


def discover_sources(posts_dir: Path) -> list[Path]:
    """List post source files in ``posts_dir``, sorted by name.

    The scan is not recursive. A missing directory yields an empty list.
    """
    if not posts_dir.is_dir():
        logger.warning("Posts directory %s does not exist", posts_dir)
        return []
    return sorted(p for p in posts_dir.iterdir() if _is_post_file(p))


def resolve_slug(posts_dir: Path, slug: str) -> Path:
    """Return the source file for ``slug``.

    Raises:
        PostNotFoundError: If the slug is not a plain file name or no file matches.

    """
    if not slug or slug.startswith(".") or "/" in slug or "\\" in slug:
        raise PostNotFoundError(slug)

    path = posts_dir / f"{slug}{POST_SUFFIX}"
    if not _is_post_file(path):
        raise PostNotFoundError(slug)
    return path
