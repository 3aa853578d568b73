"""Static export of the whole blog.

Writes one HTML page per post, the index, one page per category and the JSON
index payload into the configured output directory.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from quire.core.exceptions import QuireError
from quire.posts.index import build_index, categories_index
from quire.posts.loader import load_post
from quire.site.pages import PageRenderer, slugs_for

if TYPE_CHECKING:
    from pathlib import Path

    from quire.core.config import QuireConfig
    from quire.core.types import PostMetadata

logger = logging.getLogger(__name__)

GENERATED_SUFFIXES = (".html", ".json")


@dataclass(slots=True)
class BuildReport:
    """Summary of a static build."""

    output_dir: Path
    posts: int = 0
    categories: int = 0
    files: list[Path] = field(default_factory=list)


def index_payload(posts: list[PostMetadata]) -> str:
    """Serialise the index the same way the JSON API does."""
    data = [post.model_dump(mode="json", by_alias=True) for post in posts]
    return json.dumps(data, indent=2, ensure_ascii=False)


class SiteBuilder:
    """Writes the blog to ``config.paths.abs_output_dir``."""

    def __init__(self, config: QuireConfig) -> None:
        self.config = config
        self.posts_dir = config.paths.abs_posts_dir
        self.output_dir = config.paths.abs_output_dir
        self.pages = PageRenderer(config)

    def build(self) -> BuildReport:
        """Run the build.

        Every post is loaded before anything is written, so a malformed post
        aborts the build and leaves the previous output untouched.

        Raises:
            MalformedPostError: If any post's frontmatter is missing or invalid.

        """
        self._check_output_dir()

        index = build_index(self.posts_dir)
        posts = [load_post(self.posts_dir, meta.slug) for meta in index]
        by_category = categories_index(index)
        slugs = slugs_for(index)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._clean_generated_files()

        report = BuildReport(output_dir=self.output_dir, posts=len(posts), categories=len(by_category))
        report.files.append(self._write("index.html", self.pages.render_index(index, slugs)))
        report.files.append(self._write("api/posts.json", index_payload(index)))

        for post in posts:
            page = self.pages.render_post(post, slugs)
            report.files.append(self._write(f"blog/{post.slug}/index.html", page))

        for name, members in by_category.items():
            page = self.pages.render_index(members, slugs, category=name)
            report.files.append(self._write(f"category/{slugs[name]}/index.html", page))

        logger.info(
            "Built %d posts and %d categories into %s", report.posts, report.categories, self.output_dir
        )
        return report

    def _check_output_dir(self) -> None:
        """Refuse output directories that contain the site sources.

        Cleaning walks the whole output tree, so building into the site root,
        the posts directory or any directory above them would delete files
        that are not build output.
        """
        output_dir = self.output_dir.resolve()
        for source in (self.config.paths.site_root, self.posts_dir):
            if source.resolve().is_relative_to(output_dir):
                raise QuireError(f"Refusing to build into {self.output_dir}: it contains {source}.")

    def _clean_generated_files(self) -> None:
        """Remove pages and payloads left by an earlier build."""
        for path in self.output_dir.rglob("*"):
            if path.is_file() and path.suffix in GENERATED_SUFFIXES:
                path.unlink()

    def _write(self, relative: str, content: str) -> Path:
        target = self.output_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", target)
        return target


def build_site(config: QuireConfig) -> BuildReport:
    """Build the static site described by ``config``."""
    return SiteBuilder(config).build()
