from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from textwrap import dedent

import pytest

from quire.core.config import QuireConfig


@dataclass(slots=True)
class SiteFixture:
    """A throwaway site root with a ``posts`` directory."""

    root: Path

    @property
    def posts_dir(self) -> Path:
        return self.root / "posts"

    def write_post(self, slug: str, text: str) -> Path:
        path = self.posts_dir / f"{slug}.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip(), encoding="utf-8")
        return path

    def config(self) -> QuireConfig:
        return QuireConfig.load(self.root)


HELLO_WORLD = """
    ---
    title: Hello World
    createdDate: 2023-01-05
    lastUpdatedDate: 2023-02-01
    categories:
      - Python
      - Meta
    author: Ada
    estimatedReadingTimeInMins: 3
    ---
    # Hello

    This is the **first** post.
    """

SVELTE_NOTES = """
    ---
    title: Notes on Svelte
    createdDate: 2024-03-10
    lastUpdatedDate: 2024-03-12
    categories: [Web, Python]
    author: Grace
    estimatedReadingTimeInMins: 7
    ---
    Some notes.

    | a | b |
    |---|---|
    | 1 | 2 |
    """

OLDEST = """
    ---
    title: "Oldest: a retrospective"
    createdDate: "2021-06-30"
    lastUpdatedDate: 2021-06-30T08:15:00Z
    categories: []
    author: Linus
    estimatedReadingTimeInMins: 1
    ---
    Short.
    """


@pytest.fixture
def site(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> SiteFixture:
    """Empty site root; QUIRE_* variables from the caller's shell are cleared."""
    for key in list(os.environ):
        if key.startswith("QUIRE_"):
            monkeypatch.delenv(key)
    site = SiteFixture(root=tmp_path)
    site.posts_dir.mkdir()
    return site


@pytest.fixture
def blog(site: SiteFixture) -> SiteFixture:
    """Site with three well-formed posts."""
    site.write_post("hello-world", HELLO_WORLD)
    site.write_post("svelte-notes", SVELTE_NOTES)
    site.write_post("oldest", OLDEST)
    return site
