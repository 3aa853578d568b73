from pathlib import Path

import pytest

from quire.core.exceptions import PostNotFoundError
from quire.posts.source import discover_sources, resolve_slug, slug_for


def test_discover_sources_lists_markdown_files_sorted(tmp_path: Path):
    for name in ("b.md", "a.md", ".hidden.md", "notes.txt"):
        (tmp_path / name).write_text("x")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.md").write_text("x")

    assert [p.name for p in discover_sources(tmp_path)] == ["a.md", "b.md"]


def test_discover_sources_missing_directory(tmp_path: Path):
    assert discover_sources(tmp_path / "missing") == []


def test_resolve_slug(tmp_path: Path):
    path = tmp_path / "hello-world.md"
    path.write_text("x")

    assert resolve_slug(tmp_path, "hello-world") == path
    assert slug_for(path) == "hello-world"


@pytest.mark.parametrize("slug", ["missing", "", ".hidden", "../secret", "nested/c", "..\\secret"])
def test_resolve_slug_not_found(tmp_path: Path, slug: str):
    (tmp_path / ".hidden.md").write_text("x")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.md").write_text("x")
    (tmp_path.parent / "secret.md").write_text("x")

    with pytest.raises(PostNotFoundError) as excinfo:
        resolve_slug(tmp_path, slug)

    assert excinfo.value.slug == slug
