# JSON API for the post collection
from pathlib import Path

from fastapi import APIRouter, Depends

from quire.core.types import Post, PostMetadata
from quire.posts.index import build_index
from quire.posts.loader import load_post
from quire.web.dependencies import get_posts_dir

router = APIRouter()


@router.get("", response_model=list[PostMetadata])
def list_posts(category: str | None = None, posts_dir: Path = Depends(get_posts_dir)):
    return build_index(posts_dir, category=category)


@router.get("/{slug}", response_model=Post)
def get_post(slug: str, posts_dir: Path = Depends(get_posts_dir)):
    return load_post(posts_dir, slug)
