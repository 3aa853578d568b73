# HTML page routes
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from quire.core.exceptions import CategoryNotFoundError
from quire.posts.index import build_index
from quire.posts.loader import load_post
from quire.site.pages import PageRenderer, find_category, slugs_for
from quire.web.dependencies import get_pages, get_posts_dir

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def index_page(posts_dir: Path = Depends(get_posts_dir), pages: PageRenderer = Depends(get_pages)):
    index = build_index(posts_dir)
    return pages.render_index(index, slugs_for(index))


@router.get("/blog/{slug}")
def post_page(slug: str, posts_dir: Path = Depends(get_posts_dir), pages: PageRenderer = Depends(get_pages)):
    post = load_post(posts_dir, slug)
    # Category links need the slugs of the whole collection, not just this post's.
    return pages.render_post(post, slugs_for(build_index(posts_dir)))


@router.get("/category/{category_slug}")
def category_page(
    category_slug: str,
    posts_dir: Path = Depends(get_posts_dir),
    pages: PageRenderer = Depends(get_pages),
):
    index = build_index(posts_dir)
    slugs = slugs_for(index)
    category = find_category(slugs, category_slug)
    if category is None:
        raise CategoryNotFoundError(category_slug)
    members = [post for post in index if post.has_category(category)]
    return pages.render_index(members, slugs, category=category)
