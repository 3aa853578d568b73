"""Post loading and index building."""

from quire.posts.index import build_index, categories_index
from quire.posts.loader import load_post

__all__ = ["build_index", "categories_index", "load_post"]
