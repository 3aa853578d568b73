"""Quire: a small Markdown blog engine with a JSON API and static export."""

__version__ = "0.1.0"
