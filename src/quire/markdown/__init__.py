"""Markdown source helpers."""
