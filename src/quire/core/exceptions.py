"""Centralized exceptions for Quire."""


class QuireError(Exception):
    """Base exception for all Quire errors."""


class PostNotFoundError(QuireError):
    """Raised when a slug does not resolve to a post source file."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Post '{slug}' not found.")


class MalformedPostError(QuireError):
    """Raised when a post's metadata is missing, incomplete or unparsable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load post at '{path}': {reason}")


class FrontmatterParsingError(MalformedPostError):
    """Raised when YAML frontmatter is invalid."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, f"invalid YAML frontmatter: {reason}")


class ConfigLoadError(QuireError):
    """Raised when a site configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")


class CategoryNotFoundError(QuireError):
    """Raised when no post carries the requested category."""

    def __init__(self, category_slug: str) -> None:
        self.category_slug = category_slug
        super().__init__(f"No posts in category '{category_slug}'.")
