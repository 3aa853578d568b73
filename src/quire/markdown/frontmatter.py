"""Helpers for parsing YAML frontmatter from Markdown posts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

from quire.core.exceptions import FrontmatterParsingError, MalformedPostError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Same delimiter rule and YAML loader python-frontmatter applies, so the
# metadata-only path accepts exactly the files the full parse accepts.
_HANDLER = frontmatter.YAMLHandler()
BOUNDARY = _HANDLER.FM_BOUNDARY


def parse_frontmatter(content: str, *, source: str = "<string>") -> tuple[dict[str, Any], str]:
    """Parse YAML frontmatter using python-frontmatter.

    Args:
        content: Markdown content starting with a frontmatter block.
        source: Name used in error messages, usually the file path.

    Returns:
        Tuple of (metadata dict, body string).

    Raises:
        FrontmatterParsingError: If the YAML is invalid, or the block is absent or
            not a mapping.

    """
    try:
        parsed = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontmatterParsingError(source, str(exc)) from exc

    raw_metadata = parsed.metadata
    if not isinstance(raw_metadata, dict):
        raise FrontmatterParsingError(source, f"expected a mapping, got {type(raw_metadata).__name__}")
    if not raw_metadata:
        raise FrontmatterParsingError(source, "no frontmatter block found")

    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)
    return dict(raw_metadata), body


def parse_frontmatter_file(path: Path, *, encoding: str = "utf-8") -> tuple[dict[str, Any], str]:
    """Read a Markdown file and parse its frontmatter.

    Args:
        path: File system path to the Markdown document.
        encoding: File encoding used to read the file.

    Returns:
        Tuple of (metadata dict, body string).

    Raises:
        OSError: If the file cannot be read.
        FrontmatterParsingError: If the frontmatter cannot be parsed.

    """
    content = path.read_text(encoding=encoding)
    return parse_frontmatter(content, source=str(path))


def read_frontmatter_only(path: Path, *, encoding: str = "utf-8") -> dict[str, Any]:
    """Read only the frontmatter from a Markdown file, stopping at the delimiter.

    Leading blank lines are skipped and any line of three or more dashes is a
    delimiter, matching :func:`parse_frontmatter`.

    This avoids reading the post body when only metadata is needed.

    Raises:
        OSError: If the file cannot be read.
        FrontmatterParsingError: If the block is missing, unterminated or invalid.

    """
    with path.open("r", encoding=encoding) as f:
        first_line = next((line for line in f if line.strip()), "")
        if not BOUNDARY.match(first_line.lstrip()):
            raise FrontmatterParsingError(str(path), "no frontmatter block found")

        lines = []
        for line in f:
            if BOUNDARY.match(line):
                break
            lines.append(line)
        else:
            raise MalformedPostError(str(path), "frontmatter block is not closed")

    try:
        data = _HANDLER.load("".join(lines))
    except yaml.YAMLError as exc:
        raise FrontmatterParsingError(str(path), str(exc)) from exc

    if not isinstance(data, dict):
        raise FrontmatterParsingError(str(path), f"expected a mapping, got {type(data).__name__}")
    logger.debug("Read %d frontmatter keys from %s", len(data), path)
    return data
