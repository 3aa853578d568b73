"""Small text helpers shared by the site builder and the web app."""

import re
from collections.abc import Iterable
from unicodedata import normalize

FALLBACK_CATEGORY_SLUG = "category"


def category_slug(name: str) -> str:
    """Path segment for a single category name.

    Word characters of any script are kept and lowercased; every other run of
    characters becomes one hyphen. Different names can share a segment
    ("C++" and "C#" both give "c"), so pages are addressed through
    :func:`category_slugs`, which resolves those clashes.

    Examples:
        >>> category_slug("Machine Learning & AI")
        'machine-learning-ai'
        >>> category_slug("日本語")
        '日本語'

    """
    words = re.findall(r"\w+", normalize("NFKC", name).lower())
    return "-".join(words) or FALLBACK_CATEGORY_SLUG


def category_slugs(names: Iterable[str]) -> dict[str, str]:
    """Give every category a distinct path segment.

    Names are assigned in sorted order, so the mapping only depends on the set
    of categories. A segment already taken gets a numeric suffix: "C#" maps to
    "c" and "C++" to "c-2".
    """
    taken: set[str] = set()
    slugs: dict[str, str] = {}
    for name in sorted(set(names)):
        base = category_slug(name)
        candidate = base
        suffix = 2
        while candidate in taken:
            candidate = f"{base}-{suffix}"
            suffix += 1
        taken.add(candidate)
        slugs[name] = candidate
    return slugs


def dedupe(items: list[str]) -> list[str]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))
