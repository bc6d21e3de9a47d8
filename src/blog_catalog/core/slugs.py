"""URL-safe slugs for post filenames."""

import re


def slugify(text: str) -> str:
    """Convert display text to a URL-safe slug.

    Lowercases, turns whitespace runs into hyphens, drops everything outside
    ``[a-z0-9-]`` and collapses repeated hyphens. Distinct inputs may map to
    the same slug ("My Post!" and "my-post" both give "my-post").
    """
    slug = text.lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def slug_from_filename(filename: str, suffix: str = ".md") -> str:
    """Slugify a filename, ignoring its directory and content suffix."""
    name = filename.rsplit("/", 1)[-1]
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    return slugify(name)
