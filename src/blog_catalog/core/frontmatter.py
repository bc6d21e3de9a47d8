"""Frontmatter parser for post documents.

A post opens with a header block::

    ---
    title: "Hello"
    date: 2025-01-01
    public: true
    readTime: 5
    ---
    Body text...

Only flat ``key: value`` lines are understood. Values are decoded with a
fixed set of rules so the same document always yields the same fields:

1. a value wrapped in matching single or double quotes loses one pair of
   quotes and stays text;
2. ``true`` / ``false`` become booleans;
3. a plain decimal literal becomes ``int`` (no fraction or exponent) or
   ``float``;
4. anything else stays text.
"""

import re
from typing import Any, Union

from blog_catalog.core.errors import MalformedHeader

FieldValue = Union[str, bool, int, float]

_DOCUMENT_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL,
)
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def coerce_value(raw: str) -> FieldValue:
    """Decode one header value according to the module rules."""
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ("'", '"'):
        return raw[1:-1]

    if raw == "true":
        return True
    if raw == "false":
        return False

    if _INT_RE.fullmatch(raw):
        return int(raw)
    if _FLOAT_RE.fullmatch(raw):
        return float(raw)

    return raw


def parse_header_lines(block: str) -> dict[str, Any]:
    """Decode the lines between the header markers."""
    fields: dict[str, Any] = {}

    for line in block.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue

        key = key.strip()
        if not key:
            continue

        # Later duplicates overwrite earlier ones
        fields[key] = coerce_value(value.strip())

    return fields


def parse_frontmatter(document: str) -> tuple[dict[str, Any], str]:
    """Split a document into decoded header fields and body text.

    Returns:
        Tuple of (fields, body) where body has surrounding whitespace removed.

    Raises:
        MalformedHeader: if the document does not start with a ``---``
            delimited header block.
    """
    match = _DOCUMENT_RE.match(document)
    if not match:
        raise MalformedHeader("Invalid frontmatter format")

    block, body = match.groups()
    return parse_header_lines(block), body.strip()
