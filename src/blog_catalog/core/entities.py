"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Optional, Union

from blog_catalog.core.errors import ParseError

Number = Union[int, float]

# Header keys that map onto ContentMetadata attributes
HEADER_KEYS = ("title", "excerpt", "date", "category", "author", "readTime", "public", "image")


def parse_date(value: Any) -> date:
    """Parse an ISO-8601 date or date-time into a calendar date."""
    if not isinstance(value, str) or not value:
        raise ParseError(f"Invalid date: {value!r}")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError as e:
        raise ParseError(f"Invalid date: {value!r}") from e


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 date or date-time into an aware UTC datetime.

    Bare dates and naive date-times are taken as UTC.
    """
    parse_date(value)
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class ContentMetadata:
    """Normalized header fields of one post."""

    date: str
    title: Optional[str] = None
    excerpt: Optional[str] = None
    category: str = ""
    author: str = ""
    read_time: Optional[Number] = None
    public: bool = False
    image: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        parse_date(self.date)

    @property
    def published(self) -> date:
        return parse_date(self.date)

    @property
    def published_at(self) -> datetime:
        return parse_timestamp(self.date)

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> "ContentMetadata":
        """Build metadata from decoded header fields.

        A ``readTime`` that is not a number leaves ``read_time`` unset; the
        raw value is kept in ``extra``.

        Raises:
            ParseError: if ``date`` is missing or unparseable.
        """
        if "date" not in fields:
            raise ParseError("Missing required field: date")

        extra = {k: v for k, v in fields.items() if k not in HEADER_KEYS}
        read_time = fields.get("readTime")
        if read_time is not None and (
            isinstance(read_time, bool) or not isinstance(read_time, (int, float))
        ):
            extra["readTime"] = read_time
            read_time = None

        return cls(
            date=_as_text(fields["date"]) or "",
            title=_as_text(fields.get("title")),
            excerpt=_as_text(fields.get("excerpt")),
            category=_as_text(fields.get("category")) or "",
            author=_as_text(fields.get("author")) or "",
            read_time=read_time,
            public=fields.get("public") is True,
            image=_as_text(fields.get("image")),
            extra=extra,
        )

    def to_fields(self) -> dict[str, Any]:
        """Project back onto header keys, omitting absent values."""
        fields: dict[str, Any] = dict(self.extra)
        values = {
            "title": self.title,
            "excerpt": self.excerpt,
            "date": self.date,
            "category": self.category,
            "author": self.author,
            "readTime": self.read_time,
            "public": self.public,
            "image": self.image,
        }
        fields.update({k: v for k, v in values.items() if v is not None})
        return fields


@dataclass(frozen=True)
class CatalogEntry:
    """One discoverable post before its body is retrieved."""

    slug: str
    filename: str
    metadata: ContentMetadata
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("Filename cannot be empty")

    @property
    def source_ref(self) -> str:
        """Repository path when known, otherwise the bare filename."""
        return self.path or self.filename


@dataclass(frozen=True)
class ContentItem:
    """Catalog entry joined with its body text."""

    slug: str
    filename: str
    metadata: ContentMetadata
    body: str
    path: Optional[str] = None

    @property
    def title(self) -> Optional[str]:
        return self.metadata.title


@dataclass(frozen=True)
class RemoteListing:
    """Raw record from the GitHub contents API."""

    name: str
    path: str
    type: str
    download_url: Optional[str] = None

    def is_content_file(self, suffix: str) -> bool:
        return self.type == "file" and self.name.endswith(suffix)


@dataclass(frozen=True)
class SkippedItem:
    """Diagnostic for a catalog record that could not be used."""

    source: str
    reason: str


@dataclass(frozen=True)
class CatalogSnapshot:
    """Resolved catalog plus the records skipped while building it."""

    entries: list[CatalogEntry]
    skipped: list[SkippedItem] = field(default_factory=list)
