"""Error taxonomy for catalog resolution."""

from typing import Optional


class BlogCatalogError(Exception):
    """Base class for all errors raised by blog_catalog."""


class NotFound(BlogCatalogError):
    """Requested post is absent from the catalog or from the repository."""


class UpstreamError(BlogCatalogError):
    """Remote service answered with a non-success status or the transport failed."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class ParseError(BlogCatalogError):
    """Document or metadata record could not be decoded."""


class MalformedHeader(ParseError):
    """Document does not open with a delimited header block."""
