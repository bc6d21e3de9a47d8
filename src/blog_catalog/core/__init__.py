"""Core domain layer."""

from blog_catalog.core.entities import (
    CatalogEntry,
    CatalogSnapshot,
    ContentItem,
    ContentMetadata,
    RemoteListing,
    SkippedItem,
)
from blog_catalog.core.errors import (
    BlogCatalogError,
    MalformedHeader,
    NotFound,
    ParseError,
    UpstreamError,
)
from blog_catalog.core.frontmatter import parse_frontmatter
from blog_catalog.core.interfaces import CatalogResolver, ContentFetcher, SitemapGenerator
from blog_catalog.core.slugs import slug_from_filename, slugify
from blog_catalog.core.ttl_cache import TTLCache

__all__ = [
    "CatalogEntry",
    "CatalogSnapshot",
    "ContentItem",
    "ContentMetadata",
    "RemoteListing",
    "SkippedItem",
    "BlogCatalogError",
    "MalformedHeader",
    "NotFound",
    "ParseError",
    "UpstreamError",
    "parse_frontmatter",
    "CatalogResolver",
    "ContentFetcher",
    "SitemapGenerator",
    "slugify",
    "slug_from_filename",
    "TTLCache",
]
