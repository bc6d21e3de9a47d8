"""Business logic use cases."""

from typing import Optional

from blog_catalog.core import (
    CatalogEntry,
    CatalogResolver,
    ContentFetcher,
    ContentItem,
    ContentMetadata,
    SitemapGenerator,
    TTLCache,
    parse_frontmatter,
)


class BlogService:
    """Service joining catalog metadata with post bodies."""

    def __init__(
        self,
        resolver: CatalogResolver,
        fetcher: ContentFetcher,
        cache: TTLCache,
        sitemap_generator: Optional[SitemapGenerator] = None,
    ) -> None:
        self.resolver = resolver
        self.fetcher = fetcher
        self.cache = cache
        self.sitemap_generator = sitemap_generator

    async def get_item(self, slug: str) -> ContentItem:
        """Assemble one post by slug.

        The fetched document is always re-parsed: the catalog may carry only
        a thin projection of the header, and fields in the document win over
        catalog fields.

        Raises:
            NotFound: slug is not in the catalog or the file is gone.
            UpstreamError: GitHub failed.
            ParseError: the document header is malformed.
        """
        summary = await self.resolver.find_summary_by_slug(slug)
        document = await self.fetcher.fetch_body(summary.source_ref)
        fields, body = parse_frontmatter(document)

        merged = {**summary.metadata.to_fields(), **fields}
        metadata = ContentMetadata.from_fields(merged)

        return ContentItem(
            slug=summary.slug,
            filename=summary.filename,
            metadata=metadata,
            body=body,
            path=summary.path,
        )

    async def get_public_summaries(self) -> list[CatalogEntry]:
        """Visible catalog entries, newest first. No bodies are fetched."""
        return await self.resolver.list_public_summaries()

    async def generate_sitemap(self, site_url: str) -> str:
        """Render the public catalog as a sitemap."""
        if self.sitemap_generator is None:
            raise RuntimeError("No sitemap generator configured")
        return self.sitemap_generator.generate(await self.get_public_summaries(), site_url)

    def refresh(self, pattern: Optional[str] = None) -> None:
        """Force-refresh cached data without waiting for the TTL.

        Args:
            pattern: Only drop cache keys containing this substring
                (e.g. ``"blog-content:"``). None drops everything.
        """
        self.cache.invalidate(pattern)
