"""Catalog strategy that opens every post in the content directory."""

from blog_catalog.adapters.catalog.base import BaseCatalogResolver
from blog_catalog.core import (
    CatalogEntry,
    CatalogSnapshot,
    ContentMetadata,
    ParseError,
    SkippedItem,
    parse_frontmatter,
    slug_from_filename,
)


class EnumerationResolver(BaseCatalogResolver):
    """List the content directory and read each post's header.

    Costs one request per post on a cold cache, so it only suits small
    catalogs. Posts with a broken header are skipped, not fatal.
    """

    emoji = "📂"
    name = "GitHub directory listing"

    async def _resolve(self) -> CatalogSnapshot:
        listings = await self.fetcher.list_directory()

        entries: list[CatalogEntry] = []
        skipped: list[SkippedItem] = []

        for listing in listings:
            if not listing.is_content_file(self.content_suffix):
                continue

            try:
                document = await self.fetcher.fetch_body(listing.path)
                fields, _ = parse_frontmatter(document)
                metadata = ContentMetadata.from_fields(fields)
            except ParseError as e:
                skipped.append(SkippedItem(source=listing.path, reason=str(e)))
                continue

            entries.append(
                CatalogEntry(
                    slug=slug_from_filename(listing.name, self.content_suffix),
                    filename=listing.name,
                    metadata=metadata,
                    path=listing.path,
                )
            )

        return CatalogSnapshot(entries=entries, skipped=skipped)
