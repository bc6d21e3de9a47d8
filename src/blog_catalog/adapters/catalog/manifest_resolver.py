"""Catalog strategy that reads every post's metadata from one manifest."""

from typing import Any

from blog_catalog.adapters.catalog.base import BaseCatalogResolver
from blog_catalog.core import (
    CatalogEntry,
    CatalogSnapshot,
    ContentMetadata,
    ParseError,
    SkippedItem,
    slug_from_filename,
)

# Record keys that locate a post rather than describe it
_LOCATOR_KEYS = ("filename", "path", "slug")


class ManifestResolver(BaseCatalogResolver):
    """Build the catalog from a single manifest document.

    The manifest looks like ``{"items": [{"filename": ..., "date": ...}, ...]}``;
    the older ``"blogs"`` key is accepted as well.
    """

    emoji = "🗂️"
    name = "Manifest"

    async def _resolve(self) -> CatalogSnapshot:
        data = await self.fetcher.fetch_manifest()
        records = data.get("items", data.get("blogs"))
        if not isinstance(records, list):
            raise ParseError("Manifest has no 'items' list")

        entries: list[CatalogEntry] = []
        skipped: list[SkippedItem] = []

        for index, record in enumerate(records):
            try:
                entries.append(self._create_entry(record))
            except ParseError as e:
                source = record.get("filename") if isinstance(record, dict) else None
                skipped.append(SkippedItem(source=source or f"items[{index}]", reason=str(e)))

        return CatalogSnapshot(entries=entries, skipped=skipped)

    def _create_entry(self, record: Any) -> CatalogEntry:
        if not isinstance(record, dict):
            raise ParseError("Manifest record must be an object")

        filename = record.get("filename")
        if not filename or not isinstance(filename, str):
            raise ParseError("Missing required field: filename")

        fields = {k: v for k, v in record.items() if k not in _LOCATOR_KEYS}
        metadata = ContentMetadata.from_fields(fields)

        slug = record.get("slug")
        if not slug:
            slug = slug_from_filename(filename, self.content_suffix)

        return CatalogEntry(
            slug=str(slug),
            filename=filename,
            metadata=metadata,
            path=record.get("path") or None,
        )
