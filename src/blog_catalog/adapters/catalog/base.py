"""Shared caching, ordering and visibility logic for catalog resolvers."""

from abc import abstractmethod

from blog_catalog.core import (
    CatalogEntry,
    CatalogResolver,
    CatalogSnapshot,
    ContentFetcher,
    NotFound,
    SkippedItem,
    TTLCache,
)

SUMMARIES_CACHE_KEY = "blog-summaries"
DEFAULT_TTL = 5 * 60


class BaseCatalogResolver(CatalogResolver):
    """Catalog resolver that caches one sorted snapshot per TTL window.

    Subclasses only implement ``_resolve``; sorting, caching, visibility
    filtering and lookup are shared so both strategies behave identically.
    """

    emoji = "📚"
    name = "catalog"

    def __init__(
        self,
        fetcher: ContentFetcher,
        cache: TTLCache,
        ttl: float = DEFAULT_TTL,
        include_hidden: bool = False,
        content_suffix: str = ".md",
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache
        self.ttl = ttl
        self.include_hidden = include_hidden
        self.content_suffix = content_suffix
        self._skipped: list[SkippedItem] = []

    @abstractmethod
    async def _resolve(self) -> CatalogSnapshot:
        """Build an unsorted snapshot from the remote source."""
        pass

    @property
    def skipped(self) -> list[SkippedItem]:
        return list(self._skipped)

    async def snapshot(self) -> CatalogSnapshot:
        """Return the cached snapshot, resolving it on a miss."""
        cached = self.cache.get(SUMMARIES_CACHE_KEY)
        if cached is not None:
            return cached

        resolved = await self._resolve()
        # sorted() is stable, so equal dates keep source order
        entries = sorted(resolved.entries, key=lambda e: e.metadata.published_at, reverse=True)
        snapshot = CatalogSnapshot(entries=entries, skipped=resolved.skipped)

        self._skipped = list(resolved.skipped)
        for item in resolved.skipped:
            print(f"  └─ ⚠️  Пропущен {item.source}: {item.reason}")

        self.cache.set(SUMMARIES_CACHE_KEY, snapshot, self.ttl)
        return snapshot

    async def list_summaries(self) -> list[CatalogEntry]:
        return list((await self.snapshot()).entries)

    async def list_public_summaries(self) -> list[CatalogEntry]:
        """Entries readers may see; all entries in development mode."""
        summaries = await self.list_summaries()
        if self.include_hidden:
            return summaries
        return [entry for entry in summaries if entry.metadata.public is True]

    async def find_summary_by_slug(self, slug: str) -> CatalogEntry:
        for entry in await self.list_summaries():
            if entry.slug == slug:
                return entry
        raise NotFound(f"Blog post not found: {slug}")
