"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Any

from blog_catalog.core.entities import CatalogEntry, RemoteListing, SkippedItem


class ContentFetcher(ABC):
    """Interface for reading files from the content repository."""

    @abstractmethod
    async def fetch_body(self, ref: str) -> str:
        """Fetch the raw text of one post by repository path or bare name."""
        pass

    @abstractmethod
    async def list_directory(self) -> list[RemoteListing]:
        """List the entries of the content directory."""
        pass

    @abstractmethod
    async def fetch_manifest(self) -> dict[str, Any]:
        """Fetch the decoded manifest document."""
        pass


class CatalogResolver(ABC):
    """Interface for discovering which posts exist."""

    @abstractmethod
    async def list_summaries(self) -> list[CatalogEntry]:
        """Return every catalog entry, newest first."""
        pass

    @abstractmethod
    async def list_public_summaries(self) -> list[CatalogEntry]:
        """Return the entries visible to readers, newest first."""
        pass

    @abstractmethod
    async def find_summary_by_slug(self, slug: str) -> CatalogEntry:
        """Return the entry with the given slug or raise NotFound."""
        pass

    @property
    @abstractmethod
    def skipped(self) -> list[SkippedItem]:
        """Records skipped during the most recent resolution."""
        pass


class SitemapGenerator(ABC):
    """Interface for rendering the public catalog as a sitemap."""

    @abstractmethod
    def generate(self, entries: list[CatalogEntry], site_url: str) -> str:
        """Render a sitemap document for the given entries."""
        pass
