"""Catalog resolver strategies."""

from blog_catalog.adapters.catalog.base import SUMMARIES_CACHE_KEY, BaseCatalogResolver
from blog_catalog.adapters.catalog.enumeration_resolver import EnumerationResolver
from blog_catalog.adapters.catalog.manifest_resolver import ManifestResolver
from blog_catalog.config import Settings
from blog_catalog.core import ContentFetcher, TTLCache

STRATEGIES: dict[str, type[BaseCatalogResolver]] = {
    "manifest": ManifestResolver,
    "enumeration": EnumerationResolver,
}


def create_resolver(
    settings: Settings, cache: TTLCache, fetcher: ContentFetcher
) -> BaseCatalogResolver:
    """Build the resolver selected by ``settings.catalog.strategy``."""
    try:
        resolver_cls = STRATEGIES[settings.catalog.strategy]
    except KeyError:
        raise ValueError(
            f"Unknown catalog strategy: {settings.catalog.strategy!r} "
            f"(expected one of {', '.join(STRATEGIES)})"
        ) from None

    return resolver_cls(
        fetcher=fetcher,
        cache=cache,
        ttl=settings.cache_ttl,
        include_hidden=settings.dev_mode,
        content_suffix=settings.content_suffix,
    )


__all__ = [
    "BaseCatalogResolver",
    "EnumerationResolver",
    "ManifestResolver",
    "STRATEGIES",
    "SUMMARIES_CACHE_KEY",
    "create_resolver",
]
