"""CLI entry point for blog catalog."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from blog_catalog.adapters.catalog import create_resolver
from blog_catalog.adapters.github import GitHubContentFetcher
from blog_catalog.adapters.sitemap import XmlSitemapGenerator
from blog_catalog.config import Settings, get_settings
from blog_catalog.core import BlogCatalogError, ContentItem, NotFound, TTLCache
from blog_catalog.use_cases import BlogService


def create_service(settings: Settings, cache: Optional[TTLCache] = None) -> BlogService:
    """Wire cache, fetcher, resolver and sitemap generator together."""
    if cache is None:
        cache = TTLCache()
    fetcher = GitHubContentFetcher(settings, cache)
    resolver = create_resolver(settings, cache, fetcher)
    return BlogService(
        resolver=resolver,
        fetcher=fetcher,
        cache=cache,
        sitemap_generator=XmlSitemapGenerator(),
    )


def main(
    slug: Optional[str] = typer.Option(None, "--slug", help="Show a single post"),
    sitemap: Optional[str] = typer.Option(None, "--sitemap", help="Print sitemap for this site URL"),
    dev: bool = typer.Option(False, "--dev", help="Include hidden posts"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to YAML config"),
) -> None:
    """List, show or map blog posts stored in a GitHub repository."""
    settings = get_settings(config)
    if dev:
        settings.catalog.dev_mode = True

    try:
        asyncio.run(async_run(settings, slug, sitemap))
    except NotFound as e:
        print(f"❌ Не найдено: {e}")
        raise typer.Exit(code=1)
    except BlogCatalogError as e:
        print(f"❌ Ошибка: {e}")
        raise typer.Exit(code=2)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(settings: Settings, slug: Optional[str], sitemap: Optional[str]) -> None:
    """Async implementation of run command."""
    service = create_service(settings)

    if sitemap:
        print(await service.generate_sitemap(sitemap))
        return

    if slug:
        print_item(await service.get_item(slug))
        return

    repo = settings.repository
    emoji = getattr(service.resolver, "emoji", "📚")
    name = getattr(service.resolver, "name", service.resolver.__class__.__name__)
    print(f"\n{emoji} {name}: {repo.owner}/{repo.name}@{repo.branch}")
    if not settings.github_token:
        print("  ⚠️  GitHub Token - не найден (ограниченный rate limit)")
    if settings.dev_mode:
        print("  • 🔍 Dev mode: показаны скрытые посты")

    summaries = await service.get_public_summaries()
    for entry in summaries:
        marker = "✓" if entry.metadata.public else "✗"
        print(f"  {marker} {entry.metadata.date}  {entry.slug}  {entry.metadata.title or ''}")

    print(f"\n✓ Всего постов: {len(summaries)}")
    skipped = service.resolver.skipped
    if skipped:
        print(f"⚠️  Пропущено: {len(skipped)}")


def print_item(item: ContentItem) -> None:
    """Print one assembled post."""
    meta = item.metadata
    print(f"# {meta.title or item.slug}")
    print(f"*{meta.date} | {meta.category} | {meta.author}*")
    if meta.read_time is not None:
        print(f"*{meta.read_time} min read*")
    print()
    print(item.body)


if __name__ == "__main__":
    app()
