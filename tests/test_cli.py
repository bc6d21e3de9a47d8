"""Tests for CLI wiring and output."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
import typer

from blog_catalog import cli
from blog_catalog.adapters.catalog import ManifestResolver
from blog_catalog.config import Settings
from blog_catalog.core import (
    CatalogEntry,
    ContentItem,
    ContentMetadata,
    NotFound,
    TTLCache,
    UpstreamError,
)


def test_create_service_shares_cache() -> None:
    """Test every component gets the same cache instance."""
    cache = TTLCache()
    service = cli.create_service(Settings(), cache)

    assert service.cache is cache
    assert service.fetcher.cache is cache
    assert isinstance(service.resolver, ManifestResolver)
    assert service.resolver.cache is cache


@pytest.mark.asyncio
async def test_async_run_lists_public_posts(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test default run prints the public catalog."""
    entry = CatalogEntry(
        slug="hello",
        filename="hello.md",
        metadata=ContentMetadata(date="2025-01-01", title="Hello", public=True),
    )
    service = AsyncMock()
    service.get_public_summaries.return_value = [entry]
    service.resolver = Mock(skipped=[])
    monkeypatch.setattr(cli, "create_service", lambda settings: service)

    await cli.async_run(Settings(), None, None)

    out = capsys.readouterr().out
    assert "2025-01-01  hello  Hello" in out
    assert "Всего постов: 1" in out


@pytest.mark.asyncio
async def test_async_run_shows_post(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test --slug prints one post."""
    item = ContentItem(
        slug="hello",
        filename="hello.md",
        metadata=ContentMetadata(date="2025-01-01", title="Hello", author="A", read_time=5),
        body="Body text",
    )
    service = AsyncMock()
    service.get_item.return_value = item
    monkeypatch.setattr(cli, "create_service", lambda settings: service)

    await cli.async_run(Settings(), "hello", None)

    out = capsys.readouterr().out
    assert out.startswith("# Hello")
    assert "5 min read" in out
    assert out.rstrip().endswith("Body text")
    service.get_item.assert_called_once_with("hello")


@pytest.mark.parametrize("error, code", [(NotFound("gone"), 1), (UpstreamError("boom", 500), 2)])
def test_main_exit_codes(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, error: Exception, code: int
) -> None:
    """Test errors map to exit codes."""

    async def failing_run(*args: object) -> None:
        raise error

    monkeypatch.setattr(cli, "async_run", failing_run)

    with pytest.raises(typer.Exit) as exc_info:
        cli.main(slug="x", sitemap=None, dev=True, config=tmp_path / "config.yaml")
    assert exc_info.value.exit_code == code
