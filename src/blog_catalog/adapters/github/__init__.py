"""GitHub repository adapter."""

from blog_catalog.adapters.github.client import (
    GitHubContentFetcher,
    contents_api_url,
    manifest_url,
    raw_url,
)

__all__ = ["GitHubContentFetcher", "contents_api_url", "manifest_url", "raw_url"]
