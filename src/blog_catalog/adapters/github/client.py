"""GitHub adapter for reading posts, listings and the manifest."""

from typing import Any, Optional

import httpx

from blog_catalog.config import RepositoryConfig, Settings
from blog_catalog.core import (
    ContentFetcher,
    NotFound,
    ParseError,
    RemoteListing,
    TTLCache,
    UpstreamError,
)

LISTING_CACHE_KEY = "blog-list"
CONTENT_CACHE_PREFIX = "blog-content:"

RAW_BASE = "https://raw.githubusercontent.com"
API_BASE = "https://api.github.com"


def _join(*parts: str) -> str:
    return "/".join(p.strip("/") for p in parts if p and p.strip("/"))


def raw_url(repository: RepositoryConfig, path: str) -> str:
    """Raw-content URL of one file on the configured branch."""
    return f"{RAW_BASE}/{repository.owner}/{repository.name}/{repository.branch}/{path.lstrip('/')}"


def contents_api_url(repository: RepositoryConfig) -> str:
    """Contents API URL of the configured content directory."""
    return (
        f"{API_BASE}/repos/{repository.owner}/{repository.name}/contents/"
        f"{repository.content_path.strip('/')}?ref={repository.branch}"
    )


def manifest_url(repository: RepositoryConfig) -> str:
    return raw_url(repository, repository.manifest_path)


class GitHubContentFetcher(ContentFetcher):
    """Read posts from a GitHub repository through the TTL cache."""

    def __init__(
        self,
        settings: Settings,
        cache: TTLCache,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings
        self.repository = settings.repository
        self.cache = cache
        self.token = settings.github_token
        self.ttl = settings.cache_ttl
        self.suffix = settings.content_suffix
        self.timeout = settings.http.timeout
        self._client = client

    def resolve_path(self, ref: str) -> str:
        """Map a post reference to its repository path.

        A reference already ending with the content suffix is a repository
        path; anything else is a bare name inside the content directory.
        """
        if ref.endswith(self.suffix):
            return ref.lstrip("/")
        return _join(self.repository.content_path, f"{ref}{self.suffix}")

    async def fetch_body(self, ref: str) -> str:
        """Fetch raw markdown for a post."""
        path = self.resolve_path(ref)
        cache_key = f"{CONTENT_CACHE_PREFIX}{path}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        response = await self._get(raw_url(self.repository, path))
        content = response.text

        self.cache.set(cache_key, content, self.ttl)
        return content

    async def list_directory(self) -> list[RemoteListing]:
        """List content files of the configured directory."""
        cached = self.cache.get(LISTING_CACHE_KEY)
        if cached is not None:
            return cached

        response = await self._get(contents_api_url(self.repository))
        data = self._decode_json(response)
        if not isinstance(data, list):
            raise ParseError("GitHub contents API did not return a directory listing")

        listings = [
            RemoteListing(
                name=record["name"],
                path=record["path"],
                type=record.get("type", "file"),
                download_url=record.get("download_url"),
            )
            for record in data
            if isinstance(record, dict) and "name" in record and "path" in record
        ]
        files = [listing for listing in listings if listing.is_content_file(self.suffix)]

        self.cache.set(LISTING_CACHE_KEY, files, self.ttl)
        return files

    async def fetch_manifest(self) -> dict[str, Any]:
        """Fetch and decode the manifest document."""
        response = await self._get(manifest_url(self.repository))
        data = self._decode_json(response)
        if not isinstance(data, dict):
            raise ParseError("Manifest must be a JSON object")
        return data

    async def _get(self, url: str) -> httpx.Response:
        """GET a URL and map failures onto the error taxonomy."""
        headers = self._get_headers()
        try:
            if self._client is not None:
                response = await self._client.get(url, headers=headers)
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout, follow_redirects=True
                ) as client:
                    response = await client.get(url, headers=headers)
        except httpx.RequestError as e:
            raise UpstreamError(f"Request to {url} failed: {e}") from e

        if response.status_code == 404:
            raise NotFound(f"Not found: {url}")
        if not response.is_success:
            raise UpstreamError(
                f"GitHub API error: {response.status_code} for {url}",
                status=response.status_code,
            )
        return response

    def _decode_json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON from {response.request.url}: {e}") from e

    def _get_headers(self) -> dict[str, str]:
        """Get headers for GitHub requests."""
        headers = {
            "Accept": self.settings.http.accept,
            "User-Agent": self.settings.http.user_agent,
        }

        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        return headers
