"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class RepositoryConfig:
    """Coordinates of the GitHub repository holding the posts."""
    owner: str = ""
    name: str = ""
    branch: str = "main"
    content_path: str = ""
    manifest_path: str = "blog.json"


@dataclass
class CatalogConfig:
    """Catalog discovery settings."""
    strategy: str = "manifest"  # "manifest" | "enumeration"
    content_suffix: str = ".md"
    dev_mode: bool = False


@dataclass
class CacheConfig:
    """Cache settings."""
    ttl_seconds: int = 300


@dataclass
class HttpConfig:
    """Outbound HTTP settings."""
    user_agent: str = "blog-catalog"
    accept: str = "application/vnd.github.v3+json"
    timeout: float = 30.0


@dataclass
class Settings:
    """Application settings."""

    # Secrets (from environment only)
    github_token: Optional[str] = None

    # Config sections
    repository: RepositoryConfig = field(default_factory=RepositoryConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    http: HttpConfig = field(default_factory=HttpConfig)

    @property
    def cache_ttl(self) -> int:
        return self.cache.ttl_seconds

    @property
    def dev_mode(self) -> bool:
        return self.catalog.dev_mode

    @property
    def content_suffix(self) -> str:
        return self.catalog.content_suffix


_ENV_REPOSITORY = {
    "GITHUB_REPO_OWNER": "owner",
    "GITHUB_REPO_NAME": "name",
    "GITHUB_BRANCH": "branch",
    "GITHUB_CONTENT_PATH": "content_path",
}


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment.

    Environment variables win over the YAML file.
    """
    config = load_config(config_path)

    settings = Settings(github_token=os.getenv("GITHUB_TOKEN") or None)

    # Apply YAML config
    sections = {
        "repository": settings.repository,
        "catalog": settings.catalog,
        "cache": settings.cache,
        "http": settings.http,
    }
    for section_name, section in sections.items():
        for key, value in (config.get(section_name) or {}).items():
            if not hasattr(section, key):
                raise ValueError(f"Unknown config key: {section_name}.{key}")
            setattr(section, key, value)

    # Apply environment overrides
    for env_name, attr in _ENV_REPOSITORY.items():
        value = os.getenv(env_name)
        if value is not None:
            setattr(settings.repository, attr, value)

    dev_mode = os.getenv("BLOG_DEV_MODE")
    if dev_mode is not None:
        settings.catalog.dev_mode = _env_flag(dev_mode)

    return settings
