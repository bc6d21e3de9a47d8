"""In-process key/value cache with per-entry expiry."""

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class CacheEntry:
    """Cached value plus its absolute expiry on the cache clock."""

    value: Any
    expires_at: float


class TTLCache:
    """Key/value store whose entries expire after a per-entry TTL.

    Eviction is lazy: an expired entry is dropped when it is read. There is no
    capacity bound and no locking; the cache is meant for small catalogs and
    is shared by reference between the fetcher and the resolvers.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing or expired."""
        entry = self._live_entry(key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store value under key for ttl seconds, replacing any previous entry."""
        self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)

    def invalidate(self, pattern: Optional[str] = None) -> None:
        """Drop every entry, or only keys containing pattern as a substring."""
        if not pattern:
            self._entries.clear()
            return

        for key in [k for k in self._entries if pattern in k]:
            del self._entries[key]

    def _live_entry(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None

        return entry

    def __contains__(self, key: str) -> bool:
        return self._live_entry(key) is not None

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._entries.values() if now < entry.expires_at)

    def __bool__(self) -> bool:
        # An empty cache is still a cache
        return True
