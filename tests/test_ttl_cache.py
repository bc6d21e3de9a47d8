"""Tests for TTL cache."""

from blog_catalog.core import TTLCache


class FakeClock:
    """Manually advanced clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_get_before_expiry() -> None:
    """Test value is returned while fresh."""
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("blog-summaries", ["a"], ttl=300)

    clock.now += 299.9
    assert cache.get("blog-summaries") == ["a"]


def test_get_at_and_after_expiry() -> None:
    """Test value is absent once the expiry instant is reached."""
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("key", "value", ttl=10)

    clock.now += 10
    assert cache.get("key") is None
    # Expired entry is evicted by the read
    assert len(cache) == 0


def test_missing_key() -> None:
    """Test unknown key returns None."""
    assert TTLCache().get("nope") is None


def test_set_overwrites_value_and_expiry() -> None:
    """Test set replaces both value and expiry."""
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("key", "v1", ttl=10)

    clock.now += 8
    cache.set("key", "v2", ttl=10)

    clock.now += 8
    assert cache.get("key") == "v2"


def test_falsy_values_are_cache_hits() -> None:
    """Test empty values are still returned."""
    cache = TTLCache()
    cache.set("empty", [], ttl=60)
    assert cache.get("empty") == []
    assert "empty" in cache


def test_independent_expirations() -> None:
    """Test each key expires on its own schedule."""
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("short", 1, ttl=5)
    cache.set("long", 2, ttl=50)

    clock.now += 10
    assert cache.get("short") is None
    assert cache.get("long") == 2


def test_invalidate_by_pattern() -> None:
    """Test pattern invalidation removes exactly the matching keys."""
    cache = TTLCache()
    cache.set("blog-content:posts/a.md", "a", ttl=60)
    cache.set("blog-content:posts/b.md", "b", ttl=60)
    cache.set("blog-summaries", [], ttl=60)
    cache.set("blog-list", [], ttl=60)

    cache.invalidate("blog-content:")

    assert cache.get("blog-content:posts/a.md") is None
    assert cache.get("blog-content:posts/b.md") is None
    assert cache.get("blog-summaries") == []
    assert cache.get("blog-list") == []


def test_invalidate_pattern_is_substring_not_glob() -> None:
    """Test pattern is matched literally."""
    cache = TTLCache()
    cache.set("blog-list", 1, ttl=60)
    cache.set("a*b", 2, ttl=60)

    cache.invalidate("*")

    assert cache.get("blog-list") == 1
    assert cache.get("a*b") is None


def test_invalidate_all() -> None:
    """Test invalidate without pattern empties the cache."""
    cache = TTLCache()
    cache.set("a", 1, ttl=60)
    cache.set("b", 2, ttl=60)

    cache.invalidate()

    assert len(cache) == 0
    assert cache.get("a") is None


def test_len_skips_expired_entries() -> None:
    """Test len counts only fresh entries, even before they are read."""
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("short", 1, ttl=5)
    cache.set("long", 2, ttl=50)

    clock.now += 10
    assert len(cache) == 1


def test_contains_stored_none() -> None:
    """Test a stored None is still a member."""
    cache = TTLCache()
    cache.set("nothing", None, ttl=60)

    assert "nothing" in cache
    assert "missing" not in cache


def test_empty_cache_is_truthy() -> None:
    """Test an empty cache is not mistaken for a missing one."""
    cache = TTLCache()

    assert len(cache) == 0
    assert bool(cache) is True
