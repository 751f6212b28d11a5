import threading

import pytest

from plagcheck.cache.local_cache import CacheEntry, LocalCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestLocalCache:
    def test_get_missing_returns_none(self) -> None:
        assert LocalCache().get("missing") is None

    def test_set_then_get(self) -> None:
        cache = LocalCache()
        cache.set("k", {"score": 0.8})
        assert cache.get("k") == {"score": 0.8}

    def test_last_writer_wins(self) -> None:
        cache = LocalCache()
        cache.set("k", 1)
        cache.set("k", 2)
        assert cache.get("k") == 2
        assert len(cache) == 1

    def test_delete(self) -> None:
        cache = LocalCache()
        cache.set("k", 1)
        cache.delete("k")
        assert cache.get("k") is None

    def test_delete_missing_is_noop(self) -> None:
        LocalCache().delete("missing")

    def test_clear(self) -> None:
        cache = LocalCache()
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0

    def test_invalid_max_entries(self) -> None:
        with pytest.raises(ValueError, match="max_entries"):
            LocalCache(max_entries=0)


class TestLocalCacheExpiry:
    def test_entry_expires_after_ttl(self) -> None:
        clock = FakeClock()
        cache = LocalCache(clock=clock)
        cache.set("k", "v", ttl_seconds=10)
        clock.now += 9.9
        assert cache.get("k") == "v"
        clock.now += 0.1
        assert cache.get("k") is None
        assert len(cache) == 0

    def test_default_ttl_applies(self) -> None:
        clock = FakeClock()
        cache = LocalCache(default_ttl_seconds=5, clock=clock)
        cache.set("k", "v")
        clock.now += 6
        assert cache.get("k") is None

    def test_no_ttl_never_expires(self) -> None:
        clock = FakeClock()
        cache = LocalCache(clock=clock)
        cache.set("k", "v")
        clock.now += 10**9
        assert cache.get("k") == "v"

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_non_positive_ttl_never_expires(self, ttl: int) -> None:
        clock = FakeClock()
        cache = LocalCache(clock=clock)
        cache.set("k", "v", ttl_seconds=ttl)
        clock.now += 10**6
        assert cache.get("k") == "v"

    def test_zero_default_ttl_never_expires(self) -> None:
        clock = FakeClock()
        cache = LocalCache(default_ttl_seconds=0, clock=clock)
        cache.set("k", "v")
        clock.now += 10**6
        assert cache.get("k") == "v"

    def test_cache_entry_expiry(self) -> None:
        entry = CacheEntry(key="k", value=1, expires_at=50.0)
        assert entry.is_expired(49.0) is False
        assert entry.is_expired(50.0) is True
        assert CacheEntry(key="k", value=1).is_expired(10**9) is False


class TestLocalCacheEviction:
    def test_evicts_least_recently_used(self) -> None:
        cache = LocalCache(max_entries=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)
        assert cache.get("a") == 1
        assert cache.get("b") is None
        assert cache.get("c") == 3

    def test_never_exceeds_max_entries(self) -> None:
        cache = LocalCache(max_entries=10)
        for i in range(100):
            cache.set(f"k{i}", i)
        assert len(cache) == 10


class TestLocalCacheConcurrency:
    def test_parallel_writers(self) -> None:
        cache = LocalCache(max_entries=1000)

        def write(prefix: str) -> None:
            for i in range(200):
                cache.set(f"{prefix}-{i}", i)
                cache.get(f"{prefix}-{i}")

        threads = [threading.Thread(target=write, args=(str(n),)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(cache) == 800
