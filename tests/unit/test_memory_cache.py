from __future__ import annotations

import threading

import pytest

from recipe_finder.app.infra.cache import CacheBackend, MemoryCache


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestMakeKey:
    def test_order_independent(self) -> None:
        first = CacheBackend.make_key({"query": "soup", "cuisine": "Thai", "offset": 0})
        second = CacheBackend.make_key({"offset": 0, "cuisine": "Thai", "query": "soup"})

        assert first == second

    def test_none_values_dropped(self) -> None:
        assert CacheBackend.make_key({"query": None, "offset": 0}) == CacheBackend.make_key({"offset": 0})

    def test_distinct_values_distinct_keys(self) -> None:
        assert CacheBackend.make_key({"offset": 0}) != CacheBackend.make_key({"offset": 12})

    def test_prefix(self) -> None:
        assert CacheBackend.make_key({"offset": 0}, prefix="search:").startswith("search:")


class TestMemoryCacheExpiry:
    def test_get_missing(self) -> None:
        cache = MemoryCache(ttl_seconds=60, clock=FakeClock())

        assert cache.get("nope") is None

    def test_fresh_entry_is_returned(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(ttl_seconds=60, clock=clock)
        cache.set("k", ("value",))

        clock.advance(59.9)

        assert cache.get("k") == ("value",)

    def test_entry_expires_at_ttl(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(ttl_seconds=60, clock=clock)
        cache.set("k", "value")

        clock.advance(60)

        assert cache.get("k") is None
        assert len(cache) == 0

    def test_reads_do_not_extend_ttl(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(ttl_seconds=60, clock=clock)
        cache.set("k", "value")

        clock.advance(50)
        assert cache.get("k") == "value"
        clock.advance(15)

        assert cache.get("k") is None

    def test_overwrite_resets_timestamp(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(ttl_seconds=60, clock=clock)
        cache.set("k", "old")
        clock.advance(50)
        cache.set("k", "new")
        clock.advance(50)

        assert cache.get("k") == "new"


class TestMemoryCacheEviction:
    def test_evicts_least_recently_used(self) -> None:
        cache = MemoryCache(ttl_seconds=60, max_entries=2, clock=FakeClock())
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")

        cache.set("c", 3)

        assert cache.get("a") == 1
        assert cache.get("b") is None
        assert cache.get("c") == 3
        assert len(cache) == 2

    def test_never_exceeds_max_entries(self) -> None:
        cache = MemoryCache(ttl_seconds=60, max_entries=5, clock=FakeClock())

        for index in range(50):
            cache.set(f"key-{index}", index)

        assert len(cache) == 5
        assert cache.get("key-49") == 49
        assert cache.get("key-0") is None


class TestMemoryCacheMaintenance:
    def test_delete(self) -> None:
        cache = MemoryCache(clock=FakeClock())
        cache.set("k", 1)

        assert cache.delete("k") is True
        assert cache.delete("k") is False

    def test_clear(self) -> None:
        cache = MemoryCache(clock=FakeClock())
        cache.set("a", 1)
        cache.set("b", 2)

        cache.clear()

        assert len(cache) == 0

    def test_invalid_configuration(self) -> None:
        with pytest.raises(ValueError):
            MemoryCache(ttl_seconds=0)
        with pytest.raises(ValueError):
            MemoryCache(max_entries=0)

    def test_concurrent_writers_keep_bound(self) -> None:
        cache = MemoryCache(ttl_seconds=60, max_entries=10)

        def writer(worker: int) -> None:
            for index in range(200):
                cache.set(f"{worker}-{index}", index)
                cache.get(f"{worker}-{index // 2}")

        threads = [threading.Thread(target=writer, args=(worker,)) for worker in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 10
