"""Unit tests for the in-process TTL cache."""

import asyncio

import pytest

from infrastructure.cache import TTLCache


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.asyncio
async def test_entry_expires_after_ttl():
    clock = FakeClock()
    cache = TTLCache(ttl=60, max_entries=10, clock=clock)

    await cache.set("two sum", [1.0, 0.0])
    clock.now += 59
    assert await cache.get("two sum") == [1.0, 0.0]

    clock.now += 1
    assert await cache.get("two sum") is None


@pytest.mark.asyncio
async def test_oldest_entries_are_evicted_first():
    clock = FakeClock()
    cache = TTLCache(ttl=60, max_entries=2, clock=clock)

    for key in ("a", "b", "c"):
        await cache.set(key, key.upper())
        clock.now += 1

    assert len(cache) == 2
    assert await cache.get("a") is None
    assert await cache.get("b") == "B"
    assert await cache.get("c") == "C"


@pytest.mark.asyncio
async def test_concurrent_writers_never_exceed_bound():
    cache = TTLCache(ttl=60, max_entries=10)

    await asyncio.gather(*(cache.set(f"key-{i}", i) for i in range(50)))

    assert len(cache) == 10


@pytest.mark.asyncio
async def test_stats_and_clear():
    clock = FakeClock()
    cache = TTLCache(ttl=60, max_entries=10, clock=clock)
    await cache.set("a", 1)
    clock.now += 5
    await cache.set("b", 2)

    stats = cache.stats()
    assert stats.entries == 2
    assert stats.oldest_age == 5

    await cache.clear()
    assert cache.stats().entries == 0


def test_max_entries_must_be_positive():
    with pytest.raises(ValueError):
        TTLCache(ttl=60, max_entries=0)
