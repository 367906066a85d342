"""In-process TTL cache shared by the remote providers."""

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger


@dataclass
class CacheEntry:
    data: Any
    timestamp: float


@dataclass(frozen=True)
class CacheStats:
    entries: int
    oldest_age: float


class TTLCache:
    """
    Size-bounded cache whose entries expire after ``ttl`` seconds.

    When an insertion pushes the cache over ``max_entries``, the entries with
    the oldest timestamps are evicted under the same lock as the insertion, so
    concurrent writers can never overshoot the bound.
    """

    def __init__(
        self,
        ttl: float,
        max_entries: int,
        name: str = "cache",
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.ttl = ttl
        self.max_entries = max_entries
        self.name = name
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self.ttl:
            return None

        logger.debug(f"[{self.name}] Cache hit: {key}")
        return entry.data

    async def set(self, key: str, data: Any) -> None:
        async with self._lock:
            self._entries[key] = CacheEntry(data=data, timestamp=self._clock())

            overflow = len(self._entries) - self.max_entries
            if overflow > 0:
                oldest = sorted(self._entries, key=lambda k: self._entries[k].timestamp)[:overflow]
                for stale_key in oldest:
                    del self._entries[stale_key]
                logger.debug(f"[{self.name}] Evicted {len(oldest)} oldest entries")

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
        logger.info(f"[{self.name}] Cache cleared")

    def __len__(self) -> int:
        return len(self._entries)

    def stats(self) -> CacheStats:
        if not self._entries:
            return CacheStats(entries=0, oldest_age=0.0)
        oldest = min(entry.timestamp for entry in self._entries.values())
        return CacheStats(entries=len(self._entries), oldest_age=self._clock() - oldest)
