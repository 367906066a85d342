"""Async Redis connection wrapper."""

import redis.asyncio as redis
from loguru import logger

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class AsyncRedisCache:
    """Owns one Redis connection for the stores built on top of it."""

    def __init__(self, url: str = DEFAULT_REDIS_URL, client: redis.Redis | None = None):
        self.url = url
        self._client = client

    async def connect(self) -> None:
        if self._client is None:
            self._client = redis.from_url(self.url, decode_responses=True)
        await self._client.ping()
        logger.debug(f"Connected to Redis at {self.url}")

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise RuntimeError("Redis client is not connected")
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("Redis connection closed")
