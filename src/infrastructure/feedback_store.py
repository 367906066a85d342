"""Stores for user judgments on problem pairs."""

import asyncio

from loguru import logger

from domain.exceptions import ValidationError
from domain.models import FeedbackStats, FeedbackStatus, feedback_key
from infrastructure.cache_redis import AsyncRedisCache


def _as_status(status: FeedbackStatus | str) -> FeedbackStatus:
    try:
        return FeedbackStatus(status)
    except ValueError as e:
        raise ValidationError(
            f"Invalid feedback status: {status!r}. Expected 'confirmed' or 'rejected'"
        ) from e


def _count(statuses: list[str]) -> FeedbackStats:
    confirmed = sum(1 for status in statuses if status == FeedbackStatus.CONFIRMED.value)
    rejected = sum(1 for status in statuses if status == FeedbackStatus.REJECTED.value)
    return FeedbackStats(confirmed=confirmed, rejected=rejected, total=len(statuses))


class InMemoryFeedbackStore:
    """Process-local feedback store; judgments are lost on restart."""

    def __init__(self) -> None:
        self._judgments: dict[str, FeedbackStatus] = {}
        self._lock = asyncio.Lock()

    async def save(self, problem_a_id: str, problem_b_id: str, status: FeedbackStatus | str) -> None:
        judgment = _as_status(status)
        key = feedback_key(problem_a_id, problem_b_id)
        async with self._lock:
            self._judgments[key] = judgment
        logger.info(f"Saved feedback: {key} = {judgment.value}")

    async def get(self, problem_a_id: str, problem_b_id: str) -> FeedbackStatus | None:
        return self._judgments.get(feedback_key(problem_a_id, problem_b_id))

    async def clear_all(self) -> None:
        async with self._lock:
            self._judgments.clear()
        logger.info("All feedback cleared")

    async def stats(self) -> FeedbackStats:
        return _count([status.value for status in self._judgments.values()])


class RedisFeedbackStore:
    """Durable feedback store keeping every judgment in a single Redis hash."""

    HASH_KEY = "codecompare:feedback"

    def __init__(self, cache: AsyncRedisCache, hash_key: str = HASH_KEY):
        self.cache = cache
        self.hash_key = hash_key

    async def save(self, problem_a_id: str, problem_b_id: str, status: FeedbackStatus | str) -> None:
        judgment = _as_status(status)
        key = feedback_key(problem_a_id, problem_b_id)
        await self.cache.client.hset(self.hash_key, key, judgment.value)
        logger.info(f"Saved feedback: {key} = {judgment.value}")

    async def get(self, problem_a_id: str, problem_b_id: str) -> FeedbackStatus | None:
        value = await self.cache.client.hget(self.hash_key, feedback_key(problem_a_id, problem_b_id))
        if value is None:
            return None
        try:
            return FeedbackStatus(value)
        except ValueError:
            logger.warning(f"Ignoring unknown feedback value {value!r}")
            return None

    async def clear_all(self) -> None:
        await self.cache.client.delete(self.hash_key)
        logger.info("All feedback cleared")

    async def stats(self) -> FeedbackStats:
        values = await self.cache.client.hvals(self.hash_key)
        return _count(list(values))
