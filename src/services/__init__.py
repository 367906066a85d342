from loguru import logger

from config import Settings
from services.matcher import MAX_RESULTS, MIN_SCORE_THRESHOLD, MatcherService


async def create_matcher_service(settings: Settings | None = None) -> MatcherService:
    """Factory function to create matcher service with all dependencies."""
    from infrastructure.cache_redis import AsyncRedisCache
    from infrastructure.feedback_store import InMemoryFeedbackStore, RedisFeedbackStore
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.providers import (
        ClistSearchProvider,
        EmbeddingSemanticScorer,
        LocalCatalogProvider,
    )

    settings = settings or Settings.from_env()

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(timeout=settings.provider_timeout)
    redis_cache = None
    feedback_store: InMemoryFeedbackStore | RedisFeedbackStore = InMemoryFeedbackStore()

    if settings.redis_url:
        redis_cache = AsyncRedisCache(settings.redis_url)
        try:
            await redis_cache.connect()
            feedback_store = RedisFeedbackStore(redis_cache)
        except Exception as e:
            logger.warning(f"Failed to connect to Redis, feedback kept in memory: {e}")
            redis_cache = None

    async def close() -> None:
        await http_client.close()
        if redis_cache is not None:
            await redis_cache.close()

    return MatcherService(
        feedback_store=feedback_store,
        api_provider=ClistSearchProvider(
            http_client, api_key=settings.clist_api_key, api_base=settings.clist_api_base
        ),
        local_provider=LocalCatalogProvider(),
        semantic_scorer=EmbeddingSemanticScorer(
            http_client, api_key=settings.hf_api_key, embeddings_url=settings.embeddings_url
        ),
        provider_timeout=settings.provider_timeout,
        on_close=close,
    )


__all__ = ["MAX_RESULTS", "MIN_SCORE_THRESHOLD", "MatcherService", "create_matcher_service"]
