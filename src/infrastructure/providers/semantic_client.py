"""Semantic scorer backed by sentence embeddings from the embeddings proxy."""

import math
from collections.abc import Sequence

from loguru import logger

from domain.models import Problem
from domain.scoring import round_half_up
from infrastructure.cache import TTLCache
from infrastructure.errors import ProviderError
from infrastructure.interfaces import CacheProtocol, HTTPClientProtocol

DEFAULT_EMBEDDINGS_URL = "http://localhost:3001/api/embeddings"
EMBEDDING_CACHE_TTL_SECONDS = 7 * 24 * 60 * 60
EMBEDDING_CACHE_MAX_ENTRIES = 500


def cosine_similarity(vec_a: Sequence[float] | None, vec_b: Sequence[float] | None) -> float:
    if not vec_a or not vec_b or len(vec_a) != len(vec_b):
        return 0.0

    dot = sum(x * y for x, y in zip(vec_a, vec_b))
    norm_a = math.sqrt(sum(x * x for x in vec_a))
    norm_b = math.sqrt(sum(y * y for y in vec_b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)


def _cache_key(text: str) -> str:
    return text.lower().strip()


class EmbeddingSemanticScorer:
    """Scores candidate titles against a query title by embedding cosine similarity."""

    name = "ml"

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        api_key: str | None = None,
        embeddings_url: str = DEFAULT_EMBEDDINGS_URL,
        cache: CacheProtocol | None = None,
    ):
        """
        Initialize scorer.

        Args:
            http_client: Async HTTP client
            api_key: HuggingFace API key forwarded to the proxy; None disables scoring
            embeddings_url: Embeddings proxy endpoint
            cache: Embedding cache (defaults to 7 days / 500 entries)
        """
        self.http_client = http_client
        self.api_key = api_key
        self.embeddings_url = embeddings_url
        self.cache = cache if cache is not None else TTLCache(
            ttl=EMBEDDING_CACHE_TTL_SECONDS,
            max_entries=EMBEDDING_CACHE_MAX_ENTRIES,
            name="embeddings",
        )

    def is_available(self) -> bool:
        return bool(self.api_key)

    async def score(self, query_title: str, candidates: list[Problem]) -> dict[str, int]:
        """
        Semantic similarity of every candidate title to the query title.

        Returns:
            Mapping of candidate id to a 0-100 score (negative cosines clamp to 0)
        """
        if not self.is_available() or not candidates:
            return {}

        logger.debug(f"Finding semantic matches for: {query_title}")
        embeddings = await self.embed([query_title, *(candidate.title for candidate in candidates)])
        query_embedding = embeddings[0]

        scores = {
            candidate.id: max(0, round_half_up(cosine_similarity(query_embedding, embedding) * 100))
            for candidate, embedding in zip(candidates, embeddings[1:])
        }

        top = max(scores.values(), default=0)
        logger.info(f"Semantic scorer rated {len(scores)} candidates, top score: {top}%")
        return scores

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Embed texts in one batch, fetching only those not already cached."""
        if not self.api_key:
            raise ProviderError("HuggingFace API key not configured", provider=self.name)

        results: list[list[float] | None] = []
        uncached: list[str] = []
        uncached_indices: list[int] = []

        for index, text in enumerate(texts):
            cached = await self.cache.get(_cache_key(text))
            results.append(cached)
            if cached is None:
                uncached.append(text)
                uncached_indices.append(index)

        if uncached:
            response = await self.http_client.post_json(
                self.embeddings_url,
                {"inputs": uncached, "hf_api_key": self.api_key},
            )
            if not isinstance(response, list) or len(response) != len(uncached):
                raise ProviderError("Unexpected embeddings response shape", provider=self.name)

            for index, text, embedding in zip(uncached_indices, uncached, response):
                results[index] = embedding
                await self.cache.set(_cache_key(text), embedding)

        return [embedding or [] for embedding in results]
