"""Unit tests for the embedding-based semantic scorer."""

import pytest
from unittest.mock import AsyncMock

from domain.models import Problem
from infrastructure.errors import ProviderError
from infrastructure.providers.semantic_client import EmbeddingSemanticScorer, cosine_similarity


@pytest.fixture
def candidates():
    return [
        Problem(id="gfg:key-pair", title="Key Pair", platform="gfg"),
        Problem(id="codeforces:1", title="Watermelon", platform="codeforces"),
        Problem(id="hackerrank:pairs", title="Pairs", platform="hackerrank"),
    ]


@pytest.fixture
def http_client():
    client = AsyncMock()
    client.post_json.return_value = [[1.0, 0.0], [1.0, 0.0], [0.0, 1.0], [-1.0, 0.0]]
    return client


@pytest.mark.parametrize(
    "vec_a, vec_b, expected",
    [
        ([1.0, 0.0], [2.0, 0.0], 1.0),
        ([1.0, 0.0], [0.0, 3.0], 0.0),
        ([1.0, 0.0], [-1.0, 0.0], -1.0),
        ([1.0, 0.0], [1.0, 0.0, 0.0], 0.0),
        ([0.0, 0.0], [1.0, 0.0], 0.0),
        ([], [], 0.0),
        (None, [1.0], 0.0),
    ],
)
def test_cosine_similarity(vec_a, vec_b, expected):
    assert cosine_similarity(vec_a, vec_b) == pytest.approx(expected)


@pytest.mark.asyncio
async def test_score_maps_cosine_to_percent(http_client, candidates):
    scorer = EmbeddingSemanticScorer(http_client, api_key="hf_key")

    scores = await scorer.score("Two Sum", candidates)

    assert scores == {"gfg:key-pair": 100, "codeforces:1": 0, "hackerrank:pairs": 0}
    http_client.post_json.assert_awaited_once_with(
        "http://localhost:3001/api/embeddings",
        {"inputs": ["Two Sum", "Key Pair", "Watermelon", "Pairs"], "hf_api_key": "hf_key"},
    )


@pytest.mark.asyncio
async def test_embeddings_are_cached_by_normalized_text(http_client, candidates):
    scorer = EmbeddingSemanticScorer(http_client, api_key="hf_key")
    await scorer.score("Two Sum", candidates)

    http_client.post_json.return_value = [[0.0, 1.0]]
    scores = await scorer.score("  two sum ", [*candidates, Problem(id="leetcode:2", title="Add Two Numbers")])

    assert scores["gfg:key-pair"] == 100
    assert scores["leetcode:2"] == 0
    assert http_client.post_json.await_args.args[1]["inputs"] == ["Add Two Numbers"]


@pytest.mark.asyncio
async def test_unconfigured_scorer_returns_nothing(http_client, candidates):
    scorer = EmbeddingSemanticScorer(http_client)

    assert scorer.is_available() is False
    assert await scorer.score("Two Sum", candidates) == {}
    http_client.post_json.assert_not_awaited()

    with pytest.raises(ProviderError):
        await scorer.embed(["Two Sum"])


@pytest.mark.asyncio
async def test_unexpected_response_shape_raises(http_client, candidates):
    http_client.post_json.return_value = {"error": "model loading"}
    scorer = EmbeddingSemanticScorer(http_client, api_key="hf_key")

    with pytest.raises(ProviderError):
        await scorer.score("Two Sum", candidates)
