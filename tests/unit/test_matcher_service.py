"""Unit tests for candidate aggregation and ranking in MatcherService."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from domain.exceptions import ValidationError
from domain.models import FeedbackStatus, Platform, Problem, ProblemSource, ScoreClassification
from infrastructure.errors import ProviderError
from infrastructure.feedback_store import InMemoryFeedbackStore
from services.matcher import MAX_RESULTS, MIN_SCORE_THRESHOLD, MatcherService, merge_candidates


def make_problem(problem_id, title="Maximum Subarray", source=ProblemSource.LOCAL, **kwargs):
    platform = kwargs.pop("platform", problem_id.split(":", 1)[0])
    kwargs.setdefault("tags", ["array", "dp"])
    kwargs.setdefault("difficulty", "Medium")
    kwargs.setdefault("constraints", {"n": 100000})
    kwargs.setdefault("io_structure", ["array", "integer"])
    return Problem(id=problem_id, title=title, platform=platform, source=source, **kwargs)


def make_provider(name, candidates=None, available=True):
    provider = MagicMock()
    provider.name = name
    provider.is_available.return_value = available
    provider.find_candidates = AsyncMock(return_value=candidates or [])
    return provider


@pytest.fixture
def query():
    return make_problem("leetcode:53")


@pytest.fixture
def feedback_store():
    return InMemoryFeedbackStore()


def test_merge_candidates_keeps_first_occurrence():
    first = make_problem("gfg:kadane", title="Kadane's Algorithm")
    duplicate = make_problem("gfg:kadane", title="Other Title")
    other = make_problem("hackerrank:max-subarray")

    merged = merge_candidates([[first], [duplicate, other]])

    assert [p.id for p in merged] == ["gfg:kadane", "hackerrank:max-subarray"]
    assert merged[0].title == "Kadane's Algorithm"


@pytest.mark.asyncio
async def test_rank_returns_scored_matches_best_first(query, feedback_store):
    local = make_provider(
        "local",
        [
            make_problem("gfg:subarray-sum", title="Subarray Sum", tags=["array", "prefix sum"]),
            make_problem("codeforces:1A", title="Maximum Subarray"),
        ],
    )
    service = MatcherService(feedback_store=feedback_store, local_provider=local)

    results = await service.rank(query)

    assert [r.problem.id for r in results] == ["codeforces:1A", "gfg:subarray-sum"]
    assert results[0].score == 100
    assert results[0].classification == ScoreClassification.SAME_PROBLEM
    assert results[0].source == ProblemSource.LOCAL
    assert all(r.score >= MIN_SCORE_THRESHOLD for r in results)


@pytest.mark.asyncio
async def test_invalid_query_yields_empty_result_without_searching(feedback_store):
    local = make_provider("local", [make_problem("gfg:kadane")])
    service = MatcherService(feedback_store=feedback_store, local_provider=local)

    assert await service.rank(Problem(id="", title="Maximum Subarray")) == []
    assert await service.rank(Problem(id="leetcode:53", title="   ")) == []
    local.find_candidates.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_query_yields_empty_result(feedback_store):
    local = make_provider("local", [make_problem("gfg:kadane")])
    service = MatcherService(feedback_store=feedback_store, local_provider=local)

    assert await service.rank(None) == []
    assert await service.rank_local(None) == []
    local.find_candidates.assert_not_awaited()


@pytest.mark.asyncio
async def test_api_candidate_wins_over_local_duplicate(query, feedback_store):
    api = make_provider("api", [make_problem("gfg:kadane", title="Kadane", source=ProblemSource.API)])
    local = make_provider("local", [make_problem("gfg:kadane", title="Kadane's Algorithm")])
    service = MatcherService(feedback_store=feedback_store, api_provider=api, local_provider=local)

    results = await service.rank(query)

    assert len(results) == 1
    assert results[0].problem.title == "Kadane"
    assert results[0].source == ProblemSource.API


@pytest.mark.asyncio
async def test_candidates_on_query_platform_are_excluded(query, feedback_store):
    local = make_provider(
        "local",
        [make_problem("leetcode:152", title="Maximum Subarray"), make_problem("gfg:kadane")],
    )
    service = MatcherService(feedback_store=feedback_store, local_provider=local)

    results = await service.rank(query)

    assert [r.problem.id for r in results] == ["gfg:kadane"]
    assert all(r.problem.platform != Platform.LEETCODE for r in results)


@pytest.mark.asyncio
async def test_rejected_candidates_are_never_returned(query, feedback_store):
    await feedback_store.save("gfg:kadane", query.id, FeedbackStatus.REJECTED)
    local = make_provider("local", [make_problem("gfg:kadane"), make_problem("codeforces:1A")])
    service = MatcherService(feedback_store=feedback_store, local_provider=local)

    results = await service.rank(query)

    assert [r.problem.id for r in results] == ["codeforces:1A"]


@pytest.mark.asyncio
async def test_confirmed_candidate_gets_boost(query, feedback_store):
    candidate = make_problem("gfg:kadane", title="Kadane", tags=["greedy"])
    service = MatcherService(feedback_store=feedback_store, local_provider=make_provider("local", [candidate]))

    before = (await service.rank(query))[0].score
    await service.record_feedback(query.id, candidate.id, "confirmed")
    after = await service.rank(query)

    assert after[0].score == min(100, before + 15)
    assert after[0].feedback_status == FeedbackStatus.CONFIRMED
    assert after[0].breakdown.feedback_boost == 15


@pytest.mark.asyncio
async def test_failing_provider_degrades_to_remaining_candidates(query, feedback_store):
    api = make_provider("api")
    api.find_candidates.side_effect = ProviderError("CLIST unavailable", provider="api")
    local = make_provider("local", [make_problem("gfg:kadane")])
    service = MatcherService(feedback_store=feedback_store, api_provider=api, local_provider=local)

    results = await service.rank(query)

    assert [r.problem.id for r in results] == ["gfg:kadane"]


@pytest.mark.asyncio
async def test_slow_provider_is_timed_out(query, feedback_store):
    async def never_answers(_query):
        await asyncio.sleep(10)
        return [make_problem("codeforces:1A")]

    api = make_provider("api")
    api.find_candidates = never_answers
    local = make_provider("local", [make_problem("gfg:kadane")])
    service = MatcherService(
        feedback_store=feedback_store, api_provider=api, local_provider=local, provider_timeout=0.05
    )

    results = await service.rank(query)

    assert [r.problem.id for r in results] == ["gfg:kadane"]


@pytest.mark.asyncio
async def test_unavailable_provider_is_skipped(query, feedback_store):
    api = make_provider("api", [make_problem("codeforces:1A")], available=False)
    service = MatcherService(feedback_store=feedback_store, api_provider=api)

    assert await service.rank(query) == []
    api.find_candidates.assert_not_awaited()
    assert service.is_api_available() is False


@pytest.mark.asyncio
async def test_providers_are_queried_concurrently(query, feedback_store):
    local_started = asyncio.Event()

    async def api_find(_query):
        await local_started.wait()
        return [make_problem("codeforces:1A")]

    async def local_find(_query):
        local_started.set()
        return [make_problem("gfg:kadane")]

    api = make_provider("api")
    api.find_candidates = api_find
    local = make_provider("local")
    local.find_candidates = local_find
    service = MatcherService(
        feedback_store=feedback_store, api_provider=api, local_provider=local, provider_timeout=1.0
    )

    results = await service.rank(query)

    assert {r.problem.id for r in results} == {"codeforces:1A", "gfg:kadane"}


@pytest.mark.asyncio
async def test_results_are_bounded_and_stable(query, feedback_store):
    candidates = [make_problem(f"gfg:copy-{i}") for i in range(15)]
    service = MatcherService(feedback_store=feedback_store, local_provider=make_provider("local", candidates))

    results = await service.rank(query)

    assert len(results) == MAX_RESULTS
    assert [r.problem.id for r in results] == [c.id for c in candidates[:MAX_RESULTS]]


@pytest.mark.asyncio
async def test_low_scores_are_dropped(query, feedback_store):
    unrelated = make_problem(
        "codeforces:4A",
        title="Zebra Crossing",
        tags=["geometry"],
        difficulty="Hard",
        constraints=None,
        io_structure=None,
    )
    service = MatcherService(feedback_store=feedback_store, local_provider=make_provider("local", [unrelated]))

    assert await service.rank(query) == []


@pytest.mark.asyncio
async def test_semantic_scores_switch_weights(query, feedback_store):
    candidate = make_problem("gfg:kadane", title="Kadane")
    semantic = MagicMock()
    semantic.is_available.return_value = True
    semantic.score = AsyncMock(return_value={"gfg:kadane": 80})
    service = MatcherService(
        feedback_store=feedback_store,
        local_provider=make_provider("local", [candidate]),
        semantic_scorer=semantic,
    )

    results = await service.rank(query)

    assert results[0].has_semantic_score is True
    assert results[0].breakdown.semantic.score == 80
    semantic.score.assert_awaited_once_with(query.title, [candidate])
    assert service.is_semantic_available() is True


@pytest.mark.asyncio
async def test_semantic_failure_falls_back_to_standard_scoring(query, feedback_store):
    semantic = MagicMock()
    semantic.is_available.return_value = True
    semantic.score = AsyncMock(side_effect=ProviderError("embeddings proxy down"))
    service = MatcherService(
        feedback_store=feedback_store,
        local_provider=make_provider("local", [make_problem("gfg:kadane")]),
        semantic_scorer=semantic,
    )

    results = await service.rank(query)

    assert len(results) == 1
    assert results[0].has_semantic_score is False
    assert results[0].breakdown.semantic is None


@pytest.mark.asyncio
async def test_unavailable_semantic_scorer_is_not_called(query, feedback_store):
    semantic = MagicMock()
    semantic.is_available.return_value = False
    semantic.score = AsyncMock()
    service = MatcherService(
        feedback_store=feedback_store,
        local_provider=make_provider("local", [make_problem("gfg:kadane")]),
        semantic_scorer=semantic,
    )

    results = await service.rank(query)

    assert results[0].has_semantic_score is False
    semantic.score.assert_not_awaited()


@pytest.mark.asyncio
async def test_rank_local_skips_api_and_semantic(query, feedback_store):
    api = make_provider("api", [make_problem("codeforces:1A")])
    semantic = MagicMock()
    semantic.is_available.return_value = True
    semantic.score = AsyncMock(return_value={"gfg:kadane": 90})
    service = MatcherService(
        feedback_store=feedback_store,
        api_provider=api,
        local_provider=make_provider("local", [make_problem("gfg:kadane")]),
        semantic_scorer=semantic,
    )

    results = await service.rank_local(query)

    assert [r.problem.id for r in results] == ["gfg:kadane"]
    assert results[0].has_semantic_score is False
    api.find_candidates.assert_not_awaited()
    semantic.score.assert_not_awaited()


@pytest.mark.asyncio
async def test_unexpected_error_yields_empty_result(query, feedback_store):
    scorer = MagicMock()
    scorer.calculate.side_effect = RuntimeError("boom")
    service = MatcherService(
        feedback_store=feedback_store,
        local_provider=make_provider("local", [make_problem("gfg:kadane")]),
        scorer=scorer,
    )

    assert await service.rank(query) == []


@pytest.mark.asyncio
async def test_failed_feedback_lookup_is_ignored(query):
    store = MagicMock()
    store.get = AsyncMock(side_effect=ConnectionError("redis down"))
    service = MatcherService(feedback_store=store, local_provider=make_provider("local", [make_problem("gfg:kadane")]))

    results = await service.rank(query)

    assert [r.problem.id for r in results] == ["gfg:kadane"]
    assert results[0].feedback_status is None


@pytest.mark.asyncio
async def test_record_feedback_validates_input(feedback_store):
    service = MatcherService(feedback_store=feedback_store)

    with pytest.raises(ValidationError):
        await service.record_feedback("", "gfg:kadane", "confirmed")
    with pytest.raises(ValidationError):
        await service.record_feedback("leetcode:53", "gfg:kadane", "maybe")

    assert (await service.feedback_stats()).total == 0


@pytest.mark.asyncio
async def test_feedback_round_trip_through_service(feedback_store):
    service = MatcherService(feedback_store=feedback_store)

    await service.record_feedback("leetcode:53", "gfg:kadane", "confirmed")
    assert await service.feedback_status("gfg:kadane", "leetcode:53") == FeedbackStatus.CONFIRMED

    await service.clear_feedback()
    assert await service.feedback_status("leetcode:53", "gfg:kadane") is None


@pytest.mark.asyncio
async def test_close_runs_cleanup_hook(feedback_store):
    on_close = AsyncMock()
    service = MatcherService(feedback_store=feedback_store, on_close=on_close)

    await service.close()

    on_close.assert_awaited_once()
