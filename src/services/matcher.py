"""Service that aggregates, scores and ranks candidate problems."""

import asyncio
from collections.abc import Awaitable, Callable, Iterable

from loguru import logger

from domain.exceptions import ValidationError
from domain.models import (
    FeedbackStats,
    FeedbackStatus,
    MatchResult,
    Problem,
    ScoreBreakdown,
)
from domain.scoring import SimilarityScorer
from infrastructure.interfaces import (
    CandidateProviderProtocol,
    FeedbackStoreProtocol,
    SemanticScorerProtocol,
)

MIN_SCORE_THRESHOLD = 25
MAX_RESULTS = 10
DEFAULT_PROVIDER_TIMEOUT = 10.0


def merge_candidates(candidate_lists: Iterable[list[Problem]]) -> list[Problem]:
    """Merge lists given in provider priority order; the first occurrence of an id wins."""
    seen: set[str] = set()
    merged = []
    for candidates in candidate_lists:
        for candidate in candidates:
            if candidate.id in seen:
                continue
            seen.add(candidate.id)
            merged.append(candidate)
    return merged


class MatcherService:
    """Finds problems on other judges that are similar to a query problem."""

    def __init__(
        self,
        *,
        feedback_store: FeedbackStoreProtocol,
        api_provider: CandidateProviderProtocol | None = None,
        local_provider: CandidateProviderProtocol | None = None,
        semantic_scorer: SemanticScorerProtocol | None = None,
        scorer: SimilarityScorer | None = None,
        provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT,
        on_close: Callable[[], Awaitable[None]] | None = None,
    ):
        """
        Initialize service with dependencies.

        Args:
            feedback_store: Store of user judgments on problem pairs
            api_provider: Remote search provider (highest merge priority)
            local_provider: Curated catalog provider
            semantic_scorer: Optional embedding-based scorer
            scorer: Similarity scorer
            provider_timeout: Seconds each provider call may take
            on_close: Cleanup hook for resources the factory opened
        """
        self.feedback_store = feedback_store
        self.api_provider = api_provider
        self.local_provider = local_provider
        self.semantic_scorer = semantic_scorer
        self.scorer = scorer or SimilarityScorer()
        self.provider_timeout = provider_timeout
        self._on_close = on_close

    async def rank(self, query: Problem | None) -> list[MatchResult]:
        """
        Rank candidates from every configured provider against the query.

        Never raises: provider failures degrade to fewer candidates and any
        unexpected error yields an empty list.
        """
        providers = [p for p in (self.api_provider, self.local_provider) if p is not None]
        return await self._safe_rank(query, providers, use_semantic=True)

    async def rank_local(self, query: Problem | None) -> list[MatchResult]:
        """Rank against the local catalog only, without semantic scoring."""
        providers = [self.local_provider] if self.local_provider is not None else []
        return await self._safe_rank(query, providers, use_semantic=False)

    async def _safe_rank(
        self,
        query: Problem | None,
        providers: list[CandidateProviderProtocol],
        use_semantic: bool,
    ) -> list[MatchResult]:
        try:
            return await self._rank(query, providers, use_semantic)
        except Exception:
            query_id = getattr(query, "id", None)
            logger.exception(f"Unexpected error while ranking candidates for {query_id!r}")
            return []

    async def _rank(
        self,
        query: Problem | None,
        providers: list[CandidateProviderProtocol],
        use_semantic: bool,
    ) -> list[MatchResult]:
        if query is None or not query.is_valid():
            logger.warning("Query problem is missing id or title, skipping search")
            return []

        logger.info(f"Finding similar problems for: {query.title}")

        candidate_lists = await asyncio.gather(
            *(self._fetch_candidates(provider, query) for provider in providers)
        )
        candidates = [
            candidate
            for candidate in merge_candidates(candidate_lists)
            if candidate.platform != query.platform
        ]
        logger.debug(f"Total candidates after merge: {len(candidates)}")

        statuses = await self._feedback_statuses(query, candidates)
        candidates = [c for c in candidates if statuses.get(c.id) != FeedbackStatus.REJECTED]

        semantic_scores = await self._semantic_scores(query, candidates) if use_semantic else {}

        results = self.score_and_rank(query, candidates, statuses, semantic_scores)
        logger.info(f"Ranked {len(results)} matches for {query.id}")
        return results

    def score_and_rank(
        self,
        query: Problem,
        candidates: list[Problem],
        statuses: dict[str, FeedbackStatus] | None = None,
        semantic_scores: dict[str, int] | None = None,
    ) -> list[MatchResult]:
        """Score, threshold, stably sort and truncate; pure and synchronous."""
        statuses = statuses or {}
        semantic_scores = semantic_scores or {}
        results = []

        for candidate in candidates:
            status = statuses.get(candidate.id)
            if status == FeedbackStatus.REJECTED:
                continue

            semantic_score = semantic_scores.get(candidate.id)
            score, breakdown = self.scorer.calculate(query, candidate, status, semantic_score)
            if score < MIN_SCORE_THRESHOLD:
                continue

            results.append(
                MatchResult(
                    problem=candidate,
                    score=score,
                    breakdown=breakdown,
                    feedback_status=status,
                    classification=self.scorer.classify(score),
                    source=candidate.source,
                    has_semantic_score=breakdown.semantic is not None,
                )
            )

        # list.sort is stable, so equal scores keep merge order
        results.sort(key=lambda result: result.score, reverse=True)
        return results[:MAX_RESULTS]

    async def _fetch_candidates(
        self, provider: CandidateProviderProtocol, query: Problem
    ) -> list[Problem]:
        if not provider.is_available():
            logger.debug(f"Provider '{provider.name}' not configured, skipping")
            return []

        try:
            candidates = await asyncio.wait_for(
                provider.find_candidates(query), timeout=self.provider_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Provider '{provider.name}' timed out after {self.provider_timeout}s"
            )
            return []
        except Exception as e:
            logger.warning(f"Provider '{provider.name}' failed: {e}")
            return []

        logger.debug(f"Provider '{provider.name}' returned {len(candidates)} candidates")
        return candidates

    async def _feedback_statuses(
        self, query: Problem, candidates: list[Problem]
    ) -> dict[str, FeedbackStatus]:
        lookups = await asyncio.gather(
            *(self.feedback_store.get(query.id, candidate.id) for candidate in candidates),
            return_exceptions=True,
        )

        statuses = {}
        for candidate, status in zip(candidates, lookups):
            if isinstance(status, BaseException):
                logger.warning(f"Feedback lookup failed for {candidate.id}: {status}")
                continue
            if status is not None:
                statuses[candidate.id] = status
        return statuses

    async def _semantic_scores(self, query: Problem, candidates: list[Problem]) -> dict[str, int]:
        if self.semantic_scorer is None or not candidates:
            return {}
        if not self.semantic_scorer.is_available():
            logger.debug("Semantic scorer not configured, using standard scoring")
            return {}

        try:
            scores = await asyncio.wait_for(
                self.semantic_scorer.score(query.title, candidates),
                timeout=self.provider_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Semantic scoring timed out after {self.provider_timeout}s")
            return {}
        except Exception as e:
            logger.warning(f"Semantic scoring failed, using standard scoring: {e}")
            return {}

        usable = {candidate_id: score for candidate_id, score in scores.items() if score and score > 0}
        logger.debug(f"Semantic scorer rated {len(usable)} candidates")
        return usable

    def explain(self, breakdown: ScoreBreakdown) -> str:
        return self.scorer.explain(breakdown)

    async def record_feedback(
        self, query_id: str, candidate_id: str, status: FeedbackStatus | str
    ) -> None:
        """
        Persist a user judgment for a problem pair.

        Raises:
            ValidationError: If an id is blank or the status is unknown
        """
        if not query_id or not candidate_id:
            raise ValidationError("Both problem ids are required to record feedback")
        await self.feedback_store.save(query_id, candidate_id, status)

    async def feedback_status(self, query_id: str, candidate_id: str) -> FeedbackStatus | None:
        return await self.feedback_store.get(query_id, candidate_id)

    async def feedback_stats(self) -> FeedbackStats:
        return await self.feedback_store.stats()

    async def clear_feedback(self) -> None:
        await self.feedback_store.clear_all()

    def is_api_available(self) -> bool:
        return self.api_provider is not None and self.api_provider.is_available()

    def is_semantic_available(self) -> bool:
        return self.semantic_scorer is not None and self.semantic_scorer.is_available()

    async def close(self) -> None:
        if self._on_close is not None:
            await self._on_close()
