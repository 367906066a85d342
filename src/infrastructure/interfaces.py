"""Protocol interfaces for candidate providers, scorers and stores."""

from typing import Any, Protocol

from domain.models import FeedbackStats, FeedbackStatus, Problem


class CandidateProviderProtocol(Protocol):
    """Source of candidate problems for a query."""

    name: str

    def is_available(self) -> bool:
        """Whether the provider is configured and may be invoked."""
        ...

    async def find_candidates(self, query: Problem) -> list[Problem]:
        """Return candidates for the query problem."""
        ...


class SemanticScorerProtocol(Protocol):
    """Embedding-based similarity between a query title and candidates."""

    def is_available(self) -> bool:
        ...

    async def score(self, query_title: str, candidates: list[Problem]) -> dict[str, int]:
        """Return a 0-100 similarity per candidate id."""
        ...


class FeedbackStoreProtocol(Protocol):
    """Durable map from an unordered problem pair to a user judgment."""

    async def save(self, problem_a_id: str, problem_b_id: str, status: FeedbackStatus) -> None:
        ...

    async def get(self, problem_a_id: str, problem_b_id: str) -> FeedbackStatus | None:
        ...

    async def clear_all(self) -> None:
        ...

    async def stats(self) -> FeedbackStats:
        ...


class CacheProtocol(Protocol):
    """Key-value cache with TTL validity."""

    async def get(self, key: str) -> Any | None:
        ...

    async def set(self, key: str, data: Any) -> None:
        ...

    async def clear(self) -> None:
        ...


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Get JSON content from URL."""
        ...

    async def post_json(self, url: str, payload: Any) -> Any:
        """Post a JSON payload and return the decoded response."""
        ...
