"""Candidate provider backed by the CLIST.by problem search API."""

import asyncio
import re
from types import MappingProxyType
from typing import Any

from loguru import logger

from domain.models import Platform, Problem, ProblemSource
from infrastructure.cache import TTLCache
from infrastructure.interfaces import CacheProtocol, HTTPClientProtocol

CLIST_API_BASE = "https://clist.by/api/v4"
CACHE_TTL_SECONDS = 24 * 60 * 60
CACHE_MAX_ENTRIES = 100

TITLE_SEARCH_LIMIT = 30
TAG_SEARCH_LIMIT = 50

PLATFORM_RESOURCES = MappingProxyType(
    {
        Platform.LEETCODE: 102,
        Platform.CODEFORCES: 1,
        Platform.CODECHEF: 2,
        Platform.HACKERRANK: 63,
        Platform.GEEKSFORGEEKS: 126,
        Platform.ATCODER: 93,
    }
)
RESOURCE_PLATFORMS = MappingProxyType({rid: platform for platform, rid in PLATFORM_RESOURCES.items()})

# Rating upper bounds for the Easy/Medium labels; anything above is Hard
RATING_LABEL_BOUNDS = MappingProxyType(
    {
        Platform.CODEFORCES: (1200, 1800),
    }
)
DEFAULT_RATING_LABEL_BOUNDS = (1000, 2000)

_KEYWORD_STOP_WORDS = frozenset({"the", "and", "for", "with"})
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def title_keywords(title: str) -> str:
    """First three meaningful words of a title, space-joined."""
    words = _NON_ALNUM.sub(" ", title.lower()).split()
    return " ".join([w for w in words if len(w) > 2 and w not in _KEYWORD_STOP_WORDS][:3])


def rating_to_difficulty(rating: Any, platform: Platform) -> str:
    if isinstance(rating, bool) or not isinstance(rating, (int, float)) or not rating:
        return "Medium"
    easy_max, medium_max = RATING_LABEL_BOUNDS.get(platform, DEFAULT_RATING_LABEL_BOUNDS)
    if rating <= easy_max:
        return "Easy"
    if rating <= medium_max:
        return "Medium"
    return "Hard"


def normalize_clist_problem(raw: dict[str, Any]) -> Problem:
    """Convert a CLIST problem object into a candidate ``Problem``."""
    resource = raw.get("resource")
    resource_id = resource.get("id") if isinstance(resource, dict) else raw.get("resource_id")
    platform = RESOURCE_PLATFORMS.get(resource_id, Platform.UNKNOWN)

    return Problem(
        id=f"{platform.value}:{raw.get('id')}",
        platform=platform,
        title=raw.get("name") or raw.get("title") or "",
        url=raw.get("url") or "",
        tags=[str(tag).lower() for tag in raw.get("tags") or []],
        difficulty=rating_to_difficulty(raw.get("rating"), platform),
        constraints={},
        source=ProblemSource.API,
    )


class ClistSearchProvider:
    """Searches CLIST.by for problems on other judges by title keywords and tags."""

    name = ProblemSource.API.value

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        api_key: str | None = None,
        api_base: str = CLIST_API_BASE,
        cache: CacheProtocol | None = None,
    ):
        """
        Initialize provider.

        Args:
            http_client: Async HTTP client
            api_key: CLIST credentials as ``"username:api_key"``; None disables the provider
            api_base: API root URL
            cache: Result cache (defaults to 24h / 100 entries)
        """
        self.http_client = http_client
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.cache = cache if cache is not None else TTLCache(
            ttl=CACHE_TTL_SECONDS, max_entries=CACHE_MAX_ENTRIES, name="clist"
        )

    def is_available(self) -> bool:
        return bool(self.api_key)

    async def find_candidates(self, query: Problem) -> list[Problem]:
        """Title and tag searches run concurrently; results are merged title-first."""
        if not self.is_available():
            logger.debug("CLIST API not configured, skipping API search")
            return []

        logger.debug(f"Searching CLIST for: {query.title}")
        results = await asyncio.gather(
            self.search_by_title(query.title, query.platform),
            self.search_by_tags(query.tags, query.platform),
            return_exceptions=True,
        )

        # One failed search still leaves the other's results usable
        failures = [result for result in results if isinstance(result, BaseException)]
        for failure in failures:
            logger.warning(f"CLIST search failed: {failure}")
        if len(failures) == len(results):
            raise failures[0]

        seen: set[str] = set()
        merged = []
        for problem in [item for result in results if not isinstance(result, BaseException) for item in result]:
            if problem.id in seen or problem.platform == query.platform:
                continue
            seen.add(problem.id)
            merged.append(problem)

        logger.info(f"CLIST found {len(merged)} potential matches")
        return merged

    async def search_by_title(self, title: str, exclude_platform: Platform | None = None) -> list[Problem]:
        keywords = title_keywords(title)
        if not keywords:
            return []

        cache_key = f"title:{keywords}:{_platform_key(exclude_platform)}"
        return await self._search(
            cache_key,
            {
                "resource__id__in": self._resource_filter(exclude_platform),
                "search": keywords,
                "limit": TITLE_SEARCH_LIMIT,
                "order_by": "-rating",
            },
        )

    async def search_by_tags(self, tags: list[str], exclude_platform: Platform | None = None) -> list[Problem]:
        if not tags:
            return []

        cache_key = f"tags:{','.join(sorted(tags))}:{_platform_key(exclude_platform)}"
        return await self._search(
            cache_key,
            {
                "resource__id__in": self._resource_filter(exclude_platform),
                "tag": ",".join(tags[:3]),
                "limit": TAG_SEARCH_LIMIT,
                "order_by": "-rating",
            },
        )

    async def _search(self, cache_key: str, params: dict[str, Any]) -> list[Problem]:
        cached = await self.cache.get(cache_key)
        if cached is not None:
            return cached

        result = await self._request("problem", params)
        problems = [normalize_clist_problem(raw) for raw in result.get("objects") or []]
        await self.cache.set(cache_key, problems)
        return problems

    async def _request(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        username, _, key = (self.api_key or "").partition(":")
        query = {
            "username": username if key else "",
            "api_key": key or username,
            **{name: value for name, value in params.items() if value is not None},
        }
        logger.debug(f"CLIST request: {endpoint} {params}")
        return await self.http_client.get_json(f"{self.api_base}/json/{endpoint}/", params=query)

    @staticmethod
    def _resource_filter(exclude_platform: Platform | None) -> str:
        return ",".join(
            str(resource_id)
            for platform, resource_id in PLATFORM_RESOURCES.items()
            if platform != exclude_platform
        )


def _platform_key(platform: Platform | None) -> str:
    return platform.value if platform else "all"
