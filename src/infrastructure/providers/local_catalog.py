"""Candidate provider backed by the curated local catalog."""

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from domain.models import Platform, Problem, ProblemSource

from .catalog_data import CATALOG_ENTRIES


class LocalCatalogProvider:
    """Static catalog of cross-platform problem equivalents; always available."""

    name = ProblemSource.LOCAL.value

    def __init__(self, entries: Iterable[Mapping[str, Any]] = CATALOG_ENTRIES):
        self._problems = tuple(
            Problem.from_dict({**entry, "source": ProblemSource.LOCAL.value}) for entry in entries
        )
        self._by_id = {problem.id: problem for problem in self._problems}

    def is_available(self) -> bool:
        return True

    async def find_candidates(self, query: Problem) -> list[Problem]:
        candidates = self.get_other_platforms(query.platform)
        logger.debug(f"Local catalog returned {len(candidates)} candidates")
        return candidates

    @property
    def problems(self) -> tuple[Problem, ...]:
        return self._problems

    def get_other_platforms(self, exclude_platform: Platform | str) -> list[Problem]:
        excluded = Platform.parse(exclude_platform)
        return [problem for problem in self._problems if problem.platform != excluded]

    def get_by_platform(self, platform: Platform | str) -> list[Problem]:
        wanted = Platform.parse(platform)
        return [problem for problem in self._problems if problem.platform == wanted]

    def get_by_id(self, problem_id: str) -> Problem | None:
        return self._by_id.get(problem_id)

    def search_by_title(self, query: str) -> list[Problem]:
        """Case-insensitive substring search over titles."""
        needle = query.lower()
        return [problem for problem in self._problems if needle in problem.title.lower()]
