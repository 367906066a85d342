"""API routes for ranking similar problems."""

from litestar import Controller, post
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.match import (
    DimensionScoreSchema,
    ExplainResponse,
    MatchListResponse,
    MatchResponse,
    ProblemRequest,
    ProblemResponse,
    ScoreBreakdownSchema,
)
from domain.models import DimensionScore, MatchResult, Problem, ScoreBreakdown
from services.matcher import MatcherService


def to_problem(data: ProblemRequest) -> Problem:
    return Problem.from_dict(data.model_dump())


def to_breakdown(data: ScoreBreakdownSchema) -> ScoreBreakdown:
    def dimension(schema: DimensionScoreSchema) -> DimensionScore:
        return DimensionScore(score=schema.score, weight=schema.weight, contribution=schema.contribution)

    return ScoreBreakdown(
        title=dimension(data.title),
        tags=dimension(data.tags),
        constraints=dimension(data.constraints),
        difficulty=dimension(data.difficulty),
        io_structure=dimension(data.io_structure),
        semantic=dimension(data.semantic) if data.semantic else None,
        feedback_boost=data.feedback_boost,
    )


def to_match_response(result: MatchResult, explanation: str) -> MatchResponse:
    problem = result.problem
    return MatchResponse(
        problem=ProblemResponse(
            id=problem.id,
            title=problem.title,
            platform=problem.platform.value,
            url=problem.url,
            tags=list(problem.tags),
            difficulty=problem.difficulty,
            source=problem.source.value,
        ),
        score=result.score,
        breakdown=ScoreBreakdownSchema.model_validate(result.breakdown),
        explanation=explanation,
        feedback_status=result.feedback_status.value if result.feedback_status else None,
        classification=result.classification.label,
        classification_class=result.classification.css_class,
        source=result.source.value,
        has_semantic_score=result.has_semantic_score,
    )


class MatchController(Controller):
    """Controller for similarity ranking endpoints."""

    path = "/match"

    @post("/", status_code=HTTP_200_OK)
    async def rank(self, data: ProblemRequest, matcher: MatcherService) -> MatchListResponse:
        """
        Rank problems on other judges by similarity to the given problem.

        Returns at most 10 matches, best first. Incomplete problems
        (no id or title) yield an empty list.
        """
        logger.debug(f"API request for matches: id={data.id!r}")

        results = await matcher.rank(to_problem(data))
        return MatchListResponse(
            matches=[to_match_response(result, matcher.explain(result.breakdown)) for result in results]
        )

    @post("/local", status_code=HTTP_200_OK)
    async def rank_local(self, data: ProblemRequest, matcher: MatcherService) -> MatchListResponse:
        """Rank against the curated catalog only."""
        logger.debug(f"API request for local matches: id={data.id!r}")

        results = await matcher.rank_local(to_problem(data))
        return MatchListResponse(
            matches=[to_match_response(result, matcher.explain(result.breakdown)) for result in results]
        )

    @post("/explain", status_code=HTTP_200_OK)
    async def explain(self, data: ScoreBreakdownSchema, matcher: MatcherService) -> ExplainResponse:
        """Render a score breakdown as per-dimension contribution lines."""
        return ExplainResponse(explanation=matcher.explain(to_breakdown(data)))
