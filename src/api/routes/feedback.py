"""API routes for user feedback on problem pairs."""

from litestar import Controller, delete, get, post
from litestar.status_codes import HTTP_200_OK, HTTP_204_NO_CONTENT
from loguru import logger

from api.schemas.feedback import (
    FeedbackRequest,
    FeedbackResponse,
    FeedbackStatsResponse,
    HealthResponse,
)
from domain.models import feedback_key
from services.matcher import MatcherService


class FeedbackController(Controller):
    """Controller for feedback endpoints."""

    path = "/feedback"

    @post("/", status_code=HTTP_200_OK)
    async def record_feedback(self, data: FeedbackRequest, matcher: MatcherService) -> FeedbackResponse:
        """Confirm or reject a candidate for a query problem."""
        logger.debug(f"API request to record feedback: {data.query_id} / {data.candidate_id}")

        await matcher.record_feedback(data.query_id, data.candidate_id, data.status)
        status = await matcher.feedback_status(data.query_id, data.candidate_id)
        return FeedbackResponse(
            key=feedback_key(data.query_id, data.candidate_id),
            status=status.value if status else None,
        )

    @get("/", status_code=HTTP_200_OK)
    async def get_feedback(
        self, query_id: str, candidate_id: str, matcher: MatcherService
    ) -> FeedbackResponse:
        status = await matcher.feedback_status(query_id, candidate_id)
        return FeedbackResponse(
            key=feedback_key(query_id, candidate_id),
            status=status.value if status else None,
        )

    @get("/stats", status_code=HTTP_200_OK)
    async def get_stats(self, matcher: MatcherService) -> FeedbackStatsResponse:
        return FeedbackStatsResponse.model_validate(await matcher.feedback_stats())

    @delete("/", status_code=HTTP_204_NO_CONTENT)
    async def clear_feedback(self, matcher: MatcherService) -> None:
        """Erase all stored judgments."""
        logger.debug("API request to clear all feedback")
        await matcher.clear_feedback()


class HealthController(Controller):
    path = "/health"

    @get("/", status_code=HTTP_200_OK)
    async def health(self, matcher: MatcherService) -> HealthResponse:
        return HealthResponse(
            status="ok",
            api=matcher.is_api_available(),
            ml=matcher.is_semantic_available(),
        )
