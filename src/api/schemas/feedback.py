"""Pydantic schemas for feedback API endpoints."""

from pydantic import BaseModel


class FeedbackRequest(BaseModel):
    """User judgment on a query/candidate pair."""

    query_id: str
    candidate_id: str
    status: str


class FeedbackResponse(BaseModel):
    key: str
    status: str | None = None


class FeedbackStatsResponse(BaseModel):
    confirmed: int
    rejected: int
    total: int

    class Config:
        from_attributes = True


class HealthResponse(BaseModel):
    status: str
    api: bool
    ml: bool
