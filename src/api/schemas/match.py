"""Pydantic schemas for match API endpoints."""

from pydantic import AliasChoices, BaseModel, Field


class ProblemRequest(BaseModel):
    """Problem record as produced by the extraction collaborator.

    ``id`` and ``title`` default to empty so that incomplete payloads reach
    the matcher and resolve to an empty result instead of a 400.
    """

    id: str = ""
    title: str = ""
    platform: str | None = None
    tags: list[str] | None = None
    difficulty: str | int | float | None = None
    constraints: dict[str, float] | str | None = None
    io_structure: list[str] | str | None = Field(
        default=None, validation_alias=AliasChoices("io_structure", "ioStructure")
    )
    description: str | None = None
    url: str | None = None


class ProblemResponse(BaseModel):
    """Candidate problem."""

    id: str
    title: str
    platform: str
    url: str | None = None
    tags: list[str]
    difficulty: str | int | float | None = None
    source: str

    class Config:
        from_attributes = True


class DimensionScoreSchema(BaseModel):
    """Raw score (0-100), weight and rounded contribution of one dimension."""

    score: int
    weight: float
    contribution: int

    class Config:
        from_attributes = True


class ScoreBreakdownSchema(BaseModel):
    title: DimensionScoreSchema
    tags: DimensionScoreSchema
    constraints: DimensionScoreSchema
    difficulty: DimensionScoreSchema
    io_structure: DimensionScoreSchema = Field(
        validation_alias=AliasChoices("io_structure", "ioStructure")
    )
    semantic: DimensionScoreSchema | None = None
    feedback_boost: int = Field(
        default=0, validation_alias=AliasChoices("feedback_boost", "feedbackBoost")
    )

    class Config:
        from_attributes = True


class MatchResponse(BaseModel):
    """A ranked candidate with its score explanation."""

    problem: ProblemResponse
    score: int
    breakdown: ScoreBreakdownSchema
    explanation: str
    feedback_status: str | None = None
    classification: str
    classification_class: str
    source: str
    has_semantic_score: bool = False


class MatchListResponse(BaseModel):
    matches: list[MatchResponse]


class ExplainResponse(BaseModel):
    explanation: str
