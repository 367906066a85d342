"""Domain models package."""

from .identifiers import Platform, ProblemIdentifier, feedback_key
from .problem import Problem, ProblemSource
from .scoring import (
    DimensionScore,
    FeedbackStats,
    FeedbackStatus,
    MatchResult,
    ScoreBreakdown,
    ScoreClassification,
)

__all__ = [
    "DimensionScore",
    "FeedbackStats",
    "FeedbackStatus",
    "MatchResult",
    "Platform",
    "Problem",
    "ProblemIdentifier",
    "ProblemSource",
    "ScoreBreakdown",
    "ScoreClassification",
    "feedback_key",
]
