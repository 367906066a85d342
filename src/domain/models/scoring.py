"""Value objects produced by similarity scoring."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .problem import Problem, ProblemSource


class FeedbackStatus(str, Enum):
    """User judgment on a problem pair."""

    CONFIRMED = "confirmed"
    REJECTED = "rejected"


class ScoreClassification(Enum):
    """Qualitative band for a final score, highest band first."""

    SAME_PROBLEM = ("Same Problem", "cc-score-same", 85)
    HIGHLY_SIMILAR = ("Highly Similar", "cc-score-similar", 65)
    RELATED_VARIANT = ("Related Variant", "cc-score-related", 40)
    LOW_MATCH = ("Low Match", "cc-score-low", 0)

    def __init__(self, label: str, css_class: str, min_score: int):
        self.label = label
        self.css_class = css_class
        self.min_score = min_score

    @classmethod
    def for_score(cls, score: int) -> "ScoreClassification":
        for band in cls:
            if score >= band.min_score:
                return band
        return cls.LOW_MATCH


@dataclass(frozen=True)
class DimensionScore:
    """Raw similarity (0-100), weight and rounded weighted contribution of one dimension."""

    score: int
    weight: float
    contribution: int

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "weight": self.weight, "contribution": self.contribution}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DimensionScore":
        return cls(
            score=int(data.get("score", 0)),
            weight=float(data.get("weight", 0.0)),
            contribution=int(data.get("contribution", 0)),
        )


@dataclass
class ScoreBreakdown:
    """Per-dimension explanation of a composite score.

    Contributions are rounded independently, so they may not add up to the
    composite score exactly.
    """

    title: DimensionScore
    tags: DimensionScore
    constraints: DimensionScore
    difficulty: DimensionScore
    io_structure: DimensionScore
    semantic: DimensionScore | None = None
    feedback_boost: int = 0

    def dimensions(self) -> list[tuple[str, DimensionScore]]:
        """Dimensions in display order (semantic after tags when present)."""
        items = [("title", self.title), ("tags", self.tags)]
        if self.semantic is not None:
            items.append(("semantic", self.semantic))
        items.extend(
            [
                ("constraints", self.constraints),
                ("difficulty", self.difficulty),
                ("io_structure", self.io_structure),
            ]
        )
        return items

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {name: dim.to_dict() for name, dim in self.dimensions()}
        data["feedback_boost"] = self.feedback_boost
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScoreBreakdown":
        semantic = data.get("semantic")
        io_structure = data.get("io_structure", data.get("ioStructure", {}))
        return cls(
            title=DimensionScore.from_dict(data.get("title", {})),
            tags=DimensionScore.from_dict(data.get("tags", {})),
            constraints=DimensionScore.from_dict(data.get("constraints", {})),
            difficulty=DimensionScore.from_dict(data.get("difficulty", {})),
            io_structure=DimensionScore.from_dict(io_structure),
            semantic=DimensionScore.from_dict(semantic) if semantic else None,
            feedback_boost=int(data.get("feedback_boost", data.get("feedbackBoost", 0))),
        )


@dataclass
class MatchResult:
    """A scored candidate; recomputed per query and never persisted."""

    problem: Problem
    score: int
    breakdown: ScoreBreakdown
    feedback_status: FeedbackStatus | None
    classification: ScoreClassification
    source: ProblemSource
    has_semantic_score: bool = False


@dataclass(frozen=True)
class FeedbackStats:
    confirmed: int
    rejected: int
    total: int
