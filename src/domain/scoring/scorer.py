"""Weighted composite similarity between two problems."""

import math
from types import MappingProxyType

from domain.models import (
    DimensionScore,
    FeedbackStatus,
    Problem,
    ScoreBreakdown,
    ScoreClassification,
)

from . import similarity

WEIGHTS = MappingProxyType(
    {
        "title": 0.40,
        "tags": 0.25,
        "constraints": 0.20,
        "difficulty": 0.10,
        "io_structure": 0.05,
    }
)

# Used instead of WEIGHTS when a positive semantic score is available
SEMANTIC_WEIGHTS = MappingProxyType(
    {
        "title": 0.20,
        "tags": 0.15,
        "semantic": 0.45,
        "constraints": 0.10,
        "difficulty": 0.05,
        "io_structure": 0.05,
    }
)

FEEDBACK_BOOST = MappingProxyType(
    {
        FeedbackStatus.CONFIRMED: 15,
        FeedbackStatus.REJECTED: -100,
    }
)

MIN_SCORE = 0
MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, as score displays expect."""
    return math.floor(value + 0.5)


def _as_feedback(feedback: FeedbackStatus | str | None) -> FeedbackStatus | None:
    if feedback is None or isinstance(feedback, FeedbackStatus):
        return feedback
    try:
        return FeedbackStatus(feedback)
    except ValueError:
        return None


class SimilarityScorer:
    """Scores a candidate problem against a query problem."""

    def __init__(
        self,
        weights: MappingProxyType = WEIGHTS,
        semantic_weights: MappingProxyType = SEMANTIC_WEIGHTS,
        feedback_boost: MappingProxyType = FEEDBACK_BOOST,
    ):
        self.weights = weights
        self.semantic_weights = semantic_weights
        self.feedback_boost = feedback_boost

    def dimension_values(self, a: Problem, b: Problem) -> dict[str, float]:
        """Raw similarity in [0, 1] for every lexical/structural dimension."""
        if a.id and a.id == b.id:
            # Same entity: its scale matches itself even when unknown
            constraints = 1.0
        else:
            constraints = similarity.constraint_similarity(a.constraints, b.constraints)

        return {
            "title": similarity.title_similarity(a.title, b.title),
            "tags": similarity.tag_similarity(a.tags, b.tags),
            "constraints": constraints,
            "difficulty": similarity.difficulty_similarity(a.difficulty, b.difficulty),
            "io_structure": similarity.io_structure_similarity(
                a.io_structure if a.io_structure is not None else a.description,
                b.io_structure if b.io_structure is not None else b.description,
            ),
        }

    def calculate(
        self,
        a: Problem,
        b: Problem,
        feedback: FeedbackStatus | str | None = None,
        semantic_score: float | None = None,
    ) -> tuple[int, ScoreBreakdown]:
        """
        Compute the final score and its breakdown for a problem pair.

        Args:
            a: Query problem
            b: Candidate problem
            feedback: Stored user judgment for the pair, if any
            semantic_score: Embedding similarity 0-100; used only when positive

        Returns:
            Clamped integer score 0-100 and the per-dimension breakdown
        """
        values = self.dimension_values(a, b)
        raw_scores = {name: round_half_up(value * 100) for name, value in values.items()}

        weights = self.weights
        if semantic_score is not None and semantic_score > 0:
            weights = self.semantic_weights
            values["semantic"] = semantic_score / 100
            raw_scores["semantic"] = round_half_up(semantic_score)

        composite = round_half_up(sum(values[name] * weight for name, weight in weights.items()) * 100)

        dimensions = {
            name: DimensionScore(
                score=raw_scores[name],
                weight=weight,
                contribution=round_half_up(values[name] * weight * 100),
            )
            for name, weight in weights.items()
        }

        boost = self.feedback_boost.get(_as_feedback(feedback), 0)
        score = max(MIN_SCORE, min(MAX_SCORE, composite + boost))

        breakdown = ScoreBreakdown(
            title=dimensions["title"],
            tags=dimensions["tags"],
            constraints=dimensions["constraints"],
            difficulty=dimensions["difficulty"],
            io_structure=dimensions["io_structure"],
            semantic=dimensions.get("semantic"),
            feedback_boost=boost,
        )
        return score, breakdown

    @staticmethod
    def classify(score: int) -> ScoreClassification:
        return ScoreClassification.for_score(score)

    @staticmethod
    def explain(breakdown: ScoreBreakdown) -> str:
        """Human-readable contribution lines, one per contributing dimension."""
        lines = []

        if breakdown.title.contribution > 0:
            lines.append(f"Title: +{breakdown.title.contribution}pts ({breakdown.title.score}% match)")
        if breakdown.tags.contribution > 0:
            lines.append(f"Tags: +{breakdown.tags.contribution}pts ({breakdown.tags.score}% overlap)")
        if breakdown.semantic is not None and breakdown.semantic.contribution > 0:
            lines.append(
                f"Semantic: +{breakdown.semantic.contribution}pts ({breakdown.semantic.score}% similar)"
            )
        if breakdown.constraints.contribution > 0:
            lines.append(f"Constraints: +{breakdown.constraints.contribution}pts")
        if breakdown.difficulty.contribution > 0:
            lines.append(f"Difficulty: +{breakdown.difficulty.contribution}pts")
        if breakdown.io_structure.contribution > 0:
            lines.append(f"I/O Structure: +{breakdown.io_structure.contribution}pts")
        if breakdown.feedback_boost > 0:
            lines.append(f"User confirmed: +{breakdown.feedback_boost}pts")

        return "\n".join(lines)
