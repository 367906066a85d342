"""Similarity scoring for problem pairs."""

from .scorer import FEEDBACK_BOOST, SEMANTIC_WEIGHTS, WEIGHTS, SimilarityScorer, round_half_up

__all__ = [
    "FEEDBACK_BOOST",
    "SEMANTIC_WEIGHTS",
    "WEIGHTS",
    "SimilarityScorer",
    "round_half_up",
]
