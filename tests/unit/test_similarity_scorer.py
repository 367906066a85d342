"""Unit tests for the weighted similarity scorer."""

import pytest

from domain.models import FeedbackStatus, Problem, ScoreClassification
from domain.scoring import SEMANTIC_WEIGHTS, WEIGHTS, SimilarityScorer, round_half_up


@pytest.fixture
def scorer():
    return SimilarityScorer()


@pytest.fixture
def two_sum():
    return Problem(
        id="leetcode:1",
        title="Two Sum",
        platform="leetcode",
        tags=["array", "hash table"],
        difficulty="Easy",
        constraints={"n": 10000},
        io_structure=["array", "integer"],
    )


@pytest.fixture
def variant_pair():
    """Same title, disjoint tags, opposite difficulty, no constraints or I/O data."""
    query = Problem(id="leetcode:53", title="Maximum Subarray", platform="leetcode", tags=["dp"], difficulty="easy")
    candidate = Problem(
        id="codeforces:1A", title="Maximum Subarray", platform="codeforces", tags=["greedy"], difficulty="hard"
    )
    return query, candidate


def test_weights_sum_to_one():
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)
    assert sum(SEMANTIC_WEIGHTS.values()) == pytest.approx(1.0)


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.4, 2), (54.5, 55)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_problem_scores_100_against_itself(scorer, two_sum):
    score, _ = scorer.calculate(two_sum, two_sum)
    assert score == 100


def test_problem_without_constraints_scores_100_against_itself(scorer):
    problem = Problem(id="gfg:x", title="Find Median", platform="gfg")
    score, breakdown = scorer.calculate(problem, problem)
    assert score == 100
    assert breakdown.constraints.score == 100


def test_identical_content_on_another_judge_scores_100(scorer, two_sum):
    copy = Problem(
        id="geeksforgeeks:two-sum",
        title="Two Sum",
        platform="gfg",
        tags=["Arrays", "Hashing"],
        difficulty="easy",
        constraints="1 <= n <= 10^4",
        io_structure=["integer", "array"],
    )
    score, _ = scorer.calculate(two_sum, copy)
    assert score == 100


def test_related_variant_scenario(scorer, variant_pair):
    query, candidate = variant_pair
    score, breakdown = scorer.calculate(query, candidate)

    assert score == 55
    assert scorer.classify(score) == ScoreClassification.RELATED_VARIANT
    assert breakdown.title.contribution == 40
    assert breakdown.tags.contribution == 0
    assert breakdown.constraints.score == 50
    assert breakdown.difficulty.contribution == 0
    assert breakdown.semantic is None


def test_score_is_symmetric_without_feedback(scorer, two_sum, variant_pair):
    query, candidate = variant_pair
    assert scorer.calculate(query, candidate)[0] == scorer.calculate(candidate, query)[0]
    assert scorer.calculate(two_sum, candidate)[0] == scorer.calculate(candidate, two_sum)[0]


def test_confirmed_feedback_adds_boost(scorer, variant_pair):
    query, candidate = variant_pair
    score, breakdown = scorer.calculate(query, candidate, FeedbackStatus.CONFIRMED)
    assert score == 70
    assert breakdown.feedback_boost == 15


def test_confirmed_boost_is_clamped_to_100(scorer, two_sum):
    score, _ = scorer.calculate(two_sum, two_sum, "confirmed")
    assert score == 100


def test_rejected_feedback_clamps_to_zero(scorer, variant_pair):
    query, candidate = variant_pair
    score, breakdown = scorer.calculate(query, candidate, "rejected")
    assert score == 0
    assert breakdown.feedback_boost == -100


def test_unknown_feedback_is_ignored(scorer, variant_pair):
    query, candidate = variant_pair
    assert scorer.calculate(query, candidate, "maybe")[0] == 55


def test_semantic_score_switches_weight_set(scorer, variant_pair):
    query, candidate = variant_pair
    score, breakdown = scorer.calculate(query, candidate, semantic_score=80)

    assert score == 66
    assert breakdown.semantic is not None
    assert breakdown.semantic.score == 80
    assert breakdown.semantic.weight == 0.45
    assert breakdown.semantic.contribution == 36
    assert breakdown.title.weight == 0.20


@pytest.mark.parametrize("semantic_score", [None, 0, -5])
def test_non_positive_semantic_score_is_ignored(scorer, variant_pair, semantic_score):
    query, candidate = variant_pair
    score, breakdown = scorer.calculate(query, candidate, semantic_score=semantic_score)
    assert score == 55
    assert breakdown.semantic is None
    assert breakdown.title.weight == 0.40


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, ScoreClassification.SAME_PROBLEM),
        (85, ScoreClassification.SAME_PROBLEM),
        (84, ScoreClassification.HIGHLY_SIMILAR),
        (65, ScoreClassification.HIGHLY_SIMILAR),
        (64, ScoreClassification.RELATED_VARIANT),
        (40, ScoreClassification.RELATED_VARIANT),
        (39, ScoreClassification.LOW_MATCH),
        (0, ScoreClassification.LOW_MATCH),
    ],
)
def test_classify(score, expected):
    assert SimilarityScorer.classify(score) == expected


def test_explain_lists_contributing_dimensions(scorer, variant_pair):
    query, candidate = variant_pair
    _, breakdown = scorer.calculate(query, candidate)

    assert scorer.explain(breakdown) == "\n".join(
        [
            "Title: +40pts (100% match)",
            "Constraints: +10pts",
            "I/O Structure: +5pts",
        ]
    )


def test_explain_mentions_semantic_and_confirmation(scorer, variant_pair):
    query, candidate = variant_pair
    _, breakdown = scorer.calculate(query, candidate, FeedbackStatus.CONFIRMED, semantic_score=80)
    lines = scorer.explain(breakdown).split("\n")

    assert lines[0] == "Title: +20pts (100% match)"
    assert lines[1] == "Semantic: +36pts (80% similar)"
    assert lines[-1] == "User confirmed: +15pts"


def test_explain_omits_penalty(scorer, variant_pair):
    query, candidate = variant_pair
    _, breakdown = scorer.calculate(query, candidate, FeedbackStatus.REJECTED)
    assert "User confirmed" not in scorer.explain(breakdown)


def test_synonym_tags_and_matching_difficulty_make_a_related_variant(scorer):
    two_sum = Problem(
        id="leetcode:1", title="Two Sum", platform="leetcode", tags=["array", "hash-table"], difficulty="easy"
    )
    key_pair = Problem(
        id="gfg:key-pair",
        title="Key Pair",
        platform="gfg",
        tags=["array", "hashing", "searching"],
        difficulty="basic",
    )

    score, breakdown = scorer.calculate(two_sum, key_pair)

    assert breakdown.tags.score > 0
    assert breakdown.difficulty.score == 100
    assert score >= 40


def test_semantic_score_lifts_lexically_unrelated_titles(scorer):
    query = Problem(id="leetcode:53", title="Maximum Subarray", platform="leetcode", tags=["dp"])
    candidate = Problem(id="gfg:kadane", title="Kadane Algorithm", platform="gfg", tags=["greedy"])

    plain, _ = scorer.calculate(query, candidate)
    score, breakdown = scorer.calculate(query, candidate, semantic_score=90)

    assert breakdown.title.score < 30
    assert score > 25
    assert score > plain
