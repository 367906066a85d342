"""Unit tests for the per-dimension similarity functions."""

import pytest

from domain.scoring.similarity import (
    constraint_similarity,
    difficulty_level,
    difficulty_similarity,
    io_structure_similarity,
    jaccard_similarity,
    levenshtein_distance,
    tag_similarity,
    title_similarity,
    tokenize,
)


def test_tokenize_drops_punctuation_digits_and_stop_words():
    assert tokenize("The Two-Sum Problem 2") == ["two", "sum"]
    assert tokenize("a b of") == []
    assert tokenize(None) == []


def test_jaccard_edge_cases():
    assert jaccard_similarity(set(), set()) == 1.0
    assert jaccard_similarity({"a"}, set()) == 0.0
    assert jaccard_similarity({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("same", "same", 0),
    ],
)
def test_levenshtein_distance(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_title_similarity_ignores_word_order_and_noise():
    assert title_similarity("Two Sum", "two sum") == 1.0
    assert title_similarity("Sum Two", "The Two Sum Problem") == 1.0
    assert title_similarity("Two Sum", "Zebra Crossing") < 0.3


def test_tag_similarity_uses_canonical_tags():
    assert tag_similarity(["DP", "Arrays"], ["dynamic programming", "array"]) == 1.0
    assert tag_similarity([], []) == 1.0
    assert tag_similarity(["greedy"], []) == 0.0


def test_constraint_similarity_by_order_of_magnitude():
    assert constraint_similarity({"n": 100000}, {"n": 100000}) == 1.0
    assert constraint_similarity({"n": 10}, {"n": 100000}) == pytest.approx(0.2)
    assert constraint_similarity("1 ≤ n ≤ 10^5", {"n": 100000}) == 1.0


def test_constraint_similarity_unknown_scales_are_neutral():
    assert constraint_similarity(None, None) == 0.5
    assert constraint_similarity({}, "no bounds here") == 0.5
    assert constraint_similarity({"n": 1000}, None) == 0.3


@pytest.mark.parametrize(
    "difficulty, expected",
    [
        ("Easy", 1),
        ("school", 1),
        ("Medium", 3),
        ("HARD", 5),
        (800, 1),
        ("1100", 2),
        (1500, 3),
        ("1900", 4),
        (2500, 5),
        ("unrated", 3),
        (None, 3),
    ],
)
def test_difficulty_level(difficulty, expected):
    assert difficulty_level(difficulty) == expected


def test_difficulty_similarity():
    assert difficulty_similarity("easy", "hard") == 0.0
    assert difficulty_similarity("medium", 1500) == 1.0
    assert difficulty_similarity("easy", "medium") == 0.5


def test_io_structure_similarity_accepts_tags_or_text():
    assert io_structure_similarity(["array"], ["array", "integer"]) == 0.5
    assert io_structure_similarity("Given a grid", ["matrix"]) == 1.0
    assert io_structure_similarity(None, None) == 1.0
