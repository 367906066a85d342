"""Tests for the HTTP API against the local catalog."""

import pytest
from litestar.testing import TestClient

from api.app import create_app
from infrastructure.feedback_store import InMemoryFeedbackStore
from infrastructure.providers import LocalCatalogProvider
from services.matcher import MatcherService

KEY_PAIR_QUERY = {
    "id": "codeforces:999A",
    "platform": "codeforces",
    "title": "Key Pair",
    "tags": ["array", "hashing", "searching"],
    "difficulty": "basic",
    "constraints": {"n": 100000},
    "ioStructure": ["array", "integer"],
}


@pytest.fixture
def client():
    matcher = MatcherService(feedback_store=InMemoryFeedbackStore(), local_provider=LocalCatalogProvider())
    with TestClient(app=create_app(matcher=matcher)) as test_client:
        yield test_client


def test_match_ranks_catalog_problems(client):
    response = client.post("/match", json=KEY_PAIR_QUERY)

    assert response.status_code == 200
    matches = response.json()["matches"]
    assert 0 < len(matches) <= 10

    best = matches[0]
    assert best["problem"]["id"] == "gfg:key-pair"
    assert best["score"] == 100
    assert best["classification"] == "Same Problem"
    assert best["classification_class"] == "cc-score-same"
    assert best["source"] == "local"
    assert best["explanation"].startswith("Title: +40pts (100% match)")

    scores = [match["score"] for match in matches]
    assert scores == sorted(scores, reverse=True)
    assert all(score >= 25 for score in scores)
    assert all(match["problem"]["platform"] != "codeforces" for match in matches)


def test_match_local_uses_catalog_only(client):
    response = client.post("/match/local", json=KEY_PAIR_QUERY)

    assert response.status_code == 200
    assert response.json()["matches"][0]["problem"]["id"] == "gfg:key-pair"


def test_incomplete_problem_yields_no_matches(client):
    response = client.post("/match", json={"title": "Key Pair"})

    assert response.status_code == 200
    assert response.json() == {"matches": []}


def test_rejected_pair_disappears_from_matches(client):
    response = client.post(
        "/feedback",
        json={"query_id": "codeforces:999A", "candidate_id": "gfg:key-pair", "status": "rejected"},
    )
    assert response.status_code == 200
    assert response.json() == {"key": "codeforces:999A_gfg:key-pair", "status": "rejected"}

    matches = client.post("/match", json=KEY_PAIR_QUERY).json()["matches"]
    assert "gfg:key-pair" not in [match["problem"]["id"] for match in matches]


def test_feedback_lookup_stats_and_clear(client):
    client.post(
        "/feedback",
        json={"query_id": "codeforces:999A", "candidate_id": "gfg:key-pair", "status": "confirmed"},
    )

    response = client.get("/feedback", params={"query_id": "gfg:key-pair", "candidate_id": "codeforces:999A"})
    assert response.json()["status"] == "confirmed"
    assert client.get("/feedback/stats").json() == {"confirmed": 1, "rejected": 0, "total": 1}

    assert client.delete("/feedback").status_code == 204
    assert client.get("/feedback/stats").json() == {"confirmed": 0, "rejected": 0, "total": 0}


def test_invalid_feedback_status_is_rejected(client):
    response = client.post(
        "/feedback",
        json={"query_id": "codeforces:999A", "candidate_id": "gfg:key-pair", "status": "maybe"},
    )

    assert response.status_code == 400
    assert "maybe" in response.json()["error"]


def test_explain_breakdown(client):
    breakdown = {
        "title": {"score": 100, "weight": 0.4, "contribution": 40},
        "tags": {"score": 0, "weight": 0.25, "contribution": 0},
        "constraints": {"score": 50, "weight": 0.2, "contribution": 10},
        "difficulty": {"score": 0, "weight": 0.1, "contribution": 0},
        "ioStructure": {"score": 100, "weight": 0.05, "contribution": 5},
        "feedbackBoost": 15,
    }

    response = client.post("/match/explain", json=breakdown)

    assert response.status_code == 200
    assert response.json()["explanation"] == (
        "Title: +40pts (100% match)\nConstraints: +10pts\nI/O Structure: +5pts\nUser confirmed: +15pts"
    )


def test_health_reports_optional_collaborators(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "api": False, "ml": False}


def test_null_tags_are_treated_as_empty(client):
    response = client.post("/match", json={**KEY_PAIR_QUERY, "tags": None})

    assert response.status_code == 200
    assert response.json()["matches"][0]["problem"]["id"] == "gfg:key-pair"


def test_fractional_rating_is_accepted(client):
    response = client.post("/match", json={**KEY_PAIR_QUERY, "difficulty": 1500.5})

    assert response.status_code == 200
    assert response.json()["matches"]
