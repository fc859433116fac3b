"""Tests for the reconciliation HTTP API."""

import pytest
from fastapi.testclient import TestClient

from fixturelink.api.app import create_app
from fixturelink.config import VERSION


@pytest.fixture
def client():
    return TestClient(create_app())


LALIGA_CANDIDATES = [
    {
        "id": 1,
        "home_team_name": "Real Madrid CF",
        "away_team_name": "FC Barcelona",
        "match_date": "2024-05-01",
    },
    {
        "id": 2,
        "home_team_name": "Real Sociedad",
        "away_team_name": "Celta Vigo",
        "match_date": "2024-05-01",
    },
]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": VERSION}


class TestReconcileEndpoint:
    def test_strong_match(self, client):
        response = client.post(
            "/api/v1/reconcile",
            json={
                "competition_code": "PD",
                "fixture": {
                    "home_team_name": "Real Madrid",
                    "away_team_name": "Barcelona",
                    "fixture_date": "2024-05-01",
                },
                "candidates": LALIGA_CANDIDATES,
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["candidate_id"] == 1
        assert body["swapped"] is False
        assert body["confidence"] == "strong"
        assert body["reason"] is None

    def test_no_candidates(self, client):
        response = client.post(
            "/api/v1/reconcile",
            json={"fixture": {"home_team_name": "Arsenal", "away_team_name": "Chelsea"}},
        )
        assert response.status_code == 200
        assert response.json() == {
            "candidate_id": None,
            "swapped": False,
            "score": 0.0,
            "confidence": None,
            "reason": "no_candidates",
        }

    def test_missing_fixture_is_rejected(self, client):
        response = client.post("/api/v1/reconcile", json={"candidates": []})
        assert response.status_code == 422


class TestBatchEndpoint:
    def test_batch(self, client):
        response = client.post(
            "/api/v1/reconcile/batch",
            json={
                "competition_code": "PD",
                "fixtures": [
                    {
                        "id": 501,
                        "home_team_name": "Barcelona",
                        "away_team_name": "Real Madrid",
                        "fixture_date": "2024-04-30",
                    },
                    {
                        "id": 502,
                        "home_team_name": "Sevilla",
                        "away_team_name": "Valencia",
                        "fixture_date": "2024-05-01",
                    },
                ],
                "candidates": LALIGA_CANDIDATES,
                "workers": 2,
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["competition_tier"] == "B"
        assert body["summary"]["matched"] == 1
        assert body["summary"]["unmatched"] == 1

        first, second = body["fixtures"]
        assert first["fixture_id"] == 501
        assert first["match"]["candidate_id"] == 1
        assert first["match"]["swapped"] is True
        assert first["candidate_match_date"] == "2024-05-01"
        assert second["match"]["reason"] == "low_score"
        assert second["near_miss"] is not None

    def test_invalid_worker_count(self, client):
        response = client.post(
            "/api/v1/reconcile/batch",
            json={"fixtures": [], "workers": 0},
        )
        assert response.status_code == 422
