"""
E2E tests for investor personas scored through the HTTP API.

Investor personas:
- established: six months of runway, no debt, advanced investor
- stretched: spends everything earned, moderate debt
- overextended: no cushion, half of income servicing debt, beginner
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def stretched_payload() -> dict:
    return {
        "monthly_income": 500000,
        "monthly_expenses": 500000,
        "emergency_fund": 1500000,
        "total_debt": 1000000,
        "monthly_debt_payments": 50000,
        "portfolio_value": 2000000,
        "investment_experience": "intermediate",
        "risk_tolerance": "moderate",
        "age": 40,
    }


def test_established_investor_healthy(client: TestClient, healthy_payload: dict):
    """
    established: strong on every axis
    Expected: healthy band, low risk
    """
    response = client.post("/v1/score", json=healthy_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "healthy", "established investor should be healthy"
    assert data["score"] > 66
    assert data["risk_level"] == "low"
    assert data["breakdown"]["emergency_fund_score"] == 100.0
    assert data["breakdown"]["debt_score"] == 100.0


def test_stretched_investor_developing(client: TestClient, stretched_payload: dict):
    """
    stretched: zero savings rate pulls the composite down
    Expected: developing band, savings component at its floor
    """
    response = client.post("/v1/score", json=stretched_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["breakdown"]["savings_rate_score"] == 0.0
    assert data["category"] == "developing"
    assert 33 < data["score"] <= 66
    assert any("savings rate" in r for r in data["recommendations"])


def test_overextended_investor_fragile(client: TestClient, fragile_payload: dict):
    """
    overextended: no emergency fund, debt service above the distress ratio
    Expected: fragile band, high risk
    """
    response = client.post("/v1/score", json=fragile_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "fragile", "overextended investor should be fragile"
    assert data["score"] <= 33
    assert data["risk_level"] == "high"
    assert data["breakdown"]["debt_score"] < 5


def test_persona_scores_are_ordered(
    client: TestClient,
    healthy_payload: dict,
    stretched_payload: dict,
    fragile_payload: dict,
):
    scores = [
        client.post("/v1/score", json=payload).json()["score"]
        for payload in (fragile_payload, stretched_payload, healthy_payload)
    ]
    assert scores == sorted(scores)


def test_persona_resubmission_is_deterministic(client: TestClient, stretched_payload: dict):
    """Same profile twice: two submissions, identical scores"""
    first = client.post("/v1/score", json=stretched_payload).json()
    second = client.post("/v1/score", json=stretched_payload).json()

    assert first["submission_id"] != second["submission_id"]
    assert first["score"] == second["score"]
    assert first["breakdown"] == second["breakdown"]
