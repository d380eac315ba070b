"""Pytest fixtures for testing"""

import pytest
from typing import Any, Callable, Dict, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from pfhr_service.api.main import create_app
from pfhr_service.infrastructure.database.models import Base
from pfhr_service.infrastructure.database.session import get_db
from pfhr_service.domain.models import InvestmentExperience, RiskTolerance, ScoreInput


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def healthy_payload() -> Dict[str, Any]:
    """Six months of runway, no debt, 40% savings rate, advanced investor"""
    return {
        "monthly_income": 500000,
        "monthly_expenses": 300000,
        "emergency_fund": 1800000,
        "total_debt": 0,
        "monthly_debt_payments": 0,
        "portfolio_value": 1000000,
        "investment_experience": "advanced",
        "risk_tolerance": "moderate",
        "age": 35,
    }


@pytest.fixture
def fragile_payload() -> Dict[str, Any]:
    """No emergency fund, half of income going to debt service, beginner"""
    return {
        "monthly_income": 500000,
        "monthly_expenses": 400000,
        "emergency_fund": 0,
        "total_debt": 2000000,
        "monthly_debt_payments": 250000,
        "portfolio_value": 0,
        "investment_experience": "beginner",
        "risk_tolerance": "aggressive",
        "age": 22,
    }


@pytest.fixture
def make_input() -> Callable[..., ScoreInput]:
    """Factory for ScoreInput with moderate defaults; override any field by keyword"""

    def _make(**overrides: Any) -> ScoreInput:
        fields: Dict[str, Any] = {
            "monthly_income": 500000,
            "monthly_expenses": 300000,
            "emergency_fund": 900000,
            "total_debt": 1000000,
            "monthly_debt_payments": 50000,
            "portfolio_value": 2000000,
            "investment_experience": InvestmentExperience.INTERMEDIATE,
            "risk_tolerance": RiskTolerance.MODERATE,
            "age": 35,
        }
        fields.update(overrides)
        return ScoreInput(**fields)

    return _make
