"""Pydantic schemas for API responses"""

from pydantic import BaseModel
from typing import Any, Dict, List

from pfhr_service.domain.models import ScoreBreakdown


class BreakdownSchema(BaseModel):
    """Per-category sub-scores, rounded for display"""

    emergency_fund_score: float
    debt_score: float
    savings_rate_score: float
    investment_readiness_score: float
    financial_knowledge_score: float

    @classmethod
    def from_breakdown(cls, breakdown: ScoreBreakdown, decimals: int) -> "BreakdownSchema":
        return cls(**{name: round(value, decimals) for name, value in breakdown.to_dict().items()})


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    submission_id: str
    score: float
    category: str
    risk_level: str
    breakdown: BreakdownSchema
    recommendations: List[str]


class FieldErrorSchema(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body returned with 400 responses"""

    error: str
    details: List[FieldErrorSchema]


class SubmissionResponse(BaseModel):
    """Response for GET /v1/submissions/{submission_id}"""

    submission_id: str
    score: float
    category: str
    risk_level: str
    status: str
    breakdown: BreakdownSchema
    recommendations: List[str]
    responses: Dict[str, Any]
    submitted_at: str
