"""Parse untrusted score payloads into ScoreInput values"""

from typing import Any, Dict, List

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictInt

from pfhr_service.domain.exceptions import FieldError, ValidationError
from pfhr_service.domain.models import InvestmentExperience, RiskTolerance, ScoreInput

MIN_AGE = 18
MAX_AGE = 120
# Largest integer a JSON number carries exactly (2**53 - 1)
MAX_AMOUNT = 9_007_199_254_740_991


class ScorePayload(BaseModel):
    """Wire shape of a score request. Monetary values are integers in minor units."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    monthly_income: StrictInt = Field(..., gt=0, le=MAX_AMOUNT, description="Monthly income, must be > 0")
    monthly_expenses: StrictInt = Field(..., ge=0, le=MAX_AMOUNT)
    emergency_fund: StrictInt = Field(..., ge=0, le=MAX_AMOUNT)
    total_debt: StrictInt = Field(..., ge=0, le=MAX_AMOUNT)
    monthly_debt_payments: StrictInt = Field(..., ge=0, le=MAX_AMOUNT)
    portfolio_value: StrictInt = Field(..., ge=0, le=MAX_AMOUNT)
    investment_experience: InvestmentExperience
    risk_tolerance: RiskTolerance
    age: StrictInt = Field(..., ge=MIN_AGE, le=MAX_AGE)


def _to_field_error(error: Dict[str, Any]) -> FieldError:
    field = ".".join(str(part) for part in error["loc"]) or "payload"
    return FieldError(field=field, message=error["msg"])


def parse_score_input(payload: Any) -> ScoreInput:
    """
    Narrow a decoded JSON body into a ScoreInput.

    Every offending field is reported, not just the first one.

    Raises:
        ValidationError: payload is not an object, or any field is missing,
            mistyped, or outside its allowed range
    """
    try:
        parsed = ScorePayload.model_validate(payload)
    except pydantic.ValidationError as e:
        errors: List[FieldError] = [_to_field_error(err) for err in e.errors()]
        raise ValidationError(errors) from e

    return ScoreInput(
        monthly_income=parsed.monthly_income,
        monthly_expenses=parsed.monthly_expenses,
        emergency_fund=parsed.emergency_fund,
        total_debt=parsed.total_debt,
        monthly_debt_payments=parsed.monthly_debt_payments,
        portfolio_value=parsed.portfolio_value,
        investment_experience=parsed.investment_experience,
        risk_tolerance=parsed.risk_tolerance,
        age=parsed.age,
    )
