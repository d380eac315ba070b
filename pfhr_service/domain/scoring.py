"""PFHR scoring engine - core business logic for financial health ratings"""

import math
from typing import Dict

from pfhr_service.domain.categories import classify_score
from pfhr_service.domain.constants import (
    DEBT_SERVICE_DISTRESS_RATIO,
    DEBT_TO_INCOME_CEILING,
    EMERGENCY_FUND_TARGET_MONTHS,
    PORTFOLIO_TARGET_INCOME_MULTIPLE,
    SAVINGS_RATE_TARGET,
)
from pfhr_service.domain.exceptions import ComputationError
from pfhr_service.domain.models import (
    InvestmentExperience,
    PFHRResult,
    RiskTolerance,
    ScoreBreakdown,
    ScoreInput,
)
from pfhr_service.domain.recommendations import determine_risk_level, generate_recommendations
from pfhr_service.utils.numeric import clamp, clamp01

LEVERAGE_WEIGHT = 0.6

SCORE_WEIGHTS: Dict[str, float] = {
    "emergency_fund_score": 0.30,
    "debt_score": 0.25,
    "savings_rate_score": 0.20,
    "investment_readiness_score": 0.15,
    "financial_knowledge_score": 0.10,
}

EXPERIENCE_READINESS: Dict[InvestmentExperience, float] = {
    InvestmentExperience.BEGINNER: 30.0,
    InvestmentExperience.INTERMEDIATE: 65.0,
    InvestmentExperience.ADVANCED: 100.0,
}

EXPERIENCE_KNOWLEDGE: Dict[InvestmentExperience, float] = {
    InvestmentExperience.BEGINNER: 40.0,
    InvestmentExperience.INTERMEDIATE: 70.0,
    InvestmentExperience.ADVANCED: 100.0,
}

ALIGNED_RISK_TOLERANCE: Dict[InvestmentExperience, RiskTolerance] = {
    InvestmentExperience.BEGINNER: RiskTolerance.CONSERVATIVE,
    InvestmentExperience.INTERMEDIATE: RiskTolerance.MODERATE,
    InvestmentExperience.ADVANCED: RiskTolerance.AGGRESSIVE,
}
ALIGNMENT_BONUS = 10.0


def emergency_fund_score(inputs: ScoreInput) -> float:
    """Months of expenses covered by the emergency fund, saturating at six months."""
    if inputs.emergency_fund == 0:
        return 0.0

    target_amount = inputs.monthly_expenses * EMERGENCY_FUND_TARGET_MONTHS
    if target_amount == 0:
        # No expenses to cover: any fund is fully funded
        return 100.0

    return clamp01(inputs.emergency_fund / target_amount) * 100


def debt_score(inputs: ScoreInput) -> float:
    """
    Score debt burden from leverage and debt service.

    - Leverage: total debt vs annual income, 0% = full marks, 36% = none
    - Debt service: monthly payments vs monthly income; the leverage blend is
      scaled by the headroom left below the 45% distress ratio, so the score
      reaches 0 once payments take 45% of income regardless of leverage
    """
    annual_income = inputs.monthly_income * 12

    leverage_ratio = inputs.total_debt / annual_income
    leverage_score = clamp01(1 - leverage_ratio / DEBT_TO_INCOME_CEILING)

    service_ratio = inputs.monthly_debt_payments / inputs.monthly_income
    service_headroom = clamp01(1 - service_ratio / DEBT_SERVICE_DISTRESS_RATIO)

    blended = LEVERAGE_WEIGHT * leverage_score + (1 - LEVERAGE_WEIGHT)
    return clamp(service_headroom * blended * 100)


def savings_rate_score(inputs: ScoreInput) -> float:
    """Share of income left after expenses; 0% or worse = 0, 20%+ = 100."""
    savings_rate = (inputs.monthly_income - inputs.monthly_expenses) / inputs.monthly_income
    return clamp01(savings_rate / SAVINGS_RATE_TARGET) * 100


def investment_readiness_score(inputs: ScoreInput) -> float:
    """Average of experience level and portfolio size relative to annual income."""
    annual_income = inputs.monthly_income * 12
    portfolio_ratio = inputs.portfolio_value / (annual_income * PORTFOLIO_TARGET_INCOME_MULTIPLE)
    portfolio_score = clamp01(portfolio_ratio) * 100

    experience_score = EXPERIENCE_READINESS[inputs.investment_experience]
    return clamp((experience_score + portfolio_score) / 2)


def financial_knowledge_score(inputs: ScoreInput) -> float:
    """
    Experience base score plus a bonus when risk tolerance matches experience.

    beginner=40, intermediate=70, advanced=100; +10 (capped) for
    beginner/conservative, intermediate/moderate, advanced/aggressive.
    """
    score = EXPERIENCE_KNOWLEDGE[inputs.investment_experience]
    if ALIGNED_RISK_TOLERANCE[inputs.investment_experience] == inputs.risk_tolerance:
        score += ALIGNMENT_BONUS
    return clamp(score)


def calculate_breakdown(inputs: ScoreInput) -> ScoreBreakdown:
    return ScoreBreakdown(
        emergency_fund_score=emergency_fund_score(inputs),
        debt_score=debt_score(inputs),
        savings_rate_score=savings_rate_score(inputs),
        investment_readiness_score=investment_readiness_score(inputs),
        financial_knowledge_score=financial_knowledge_score(inputs),
    )


def calculate_composite_score(breakdown: ScoreBreakdown) -> float:
    """Fixed-weight average of the five sub-scores, clamped to [0, 100]."""
    components = breakdown.to_dict()
    score = sum(components[name] * weight for name, weight in SCORE_WEIGHTS.items())

    if not math.isfinite(score):
        raise ComputationError(f"Composite score is not finite: {score}")

    return clamp(score)


def compute_pfhr(inputs: ScoreInput) -> PFHRResult:
    """
    Main entry point: score a validated financial profile.

    The composite is returned unrounded; the category is derived from that
    unrounded value. Rounding belongs to presentation.

    Raises:
        ComputationError: monthly income is not positive (input skipped validation)
    """
    if inputs.monthly_income <= 0:
        raise ComputationError("Monthly income must be greater than 0 to calculate PFHR score")

    breakdown = calculate_breakdown(inputs)
    score = calculate_composite_score(breakdown)

    return PFHRResult(
        score=score,
        breakdown=breakdown,
        category=classify_score(score),
        risk_level=determine_risk_level(score, breakdown),
        recommendations=tuple(generate_recommendations(breakdown, inputs)),
    )
