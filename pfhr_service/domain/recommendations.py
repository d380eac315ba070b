"""Risk level assessment and improvement recommendations for a scored profile"""

from typing import List

from pfhr_service.domain.constants import (
    DEBT_TO_INCOME_CEILING,
    EMERGENCY_FUND_TARGET_MONTHS,
    PORTFOLIO_TARGET_INCOME_MULTIPLE,
    SAVINGS_RATE_TARGET,
)
from pfhr_service.domain.models import RiskLevel, ScoreBreakdown, ScoreInput
from pfhr_service.utils.numeric import format_minor_units

WEAK_COMPONENT_THRESHOLD = 50.0
WEAK_KNOWLEDGE_THRESHOLD = 60.0


def determine_risk_level(score: float, breakdown: ScoreBreakdown) -> RiskLevel:
    """
    Overall risk from composite score and the two critical components.

    - high:   score < 50, or emergency fund / debt component below 30
    - low:    score > 75 and both critical components above 60
    - medium: everything else
    """
    if score < 50 or breakdown.emergency_fund_score < 30 or breakdown.debt_score < 30:
        return RiskLevel.HIGH

    if score > 75 and breakdown.emergency_fund_score > 60 and breakdown.debt_score > 60:
        return RiskLevel.LOW

    return RiskLevel.MEDIUM


def generate_recommendations(breakdown: ScoreBreakdown, inputs: ScoreInput) -> List[str]:
    """One actionable suggestion per weak component, in breakdown order."""
    recommendations: List[str] = []

    if breakdown.emergency_fund_score < WEAK_COMPONENT_THRESHOLD:
        target = inputs.monthly_expenses * EMERGENCY_FUND_TARGET_MONTHS
        recommendations.append(
            f"Build emergency fund to {EMERGENCY_FUND_TARGET_MONTHS} months of expenses "
            f"(target: {format_minor_units(target)})"
        )

    if breakdown.debt_score < WEAK_COMPONENT_THRESHOLD:
        debt_to_income = inputs.total_debt / (inputs.monthly_income * 12)
        if debt_to_income > DEBT_TO_INCOME_CEILING:
            recommendations.append(
                f"Reduce debt-to-income ratio (currently {debt_to_income:.1%}, "
                f"target: <{DEBT_TO_INCOME_CEILING:.0%})"
            )
        else:
            recommendations.append("Focus on paying down high-interest debt")

    if breakdown.savings_rate_score < WEAK_COMPONENT_THRESHOLD:
        current_savings = inputs.monthly_income - inputs.monthly_expenses
        target_savings = inputs.monthly_income * SAVINGS_RATE_TARGET
        recommendations.append(
            f"Increase savings rate to {SAVINGS_RATE_TARGET:.0%} "
            f"(target: {format_minor_units(target_savings)}/month, "
            f"currently: {format_minor_units(current_savings)}/month)"
        )

    if breakdown.investment_readiness_score < WEAK_COMPONENT_THRESHOLD:
        target_portfolio = inputs.monthly_income * 12 * PORTFOLIO_TARGET_INCOME_MULTIPLE
        recommendations.append(
            f"Build investment portfolio (target: {format_minor_units(target_portfolio)})"
        )

    if breakdown.financial_knowledge_score < WEAK_KNOWLEDGE_THRESHOLD:
        recommendations.append(
            "Consider financial education resources or working with a financial advisor"
        )

    if not recommendations:
        recommendations.append("Maintain current financial practices")

    return recommendations
