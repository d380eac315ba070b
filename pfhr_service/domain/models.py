"""Domain models - pure Python dataclasses representing scoring values"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Tuple


class InvestmentExperience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class RiskTolerance(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class Category(str, Enum):
    """Financial health band shown to the investor"""

    FRAGILE = "fragile"
    DEVELOPING = "developing"
    HEALTHY = "healthy"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class ScoreInput:
    """Validated financial profile. Monetary fields are in minor units (cents/paise)."""

    monthly_income: int
    monthly_expenses: int
    emergency_fund: int
    total_debt: int
    monthly_debt_payments: int
    portfolio_value: int
    investment_experience: InvestmentExperience
    risk_tolerance: RiskTolerance
    age: int

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["investment_experience"] = self.investment_experience.value
        data["risk_tolerance"] = self.risk_tolerance.value
        return data


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-category sub-scores, each on a 0-100 scale"""

    emergency_fund_score: float
    debt_score: float
    savings_rate_score: float
    investment_readiness_score: float
    financial_knowledge_score: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class PFHRResult:
    """Output of the PFHR calculator"""

    score: float
    breakdown: ScoreBreakdown
    category: Category
    risk_level: RiskLevel
    recommendations: Tuple[str, ...]
