"""Scoring thresholds shared by the calculator and recommendations.

Changing any of these changes what a score means: treat as a breaking change.
"""

EMERGENCY_FUND_TARGET_MONTHS = 6
DEBT_TO_INCOME_CEILING = 0.36  # total debt / annual income at which leverage scores 0
DEBT_SERVICE_DISTRESS_RATIO = 0.45  # monthly payments / monthly income at which debt scores 0
SAVINGS_RATE_TARGET = 0.20
PORTFOLIO_TARGET_INCOME_MULTIPLE = 1.0  # portfolio value / annual income
