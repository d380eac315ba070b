"""Map composite PFHR scores to user-facing categories"""

from pfhr_service.domain.models import Category

# Upper bounds are inclusive: a score of exactly 33.0 is still fragile
FRAGILE_MAX = 33.0
DEVELOPING_MAX = 66.0


def classify_score(score: float) -> Category:
    """
    Map an unrounded composite score to a category band.

    Bands:
    - score <= 33:      fragile
    - 33 < score <= 66: developing
    - score > 66:       healthy
    """
    if score <= FRAGILE_MAX:
        return Category.FRAGILE
    elif score <= DEVELOPING_MAX:
        return Category.DEVELOPING
    else:
        return Category.HEALTHY
