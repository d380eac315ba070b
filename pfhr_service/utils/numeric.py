"""Numeric helpers shared by scoring and recommendations"""


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp value to [lo, hi]"""
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def format_minor_units(amount: float) -> str:
    """Render an amount in minor units (cents/paise) as e.g. '18,000.00'"""
    return f"{amount / 100:,.2f}"
