"""
Risk score aggregation and level classification.

The score is the weight-normalized mean of factor values, so it never
exceeds the largest individual factor value.
"""

from decimal import ROUND_HALF_UP, Decimal
from functools import reduce
from typing import Iterable, Union

from covenant.models import RiskLevel
from covenant.risk.factors import RiskFactor

# (minimum score, level) from the top down; anything below is LOW
RISK_THRESHOLDS = (
    (Decimal("7.0"), RiskLevel.CRITICAL),
    (Decimal("5.0"), RiskLevel.HIGH),
    (Decimal("3.0"), RiskLevel.MEDIUM),
)
SCORE_PRECISION = Decimal("0.1")


def round_half_up(value: Decimal, precision: Decimal) -> Decimal:
    """Round to the given precision with halves rounded up."""
    return value.quantize(precision, rounding=ROUND_HALF_UP)


def compute_score(factors: Iterable[RiskFactor]) -> float:
    """
    Calculate the overall risk score from factors.

    Args:
        factors: Weighted risk factors

    Returns:
        Weighted mean of factor values, rounded to one decimal

    Raises:
        ValueError: If no factor carries weight
    """
    weighted_sum, total_weight = reduce(
        lambda acc, f: (acc[0] + f.weighted_value, acc[1] + f.weight),
        factors,
        (Decimal("0"), Decimal("0")),
    )
    if total_weight <= 0:
        raise ValueError("Cannot score a contract without weighted risk factors")

    return float(round_half_up(weighted_sum / total_weight, SCORE_PRECISION))


def classify_level(score: Union[float, Decimal]) -> RiskLevel:
    """Map a score onto its risk level."""
    score = Decimal(str(score))
    for minimum, level in RISK_THRESHOLDS:
        if score >= minimum:
            return level
    return RiskLevel.LOW
