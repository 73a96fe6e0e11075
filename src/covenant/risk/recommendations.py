"""
Reviewer recommendations derived from a risk assessment.
"""

from types import MappingProxyType
from typing import Iterable

from covenant.models import RiskLevel
from covenant.risk.factors import CATEGORY_RISK, CONTRACT_VALUE, VENDOR_RISK, RiskFactor

HIGH_RISK_FACTOR_THRESHOLD = 6

# Only these factors produce factor-specific advice
FACTOR_RECOMMENDATIONS = MappingProxyType({
    CONTRACT_VALUE: (
        "Consider additional approval layers due to high contract value",
        "Implement enhanced monitoring and milestone tracking",
    ),
    VENDOR_RISK: (
        "Conduct thorough vendor due diligence",
        "Consider performance bonds or guarantees",
    ),
    CATEGORY_RISK: (
        "Apply category-specific compliance checks",
        "Involve subject matter experts in review process",
    ),
})

ESCALATED_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.CRITICAL})
ESCALATION_RECOMMENDATIONS = (
    "Require senior management approval",
    "Implement weekly progress monitoring",
    "Consider legal review for all amendments",
)

BASELINE_RECOMMENDATIONS = (
    "Standard monitoring procedures apply",
    "Regular milestone reviews recommended",
)


def generate_recommendations(
    factors: Iterable[RiskFactor],
    level: RiskLevel,
) -> list[str]:
    """
    Generate action recommendations for an assessed contract.

    Factor advice follows the order of the factor list, each factor name
    contributing at most once. Escalation advice is added for high and
    critical levels. When nothing applies the baseline advice is returned.

    Args:
        factors: Ordered risk factors of the contract
        level: Classified risk level

    Returns:
        Ordered list of recommendation texts
    """
    recommendations: list[str] = []
    advised: set[str] = set()

    for factor in factors:
        if factor.value < HIGH_RISK_FACTOR_THRESHOLD or factor.name in advised:
            continue
        advice = FACTOR_RECOMMENDATIONS.get(factor.name)
        if advice:
            recommendations.extend(advice)
            advised.add(factor.name)

    if level in ESCALATED_LEVELS:
        recommendations.extend(ESCALATION_RECOMMENDATIONS)

    if not recommendations:
        recommendations.extend(BASELINE_RECOMMENDATIONS)

    return recommendations
