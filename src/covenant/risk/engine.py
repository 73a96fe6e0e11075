"""
Contract risk assessment.

Runs the full pipeline for a contract: factors, score, level and
recommendations. Assessments are derived on demand and never stored
here; persisting them is the caller's decision.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from covenant.models import Contract, RiskLevel
from covenant.risk.factors import RiskFactor, compute_factors
from covenant.risk.recommendations import generate_recommendations
from covenant.risk.score import classify_level, compute_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiskAssessmentResult:
    """Complete risk assessment of one contract."""

    score: float  # 0.0 to 10.0, one decimal
    level: RiskLevel
    factors: tuple[RiskFactor, ...]
    recommendations: tuple[str, ...]

    @property
    def requires_escalation(self) -> bool:
        """Check if the level calls for senior review."""
        return self.level.severity >= RiskLevel.HIGH.severity

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (risk assessment record shape)."""
        return {
            "score": self.score,
            "level": self.level.value,
            "factors": [f.to_dict() for f in self.factors],
            "recommendations": list(self.recommendations),
        }


def assess_contract(contract: Contract) -> RiskAssessmentResult:
    """
    Assess the risk of a single contract.

    Args:
        contract: Contract snapshot

    Returns:
        RiskAssessmentResult with score, level, factors and recommendations
    """
    factors = compute_factors(contract)
    score = compute_score(factors)
    level = classify_level(score)
    recommendations = generate_recommendations(factors, level)

    logger.debug(
        f"Assessed contract {contract.id or '<unsaved>'}: "
        f"score={score} level={level.value}"
    )

    return RiskAssessmentResult(
        score=score,
        level=level,
        factors=tuple(factors),
        recommendations=tuple(recommendations),
    )


def assess_contracts(contracts: Iterable[Contract]) -> list[RiskAssessmentResult]:
    """Assess each contract independently, preserving input order."""
    return [assess_contract(contract) for contract in contracts]
