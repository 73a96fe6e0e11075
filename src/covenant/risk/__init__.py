"""
Contract risk assessment module.

Computes weighted risk for contracts:
- Risk factors from value, duration, vendor, category and compliance
- Overall score and risk level
- Reviewer recommendations
"""

from covenant.risk.factors import RiskFactor, compute_factors
from covenant.risk.score import classify_level, compute_score
from covenant.risk.recommendations import generate_recommendations
from covenant.risk.engine import (
    RiskAssessmentResult,
    assess_contract,
    assess_contracts,
)

__all__ = [
    "RiskFactor",
    "compute_factors",
    "compute_score",
    "classify_level",
    "generate_recommendations",
    "RiskAssessmentResult",
    "assess_contract",
    "assess_contracts",
]
