"""
Fleet-wide dashboard statistics.

Provides the KPI counts shown on the contract dashboard. Compliance
figures reuse the category tallies and rounding of the compliance
aggregator so both views agree.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from covenant.compliance.aggregator import compliance_percentage, group_by_category
from covenant.models import ComplianceCheck, Contract, ContractStatus, RiskLevel

logger = logging.getLogger(__name__)

# Only HIGH counts toward the high-risk KPI; CRITICAL is excluded by policy
HIGH_RISK_KPI_LEVEL = RiskLevel.HIGH
COMPLIANCE_SCORE_PLACES = 1


@dataclass(frozen=True)
class DashboardStats:
    """Dashboard KPI snapshot."""

    total_contracts: int = 0
    active_contracts: int = 0
    high_risk_contracts: int = 0
    pending_reviews: int = 0
    compliance_score: float = 100.0  # 0.0 to 100.0, one decimal

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "total_contracts": self.total_contracts,
            "active_contracts": self.active_contracts,
            "high_risk_contracts": self.high_risk_contracts,
            "pending_reviews": self.pending_reviews,
            "compliance_score": self.compliance_score,
        }


def compute_dashboard_stats(
    contracts: Iterable[Contract],
    compliance_checks: Iterable[ComplianceCheck],
) -> DashboardStats:
    """
    Compute dashboard statistics over all contracts and checks.

    The high-risk count uses the risk level stored on each contract, and
    only level HIGH is counted.

    Args:
        contracts: All contracts
        compliance_checks: All compliance checks

    Returns:
        DashboardStats snapshot
    """
    contracts = list(contracts)

    active = sum(1 for c in contracts if c.status == ContractStatus.ACTIVE)
    high_risk = sum(1 for c in contracts if c.risk_level == HIGH_RISK_KPI_LEVEL)
    pending = sum(1 for c in contracts if c.status == ContractStatus.UNDER_REVIEW)

    tallies = group_by_category(compliance_checks).values()
    total_checks = sum(t.total for t in tallies)
    compliant_checks = sum(t.compliant for t in tallies)

    stats = DashboardStats(
        total_contracts=len(contracts),
        active_contracts=active,
        high_risk_contracts=high_risk,
        pending_reviews=pending,
        compliance_score=float(
            compliance_percentage(compliant_checks, total_checks, COMPLIANCE_SCORE_PLACES)
        ),
    )
    logger.debug(f"Dashboard stats computed over {len(contracts)} contracts, {total_checks} checks")
    return stats


def select_high_risk_contracts(contracts: Iterable[Contract]) -> list[Contract]:
    """
    List contracts whose stored risk level is HIGH.

    Ordered by stored risk score, highest first; contracts without a
    score come last.
    """
    high_risk = [c for c in contracts if c.risk_level == HIGH_RISK_KPI_LEVEL]
    return sorted(
        high_risk,
        key=lambda c: (c.risk_score is None, -(c.risk_score or 0.0)),
    )
