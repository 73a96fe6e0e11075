"""
Compliance aggregation module.

Summarizes compliance checks per rule category and computes the
fleet-wide dashboard KPIs.
"""

from covenant.compliance.aggregator import (
    CategoryTally,
    ComplianceBand,
    ComplianceCategorySummary,
    classify_compliance_band,
    compliance_percentage,
    group_by_category,
    summarize_compliance,
    to_summaries,
)
from covenant.compliance.dashboard import (
    DashboardStats,
    compute_dashboard_stats,
    select_high_risk_contracts,
)

__all__ = [
    "CategoryTally",
    "ComplianceBand",
    "ComplianceCategorySummary",
    "classify_compliance_band",
    "compliance_percentage",
    "group_by_category",
    "summarize_compliance",
    "to_summaries",
    "DashboardStats",
    "compute_dashboard_stats",
    "select_high_risk_contracts",
]
