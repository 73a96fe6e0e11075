"""
Dashboard API routes.

Provides aggregated statistics for the dashboard view.
"""

from fastapi import APIRouter

from covenant.api.schemas import (
    ContractIn,
    DashboardStatsRequest,
    DashboardStatsResponse,
)
from covenant.compliance import compute_dashboard_stats, select_high_risk_contracts

router = APIRouter()


@router.post("/stats", response_model=DashboardStatsResponse)
def get_dashboard_stats(request: DashboardStatsRequest) -> DashboardStatsResponse:
    """
    Get aggregated dashboard statistics.

    Returns contract counts and the overall compliance score.
    """
    stats = compute_dashboard_stats(
        [c.to_contract() for c in request.contracts],
        [c.to_check() for c in request.compliance_checks],
    )
    return DashboardStatsResponse.from_stats(stats)


@router.post("/high-risk", response_model=list[ContractIn])
def get_high_risk_contracts(contracts: list[ContractIn]) -> list[ContractIn]:
    """
    List high-risk contracts, highest stored score first.
    """
    selected = select_high_risk_contracts(c.to_contract() for c in contracts)
    return [ContractIn.model_validate(c.to_dict()) for c in selected]
